"""A single MIME record: extension, content type and transfer encoding."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import ClassVar

BINARY_ENCODINGS: frozenset[str] = frozenset({"base64", "8bit"})


@dataclass(frozen=True, slots=True)
class Info:
    """One parsed dataset line.

    Examples::

        info = Info.parse("pdf application/pdf base64")
        info.content_type   # "application/pdf"
        info.is_binary      # True
    """

    extension: str
    content_type: str
    encoding: str

    FIELD_COUNT: ClassVar[int] = 3

    @classmethod
    def parse(cls, line: str) -> Info | None:
        """Build an ``Info`` from ``extension content_type encoding``.

        Returns ``None`` when *line* has fewer than three whitespace-separated
        fields. Anything after the third field is ignored.
        """
        parts = line.split()
        if len(parts) < cls.FIELD_COUNT:
            return None
        return cls(extension=parts[0], content_type=parts[1], encoding=parts[2])

    @property
    def is_binary(self) -> bool:
        return self.encoding in BINARY_ENCODINGS

    def to_dict(self) -> dict[str, str | bool]:
        data: dict[str, str | bool] = asdict(self)
        data["binary"] = self.is_binary
        return data

"""In-memory MIME database indexed by extension and by content type."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path, PurePath
from types import MappingProxyType

from .config.settings import cfg
from .errors import LoadError
from .info import Info

logger = logging.getLogger(__name__)

Line = str | bytes


def _decode(line: Line) -> str:
    if isinstance(line, str):
        return line
    if isinstance(line, bytes):
        try:
            return line.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise LoadError(f"dataset line is not valid UTF-8: {line[:40]!r}") from exc
    raise LoadError(f"dataset line must be str or bytes, got {type(line).__name__}")


def _build_index(lines: Iterable[Line], key: str, label: str) -> dict[str, Info]:
    index: dict[str, Info] = {}
    skipped = 0
    try:
        for raw in lines:
            info = Info.parse(_decode(raw))
            if info is None:
                skipped += 1
                continue
            # last line wins on duplicate keys
            index[getattr(info, key)] = info
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadError(f"cannot read {label} dataset: {exc}") from exc
    if skipped:
        logger.debug("Skipped %d short line(s) in %s dataset", skipped, label)
    return index


def _read_lines(path: Path) -> list[str]:
    try:
        return path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadError(f"cannot load MIME dataset {path}: {exc}") from exc


class MimeDatabase:
    """Read-only lookup tables built once from two datasets.

    *ext_lines* feeds the extension index and *content_type_lines* feeds the
    content-type index. The two are independent: the content-type index
    holds one preferred record per type, whatever the extension index says.
    Both indices are frozen after ``__init__`` so instances can be shared
    between threads without locking.
    """

    def __init__(self, ext_lines: Iterable[Line], content_type_lines: Iterable[Line]) -> None:
        self._by_ext: Mapping[str, Info] = MappingProxyType(
            _build_index(ext_lines, "extension", "extension")
        )
        # keys that lowercasing a query can never reach, e.g. "ZIP" for "zip"
        self._by_folded_ext: Mapping[str, Info] = MappingProxyType(
            {ext.lower(): info for ext, info in self._by_ext.items() if ext != ext.lower()}
        )
        self._by_content_type: Mapping[str, Info] = MappingProxyType(
            _build_index(content_type_lines, "content_type", "content-type")
        )
        logger.info(
            "Loaded %d extension and %d content-type records",
            len(self._by_ext), len(self._by_content_type),
        )

    # -- constructors ------------------------------------------------------

    @classmethod
    def from_files(cls, ext_path: str | Path, content_type_path: str | Path) -> MimeDatabase:
        """Load both datasets from UTF-8 text files."""
        return cls(_read_lines(Path(ext_path)), _read_lines(Path(content_type_path)))

    @classmethod
    def default(cls) -> MimeDatabase:
        """Load the bundled datasets, or the ones configured in the environment."""
        return cls.from_files(cfg.ext_db_path, cfg.content_type_db_path)

    # -- lookups -----------------------------------------------------------

    def lookup_by_extension(self, extension: str) -> Info | None:
        """Exact key first, then the lowercased key.

        As a last resort, and unlike a plain exact-then-lowercase lookup, a
        key stored with uppercase letters matches case-insensitively, so
        ``"zip"`` finds a dataset entry spelled ``"ZIP"`` when no lowercase
        entry exists. An exact spelling always wins.
        """
        info = self._by_ext.get(extension)
        if info is None:
            lowered = extension.lower()
            info = self._by_ext.get(lowered) or self._by_folded_ext.get(lowered)
        return info

    def lookup_by_content_type(self, content_type: str) -> Info | None:
        return self._by_content_type.get(content_type)

    def lookup_by_filename(self, filename: str) -> Info | None:
        extension = extension_of(filename)
        if not extension:
            return None
        return self.lookup_by_extension(extension)

    # -- introspection -----------------------------------------------------

    @property
    def extension_count(self) -> int:
        return len(self._by_ext)

    @property
    def content_type_count(self) -> int:
        return len(self._by_content_type)

    def extensions(self) -> Iterator[str]:
        return iter(self._by_ext)

    def content_types(self) -> Iterator[str]:
        return iter(self._by_content_type)

    def __repr__(self) -> str:
        return (
            f"MimeDatabase(extensions={self.extension_count}, "
            f"content_types={self.content_type_count})"
        )


def extension_of(filename: str) -> str:
    """Return the text after the last ``.`` of the final path component.

    Follows :class:`~pathlib.PurePath` rules: a trailing separator is ignored
    (``"foo.txt/"`` gives ``"txt"``), and ``""`` is returned when there is no
    dot, the name ends with a dot, or the only dot is a leading one
    (``.bashrc``).
    """
    return PurePath(filename).suffix[1:]

"""Library settings -- read from environment variables.

Only the dataset locations are configurable; everything else about the
database is fixed.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import ClassVar

from ..util.singletons import register_singleton

EXT_DB_NAME = "ext_mime.db"
CONTENT_TYPE_DB_NAME = "content_type_mime.db"


class Settings:
    """Runtime configuration sourced from environment variables."""

    _EXT_DB_ENV: ClassVar[str] = "MINIMIME_EXT_DB"
    _CONTENT_TYPE_DB_ENV: ClassVar[str] = "MINIMIME_CONTENT_TYPE_DB"

    def __init__(self) -> None:
        self.reload()

    def reload(self) -> None:
        """Re-read the environment."""
        self.ext_db_override: str = os.getenv(self._EXT_DB_ENV, "").strip()
        self.content_type_db_override: str = os.getenv(self._CONTENT_TYPE_DB_ENV, "").strip()

    # -- derived paths -----------------------------------------------------

    @property
    def data_dir(self) -> Path:
        return Path(__file__).resolve().parent.parent / "data"

    @property
    def ext_db_path(self) -> Path:
        if self.ext_db_override:
            return Path(self.ext_db_override).expanduser()
        return self.data_dir / EXT_DB_NAME

    @property
    def content_type_db_path(self) -> Path:
        if self.content_type_db_override:
            return Path(self.content_type_db_override).expanduser()
        return self.data_dir / CONTENT_TYPE_DB_NAME


# Module-level singleton
cfg = Settings()


def _reset_cfg() -> None:
    cfg.reload()


register_singleton(_reset_cfg)

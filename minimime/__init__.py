"""minimime -- fast MIME type lookups by filename, extension or content type.

Examples::

    import minimime

    info = minimime.lookup_by_filename("report.pdf")
    if info:
        print(info.content_type, info.is_binary)

The module-level functions share one database, built from the bundled
datasets on first use. A :class:`~minimime.errors.LoadError` raised while
building it propagates to the caller; the next call retries.
"""

from __future__ import annotations

from .database import MimeDatabase, extension_of
from .errors import LoadError
from .info import BINARY_ENCODINGS, Info
from .util.singletons import Lazy, register_singleton

__version__ = "0.1.0"

_db: Lazy[MimeDatabase] = Lazy(MimeDatabase.default)

register_singleton(_db.reset)


def get_database() -> MimeDatabase:
    """Return the shared database, building it on first call."""
    return _db.get()


def lookup_by_filename(filename: str) -> Info | None:
    return _db.get().lookup_by_filename(filename)


def lookup_by_extension(extension: str) -> Info | None:
    return _db.get().lookup_by_extension(extension)


def lookup_by_content_type(content_type: str) -> Info | None:
    return _db.get().lookup_by_content_type(content_type)


__all__ = [
    "BINARY_ENCODINGS",
    "Info",
    "LoadError",
    "MimeDatabase",
    "extension_of",
    "get_database",
    "lookup_by_content_type",
    "lookup_by_extension",
    "lookup_by_filename",
]

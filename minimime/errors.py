"""Exceptions raised while building a MIME database."""

from __future__ import annotations


class LoadError(Exception):
    """A dataset could not be read or decoded as text.

    Malformed individual lines never raise; they are skipped during parsing.
    """

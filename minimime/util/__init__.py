"""Shared utilities."""

from .singletons import Lazy, register_singleton, reset_all_singletons

__all__ = [
    "Lazy",
    "register_singleton",
    "reset_all_singletons",
]

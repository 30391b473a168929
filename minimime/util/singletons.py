"""Process-wide singletons: a one-time-init cell and a reset registry."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")

_reset_fns: list[Callable[[], None]] = []


def register_singleton(reset_fn: Callable[[], None]) -> None:
    """Register a reset function to be called during test teardown."""
    _reset_fns.append(reset_fn)


def reset_all_singletons() -> None:
    """Reset every registered singleton -- intended for test isolation."""
    for fn in _reset_fns:
        fn()


class Lazy(Generic[T]):
    """Value built by *factory* on first :meth:`get`, exactly once.

    Concurrent first callers block on a lock while one of them runs the
    factory; once the value exists, reads take no lock. If the factory
    raises, the cell stays empty and the next :meth:`get` tries again.
    """

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory
        self._lock = threading.Lock()
        self._value: T | None = None
        self._ready = False

    @property
    def initialized(self) -> bool:
        return self._ready

    def get(self) -> T:
        if self._ready:
            return self._value  # type: ignore[return-value]
        with self._lock:
            if not self._ready:
                self._value = self._factory()
                self._ready = True
        return self._value  # type: ignore[return-value]

    def reset(self) -> None:
        with self._lock:
            self._value = None
            self._ready = False

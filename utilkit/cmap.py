"""A thread-safe map from string keys to integers."""

from __future__ import annotations

import threading

__all__ = ["KeyNotFoundError", "ConcurrentMap"]


class KeyNotFoundError(KeyError):
    """Raised when a key is missing from a :class:`ConcurrentMap`."""

    def __str__(self) -> str:
        return "key not found"


class ConcurrentMap:
    """A map guarded by a lock for use across threads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._items: dict[str, int] = {}

    def set(self, key: str, value: int) -> None:
        """Store ``value`` under ``key``."""
        with self._lock:
            self._items[key] = value

    def get(self, key: str) -> int:
        """Return the value for ``key``, raising :class:`KeyNotFoundError` if absent."""
        with self._lock:
            try:
                return self._items[key]
            except KeyError:
                raise KeyNotFoundError(key) from None

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
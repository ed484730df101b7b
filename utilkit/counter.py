"""Thread-safe counters: a single total and a per-key tally."""

from __future__ import annotations

import threading

__all__ = ["CounterError", "Counter", "KeyedCounter"]


class CounterError(ValueError):
    """Raised for invalid keyed-counter operations."""


class Counter:
    """A single thread-safe counter."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value = 0

    def increment(self) -> None:
        """Add one to the counter."""
        with self._lock:
            self._value += 1

    def value(self) -> int:
        """Return the current count."""
        with self._lock:
            return self._value


class KeyedCounter:
    """Thread-safe counts kept per non-empty string key."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._counts: dict[str, int] = {}

    @staticmethod
    def _check(key: str) -> None:
        if key == "":
            raise CounterError("empty key is not allowed")

    def increment(self, key: str) -> None:
        """Add one to the count for ``key``."""
        with self._lock:
            self._check(key)
            self._counts[key] = self._counts.get(key, 0) + 1

    def decrement(self, key: str) -> None:
        """Subtract one from the count for ``key``; it must be above zero."""
        with self._lock:
            self._check(key)
            if self._counts.get(key, 0) <= 0:
                raise CounterError("key not found or count is zero")
            self._counts[key] -= 1

    def get_count(self, key: str) -> int:
        """Return the count for ``key``; the key must have been seen."""
        with self._lock:
            self._check(key)
            try:
                return self._counts[key]
            except KeyError:
                raise CounterError("key not found") from None
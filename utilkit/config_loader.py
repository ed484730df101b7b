"""Load ``key=value`` configuration files, later files overriding earlier ones."""

from __future__ import annotations

import argparse
import threading
import time
from collections.abc import Iterable, Iterator, Mapping

__all__ = [
    "ConfigError",
    "Config",
    "split_line",
    "parse_config_file",
    "load_config",
    "main",
]

DEFAULT_FILES = ("config1.txt", "config2.txt")
DEFAULT_KEY = "app_name"


class ConfigError(OSError):
    """Raised when a configuration file cannot be opened or read."""


class Config:
    """A thread-safe mapping of configuration keys to values."""

    def __init__(self, data: Mapping[str, str] | None = None) -> None:
        self._lock = threading.RLock()
        self._data: dict[str, str] = dict(data or {})

    def get(self, key: str) -> str | None:
        """Return the value stored for ``key``, or ``None`` if it is absent."""
        with self._lock:
            return self._data.get(key)

    def merge(self, values: Mapping[str, str]) -> None:
        """Copy ``values`` into the configuration, replacing existing keys."""
        with self._lock:
            self._data.update(values)

    @property
    def data(self) -> dict[str, str]:
        """A snapshot of all keys and values."""
        with self._lock:
            return dict(self._data)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self.data)

    def __repr__(self) -> str:
        return f"Config({self.data!r})"


def split_line(line: str) -> tuple[str, str] | None:
    """Split ``key=value`` at the first ``=``, trimming both sides.

    Returns ``None`` when the line holds no ``=``.
    """
    key, sep, value = line.partition("=")
    if not sep:
        return None
    return key.strip(), value.strip()


def _lines(handle: Iterable[str]) -> Iterator[str]:
    for raw in handle:
        line = raw[:-1] if raw.endswith("\n") else raw
        if line.endswith("\r"):
            line = line[:-1]
        yield line


def parse_config_file(filename: str) -> dict[str, str]:
    """Read one configuration file into a dict.

    Empty lines and lines starting with ``#`` are skipped, as are lines
    without ``=``.
    """
    try:
        handle = open(filename, encoding="utf-8", newline="")
    except OSError as exc:
        raise ConfigError(f"error opening file {filename}: {exc}") from exc

    values: dict[str, str] = {}
    with handle:
        try:
            for line in _lines(handle):
                if not line or line.startswith("#"):
                    continue
                pair = split_line(line)
                if pair is not None:
                    key, value = pair
                    values[key] = value
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigError(f"error reading file {filename}: {exc}") from exc
    return values


def load_config(files: Iterable[str]) -> Config:
    """Load ``files`` in order; keys in later files override earlier ones.

    Raises :class:`ConfigError` for the first file that fails.
    """
    config = Config()
    for filename in files:
        config.merge(parse_config_file(filename))
    return config


def main(argv: list[str] | None = None) -> int:
    """Load configuration files and print the value of one key."""
    parser = argparse.ArgumentParser(description="Load key=value configuration files.")
    parser.add_argument("files", nargs="*", default=list(DEFAULT_FILES))
    parser.add_argument("--key", default=DEFAULT_KEY)
    args = parser.parse_args(argv)

    start = time.perf_counter()
    try:
        config = load_config(args.files)
    except ConfigError as exc:
        print(f"Error loading config: {exc}")
        return 1
    elapsed = time.perf_counter() - start
    print(f"Configuration loaded in {elapsed:.6f}s")

    value = config.get(args.key)
    if value is not None:
        print(f"Value for '{args.key}': {value}")
    else:
        print(f"Key '{args.key}' not found")
    return 0
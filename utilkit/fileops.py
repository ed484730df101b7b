"""Open a file, write a fixed payload to it, and always close it."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

__all__ = ["FileProcessError", "open_and_process_file"]

PAYLOAD = b"some data"


class FileProcessError(OSError):
    """Raised when a file cannot be opened or processed."""


def _open_read_only(file_path: str) -> Any:
    return open(file_path, "rb")


def open_and_process_file(
    file_path: str, opener: Callable[[str], Any] | None = None
) -> None:
    """Open ``file_path`` with ``opener`` and write a fixed payload to it.

    The default opener opens the file read-only. The opened file is closed
    whether or not the write succeeds.
    """
    open_file = opener or _open_read_only
    try:
        handle = open_file(file_path)
    except Exception as exc:
        raise FileProcessError(f"failed to open file: {exc}") from exc
    try:
        handle.write(PAYLOAD)
    except Exception as exc:
        raise FileProcessError(f"failed to write to file: {exc}") from exc
    finally:
        handle.close()
"""File processing built on an injectable file handler."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import IO, Any

__all__ = ["FileHandler", "OSFileHandler", "MemoryFileHandler", "FileProcessor"]

DEFAULT_CONTENT = b"Hello, World!"


class FileHandler(ABC):
    """The file operations a :class:`FileProcessor` relies on."""

    @abstractmethod
    def open(self, name: str) -> Any:
        """Open ``name`` for reading and writing, creating it if needed."""

    @abstractmethod
    def close(self, handle: Any) -> None:
        """Close a handle returned by :meth:`open`."""

    @abstractmethod
    def write(self, handle: Any, data: bytes) -> int:
        """Write ``data`` through ``handle``; return the number of bytes written."""

    @abstractmethod
    def exists(self, name: str) -> bool:
        """Tell whether ``name`` exists."""


class OSFileHandler(FileHandler):
    """File operations on the real file system."""

    def open(self, name: str) -> IO[bytes]:
        flags = os.O_RDWR | os.O_CREAT | getattr(os, "O_BINARY", 0)
        fd = os.open(name, flags, 0o666)
        return os.fdopen(fd, "r+b")

    def close(self, handle: IO[bytes]) -> None:
        handle.close()

    def write(self, handle: IO[bytes], data: bytes) -> int:
        return handle.write(data)

    def exists(self, name: str) -> bool:
        try:
            os.stat(name)
        except FileNotFoundError:
            return False
        except OSError:
            return True
        return True


@dataclass
class _MemoryFile:
    name: str
    closed: bool = False


class MemoryFileHandler(FileHandler):
    """File operations on a dict of names to contents, for tests and dry runs."""

    def __init__(self, files: dict[str, bytes] | None = None) -> None:
        self.files: dict[str, bytes] = dict(files or {})

    def open(self, name: str) -> _MemoryFile:
        self.files.setdefault(name, b"")
        return _MemoryFile(name)

    def close(self, handle: _MemoryFile) -> None:
        handle.closed = True

    def write(self, handle: _MemoryFile, data: bytes) -> int:
        if handle.closed:
            raise ValueError("I/O operation on closed file")
        self.files[handle.name] += data
        return len(data)

    def exists(self, name: str) -> bool:
        return name in self.files


class FileProcessor:
    """Processes files through an injected :class:`FileHandler`."""

    def __init__(self, file_handler: FileHandler) -> None:
        self._handler = file_handler

    def process_file(self, filename: str) -> str:
        """Process ``filename``, first creating it with default content if missing.

        Returns the name of the processed file. Raises :class:`OSError` when
        the file cannot be opened or written.
        """
        if not self._handler.exists(filename):
            print("File does not exist. Creating and writing to file.")
            try:
                handle = self._handler.open(filename)
            except OSError as exc:
                raise OSError(f"failed to open file for writing: {exc}") from exc
            try:
                self._handler.write(handle, DEFAULT_CONTENT)
            except OSError as exc:
                raise OSError(f"failed to write to file: {exc}") from exc
            finally:
                self._handler.close(handle)

        try:
            handle = self._handler.open(filename)
        except OSError as exc:
            raise OSError(f"failed to open file: {exc}") from exc
        try:
            print(f"Processing file: {filename}")
        finally:
            self._handler.close(handle)
        return filename
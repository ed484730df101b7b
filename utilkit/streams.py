"""An in-memory byte reader, a file writer, and a chunked copy between them."""

from __future__ import annotations

import argparse
from types import TracebackType

__all__ = ["CustomReader", "CustomWriter", "copy_stream", "main"]

SAMPLE_TEXT = "This is the data to be read and written to a new file."
DEFAULT_OUTPUT = "output.txt"
DEFAULT_BUFFER_SIZE = 8


class CustomReader:
    """Reads successive chunks from a fixed piece of data held in memory."""

    def __init__(self, data: str | bytes) -> None:
        self._data = data.encode("utf-8") if isinstance(data, str) else bytes(data)
        self._offset = 0

    def read(self, size: int = -1) -> bytes:
        """Return up to ``size`` bytes; ``b""`` once the data is exhausted.

        A negative ``size`` returns everything that is left.
        """
        if self._offset >= len(self._data):
            return b""
        end = len(self._data) if size < 0 else self._offset + size
        chunk = self._data[self._offset:end]
        self._offset += len(chunk)
        return chunk


class CustomWriter:
    """Writes bytes to a newly created (or truncated) file."""

    def __init__(self, filename: str) -> None:
        try:
            self._file = open(filename, "wb")
        except ValueError as exc:
            raise OSError(f"cannot create {filename!r}: {exc}") from exc

    def write(self, data: bytes) -> int:
        """Write ``data`` and return the number of bytes written."""
        return self._file.write(data)

    def close(self) -> None:
        """Close the underlying file."""
        self._file.close()

    def __enter__(self) -> CustomWriter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def copy_stream(reader: CustomReader, writer: CustomWriter, buffer_size: int = DEFAULT_BUFFER_SIZE) -> int:
    """Copy everything from ``reader`` to ``writer`` in chunks; return the byte count."""
    if buffer_size <= 0:
        raise ValueError("buffer_size must be positive")
    total = 0
    while chunk := reader.read(buffer_size):
        writer.write(chunk)
        total += len(chunk)
    return total


def main(argv: list[str] | None = None) -> int:
    """Copy a piece of text into a file through a small buffer."""
    parser = argparse.ArgumentParser(description="Copy text into a file in small chunks.")
    parser.add_argument("--text", default=SAMPLE_TEXT)
    parser.add_argument("--output", default=DEFAULT_OUTPUT)
    parser.add_argument("--buffer-size", type=int, default=DEFAULT_BUFFER_SIZE)
    args = parser.parse_args(argv)

    reader = CustomReader(args.text)
    try:
        writer = CustomWriter(args.output)
    except OSError as exc:
        print(f"Error creating writer: {exc}")
        return 1
    with writer:
        try:
            copy_stream(reader, writer, args.buffer_size)
        except OSError as exc:
            print(f"Error writing: {exc}")
            return 1
    print(f"Data has been successfully copied to {args.output}")
    return 0
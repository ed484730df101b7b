import pytest

from utilkit.fileprocessor import (
    FileHandler,
    FileProcessor,
    MemoryFileHandler,
    OSFileHandler,
)


class _FailingHandler(FileHandler):
    def __init__(self, fail_open=False, fail_write=False):
        self.fail_open = fail_open
        self.fail_write = fail_write
        self.closed = []

    def open(self, name):
        if self.fail_open:
            raise OSError("denied")
        return name

    def close(self, handle):
        self.closed.append(handle)

    def write(self, handle, data):
        if self.fail_write:
            raise OSError("disk full")
        return len(data)

    def exists(self, name):
        return False


def test_process_file_creates_missing_file_in_memory():
    handler = MemoryFileHandler()
    processor = FileProcessor(handler)
    assert processor.process_file("example.txt") == "example.txt"
    assert handler.exists("example.txt")
    assert handler.files["example.txt"] == b"Hello, World!"


def test_process_file_keeps_existing_content_in_memory():
    handler = MemoryFileHandler({"example.txt": b"keep"})
    FileProcessor(handler).process_file("example.txt")
    assert handler.files["example.txt"] == b"keep"


def test_memory_write_after_close_fails():
    handler = MemoryFileHandler()
    handle = handler.open("a")
    handler.close(handle)
    with pytest.raises(ValueError):
        handler.write(handle, b"x")


def test_os_handler_creates_file(tmp_path):
    path = tmp_path / "example.txt"
    FileProcessor(OSFileHandler()).process_file(str(path))
    assert path.read_bytes() == b"Hello, World!"


def test_os_handler_leaves_existing_file(tmp_path):
    path = tmp_path / "example.txt"
    path.write_bytes(b"existing")
    FileProcessor(OSFileHandler()).process_file(str(path))
    assert path.read_bytes() == b"existing"


def test_os_handler_exists(tmp_path):
    handler = OSFileHandler()
    path = tmp_path / "f"
    assert handler.exists(str(path)) is False
    path.write_bytes(b"")
    assert handler.exists(str(path)) is True


def test_open_failure_is_reported():
    processor = FileProcessor(_FailingHandler(fail_open=True))
    with pytest.raises(OSError, match="failed to open file for writing: denied"):
        processor.process_file("x.txt")


def test_write_failure_is_reported_and_handle_closed():
    handler = _FailingHandler(fail_write=True)
    with pytest.raises(OSError, match="failed to write to file: disk full"):
        FileProcessor(handler).process_file("x.txt")
    assert handler.closed == ["x.txt"]
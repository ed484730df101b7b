"""Standard-library helpers: query-string parsing, config files, thread-safe counters and maps, streams, file handling, SQLite transactions and struct generation."""

__version__ = "0.1.0"

__all__ = [
    "calculator",
    "cmap",
    "config_loader",
    "counter",
    "fileops",
    "fileprocessor",
    "params",
    "streams",
    "structgen",
    "transactions",
    "users",
]
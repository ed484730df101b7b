"""Run work inside a SQLite transaction that commits or rolls back as a whole."""

from __future__ import annotations

import sqlite3
from collections.abc import Callable
from typing import Any

__all__ = ["execute_in_transaction", "insert_user", "user_exists"]


def execute_in_transaction(
    connection: sqlite3.Connection, callback: Callable[[sqlite3.Cursor], Any]
) -> None:
    """Begin a transaction, run ``callback`` with a cursor, then commit.

    If ``callback`` raises, the transaction is rolled back and the exception
    propagates.
    """
    cursor = connection.cursor()
    try:
        cursor.execute("BEGIN")
        try:
            callback(cursor)
        except BaseException:
            connection.rollback()
            raise
        connection.commit()
    finally:
        cursor.close()


def insert_user(cursor: sqlite3.Cursor, username: str) -> None:
    """Insert a row into the ``users`` table."""
    cursor.execute("INSERT INTO users (username) VALUES (?)", (username,))


def user_exists(connection: sqlite3.Connection, username: str) -> bool:
    """Tell whether a user with ``username`` is stored."""
    (count,) = connection.execute(
        "SELECT COUNT(*) FROM users WHERE username = ?", (username,)
    ).fetchone()
    return count > 0
"""
SQLite adapter of the user persistence gateway.

Every call opens its own connection, runs parameterized statements,
commits or rolls back and closes the connection again, so requests
served from different threads never share a connection.  Dates are
stored as ``YYYY-MM-DD`` text.

``sqlite3`` errors are logged and re‑raised as ``StoreError`` with the
original exception chained.
"""

import logging
import sqlite3
from contextlib import contextmanager
from datetime import date
from typing import Iterator, List

from ..core.dates import format_dob, parse_dob
from ..core.db import get_cursor
from ..core.exceptions import NotFoundError, StoreError
from .base import StoredUser, UserRepository

logger = logging.getLogger(__name__)


class SQLiteUserRepository(UserRepository):
    """``UserRepository`` backed by the ``users`` table of a SQLite file."""

    def __init__(self, database_path: str):
        self.database_path = database_path

    @contextmanager
    def _cursor(self, operation: str) -> Iterator[sqlite3.Cursor]:
        """``get_cursor`` with driver errors translated to ``StoreError``."""
        try:
            with get_cursor(self.database_path) as cursor:
                yield cursor
        except sqlite3.Error as exc:
            logger.error("User %s failed on %s: %s", operation, self.database_path, exc)
            raise StoreError(f"{operation} failed: {exc}") from exc

    def create(self, name: str, dob: date) -> StoredUser:
        with self._cursor("create") as cursor:
            cursor.execute(
                "INSERT INTO users (name, dob) VALUES (?, ?)",
                (name, format_dob(dob)),
            )
            user_id = cursor.lastrowid
            row = cursor.execute(
                "SELECT id, name, dob FROM users WHERE id = ?", (user_id,)
            ).fetchone()
        return self._row_to_user(row)

    def get(self, user_id: int) -> StoredUser:
        with self._cursor("get") as cursor:
            row = cursor.execute(
                "SELECT id, name, dob FROM users WHERE id = ?", (user_id,)
            ).fetchone()
        if row is None:
            raise NotFoundError(user_id)
        return self._row_to_user(row)

    def list(self, limit: int, offset: int) -> List[StoredUser]:
        with self._cursor("list") as cursor:
            rows = cursor.execute(
                "SELECT id, name, dob FROM users ORDER BY id ASC LIMIT ? OFFSET ?",
                (limit, offset),
            ).fetchall()
        return [self._row_to_user(row) for row in rows]

    def update(self, user_id: int, name: str, dob: date) -> StoredUser:
        with self._cursor("update") as cursor:
            cursor.execute(
                "UPDATE users SET name = ?, dob = ? WHERE id = ?",
                (name, format_dob(dob), user_id),
            )
            if cursor.rowcount == 0:
                raise NotFoundError(user_id)
            row = cursor.execute(
                "SELECT id, name, dob FROM users WHERE id = ?", (user_id,)
            ).fetchone()
        return self._row_to_user(row)

    def delete(self, user_id: int) -> None:
        with self._cursor("delete") as cursor:
            cursor.execute("DELETE FROM users WHERE id = ?", (user_id,))
            if cursor.rowcount == 0:
                raise NotFoundError(user_id)

    @staticmethod
    def _row_to_user(row: sqlite3.Row) -> StoredUser:
        """Convert a database row to a ``StoredUser``."""
        try:
            dob = parse_dob(row["dob"])
        except ValueError as exc:
            raise StoreError(f"user {row['id']} has a corrupt dob: {row['dob']!r}") from exc
        return StoredUser(id=row["id"], name=row["name"], date_of_birth=dob)

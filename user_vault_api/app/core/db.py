"""
SQLite database integration and simple migration system.

This module provides functions for resolving the database location
from a connection string (``resolve_database_path``), obtaining a
connection (``get_connection``), applying migrations on application
start (``init_db``) and checking that the store answers (``ping``).
To switch to another DBMS you would add a new repository adapter and
replace the connection logic here.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Tuple

SQLITE_URL_PREFIX = "sqlite:///"

logger = logging.getLogger(__name__)

MIGRATIONS: List[Tuple[int, str]] = [
    # Migration 1: users table.  AUTOINCREMENT keeps deleted ids from
    # ever being handed out again.
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS users (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            dob TEXT NOT NULL
        );
        """,
    ),
]


def resolve_database_path(database_url: str) -> str:
    """Turn a plain path or ``sqlite:///`` URL into a filesystem path.

    Relative paths are resolved against the current working directory.
    In‑memory databases are rejected because every repository call opens
    its own connection and would see an empty database.
    """
    path = database_url
    if path.startswith(SQLITE_URL_PREFIX):
        path = path[len(SQLITE_URL_PREFIX):]
    if not path or path == ":memory:":
        raise ValueError("DATABASE_URL must point to a database file")
    return str(Path(path).expanduser().resolve())


def get_connection(database_path: str) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    The connection uses a row factory to access columns by name.  No
    type detection is enabled; dates come back as the ISO strings they
    were stored as.
    """
    conn = sqlite3.connect(database_path)
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor(database_path: str) -> Iterator[sqlite3.Cursor]:
    """Yield a cursor, commit on success and always close the connection."""
    conn = get_connection(database_path)
    try:
        yield conn.cursor()
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db(database_path: str) -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any new migrations defined in
    ``MIGRATIONS``.  To add a migration, append it with an incremented
    version number.
    """
    with get_cursor(database_path) as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) AS version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                logger.info("Applying migration %s", version)
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version


def ping(database_path: str) -> bool:
    """Return ``True`` when the database answers a trivial query."""
    try:
        with get_cursor(database_path) as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
    except sqlite3.Error:
        logger.warning("Database %s did not answer", database_path, exc_info=True)
        return False
    return True

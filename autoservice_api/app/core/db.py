"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``), a cursor context manager (``get_cursor``) and
``init_db``, which applies migrations and seeds the default brands on
application start.

The schema stays compatible with existing autoservice database files:
a mechanic's serviced brands live in a single comma‑joined ``brands``
column and its capacity in ``max_complexity``.

Applied migration versions are stored in the ``migrations`` table and
new migrations are executed in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Tuple

from .config import settings

logger = logging.getLogger(__name__)


MIGRATIONS: List[Tuple[int, str]] = [
    # Migration 1: initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS mechanics (
            id TEXT PRIMARY KEY,
            name TEXT NOT NULL,
            brands TEXT NOT NULL,
            max_complexity INTEGER NOT NULL DEFAULT 10
        );

        CREATE TABLE IF NOT EXISTS tasks (
            id TEXT PRIMARY KEY,
            mechanic_id TEXT NOT NULL,
            brand TEXT NOT NULL,
            name TEXT NOT NULL,
            complexity INTEGER NOT NULL,
            FOREIGN KEY(mechanic_id) REFERENCES mechanics(id)
        );

        CREATE TABLE IF NOT EXISTS brands (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT UNIQUE
        );
        """,
    ),
    # Migration 2: every admission check sums tasks by owner
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_tasks_mechanic_id ON tasks(mechanic_id);
        """,
    ),
]


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    If ``settings.database_url`` is an absolute path, use it directly.
    Otherwise resolve it relative to the project root.
    """
    db_url = settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent  # project root
    return str((base_dir / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name.  The connection waits at most ``settings.db_timeout`` seconds
    for a lock held by another connection, then raises
    ``sqlite3.OperationalError``.
    """
    conn = sqlite3.connect(get_database_path(), timeout=settings.db_timeout)
    conn.row_factory = sqlite3.Row
    # Foreign keys are off by default in SQLite and must be enabled per
    # connection for the tasks -> mechanics reference to be enforced.
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit."""
    conn = get_connection()
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def init_db() -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, applies every
    entry of ``MIGRATIONS`` newer than the recorded version and seeds
    the default brands with ``INSERT OR IGNORE`` so restarts are
    harmless.
    """
    with get_cursor() as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                logger.info("Applied migration %s", version)
                current_version = version

        for brand in settings.default_brand_list:
            cursor.execute("INSERT OR IGNORE INTO brands (name) VALUES (?)", (brand,))

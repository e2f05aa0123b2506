"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``) and applying migrations on application start
(``init_db``).  Warranty items are stored as generic content records
(``records``) with their fields kept as key/value pairs in
``record_meta``, so new record types or fields need no schema change.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from .config import settings


logger = logging.getLogger(__name__)


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: content records and their metadata
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS records (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            type TEXT NOT NULL,
            title TEXT NOT NULL DEFAULT '',
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );

        CREATE TABLE IF NOT EXISTS record_meta (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            record_id INTEGER NOT NULL,
            meta_key TEXT NOT NULL,
            meta_value TEXT,
            FOREIGN KEY(record_id) REFERENCES records(id) ON DELETE CASCADE,
            UNIQUE(record_id, meta_key)
        );

        CREATE INDEX IF NOT EXISTS idx_records_type ON records(type);
        CREATE INDEX IF NOT EXISTS idx_record_meta_key_value ON record_meta(meta_key, meta_value);
        """,
    ),
    # Migration 2: administrator overrides for user-facing messages
    (
        2,
        """
        CREATE TABLE IF NOT EXISTS messages (
            key TEXT PRIMARY KEY,
            content TEXT NOT NULL,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );
        """,
    ),
    # Migration 3: message overrides are kept per locale.  Existing
    # overrides were written for the default locale.
    (
        3,
        """
        CREATE TABLE IF NOT EXISTS messages_v3 (
            key TEXT NOT NULL,
            locale TEXT NOT NULL,
            content TEXT NOT NULL,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            PRIMARY KEY (key, locale)
        );

        INSERT INTO messages_v3 (key, locale, content, updated_at)
            SELECT key, 'vi', content, updated_at FROM messages;

        DROP TABLE messages;
        ALTER TABLE messages_v3 RENAME TO messages;
        """,
    ),
]


def get_database_path(database_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    If the configured path is absolute it is used directly, otherwise it is
    resolved relative to the project root.
    """
    db_url = database_url or settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_url).resolve())


def get_connection(database_url: Optional[str] = None) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name.  Foreign keys are enabled per connection so deleting a record
    cascades to its metadata.
    """
    conn = sqlite3.connect(get_database_path(database_url))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def get_cursor(database_url: Optional[str] = None) -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit."""
    conn = get_connection(database_url)
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def init_db(database_url: Optional[str] = None) -> int:
    """Initialise the database and apply pending migrations.

    Returns the schema version after migrating.  Running it against an
    up-to-date database is a no-op.
    """
    with get_cursor(database_url) as cursor:
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
    return current_version

"""
connection.py - DB connection helpers
Single responsibility: manage SQLite connections and pragmas.
"""

import logging
import sqlite3
from contextlib import contextmanager
from collections.abc import Iterator

from filterdesk import config

logger = logging.getLogger(__name__)


def get_connection(db_path: str | None = None) -> sqlite3.Connection:
    """Open SQLite connection with shared defaults."""
    path = db_path or config.DB_PATH
    try:
        conn = sqlite3.connect(path, timeout=10)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA journal_mode = WAL")
        return conn
    except sqlite3.Error as e:
        logger.error("Failed to connect to database at %s: %s", path, e)
        raise


@contextmanager
def connect(db_path: str | None = None) -> Iterator[sqlite3.Connection]:
    """Commit-on-success connection that is always closed afterwards."""
    conn = get_connection(db_path)
    try:
        with conn:
            yield conn
    finally:
        conn.close()

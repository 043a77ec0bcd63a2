"""
schema.py - Schema creation helpers
Single responsibility: define and apply the key/value storage schema.
"""
import logging
from filterdesk.database.connection import connect

logger = logging.getLogger(__name__)


SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS kv_store (
    key        TEXT PRIMARY KEY,
    value      TEXT NOT NULL,
    updated_at TEXT NOT NULL
);
"""


def initialize_schema(db_path: str | None = None) -> None:
    """Create tables if missing."""
    try:
        with connect(db_path) as conn:
            conn.executescript(SCHEMA_SQL)
    except Exception as e:
        logger.error("Failed to initialize database schema: %s", e)
        raise

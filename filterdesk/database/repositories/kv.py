"""
kv.py - Key/value repository
Single responsibility: durable string values addressed by key.
"""
from datetime import datetime

from filterdesk.database.connection import connect


def _now_iso() -> str:
    return datetime.now().isoformat(timespec="seconds")


def get_value(key: str, db_path: str | None = None) -> str | None:
    with connect(db_path) as conn:
        row = conn.execute("SELECT value FROM kv_store WHERE key = ?", (key,)).fetchone()
        return row["value"] if row else None


def set_value(key: str, value: str, db_path: str | None = None) -> None:
    write_values({key: value}, db_path)


def write_values(values: dict[str, str | None], db_path: str | None = None) -> None:
    """Write several keys in one transaction; a None value deletes the key."""
    now = _now_iso()
    with connect(db_path) as conn:
        for key, value in values.items():
            if value is None:
                conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))
                continue
            conn.execute(
                "INSERT INTO kv_store (key, value, updated_at) VALUES (?, ?, ?)"
                " ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at",
                (key, value, now),
            )

"""SQLite key-value store for GlowHabit.

Each record store persists as one JSON string under a named bucket key.
"""

import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Optional


class DataStore:
    """SQLite-backed key-value string store keyed by bucket name."""

    REQUIRED_TABLES = ["buckets"]

    def __init__(self, db_path: Path):
        """Initialize the data store.

        Args:
            db_path: Path to the SQLite database file.
        """
        self.db_path = Path(db_path)
        self._ensure_db_dir()
        self._init_schema()

    def _ensure_db_dir(self) -> None:
        """Ensure the database directory exists."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

    def _get_connection(self) -> sqlite3.Connection:
        """Get a database connection."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _init_schema(self) -> None:
        """Initialize database schema on first run."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS buckets (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """)
            conn.commit()
        finally:
            conn.close()

    def get_tables(self) -> list[str]:
        """Get list of all tables in the database."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "SELECT name FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%'"
            )
            return [row["name"] for row in cursor.fetchall()]
        finally:
            conn.close()

    def get_item(self, key: str) -> Optional[str]:
        """Get the raw value stored under a bucket key.

        Args:
            key: Bucket name.

        Returns:
            Stored string, or None if the bucket is absent.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("SELECT value FROM buckets WHERE key = ?", (key,))
            row = cursor.fetchone()
            return row["value"] if row else None
        finally:
            conn.close()

    def set_item(self, key: str, value: str) -> None:
        """Store a string under a bucket key, replacing any previous value.

        Args:
            key: Bucket name.
            value: Serialized bucket contents.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT OR REPLACE INTO buckets (key, value, updated_at)
                VALUES (?, ?, ?)
                """,
                (key, value, datetime.now().isoformat()),
            )
            conn.commit()
        finally:
            conn.close()

    def set_items(self, items: dict[str, str]) -> None:
        """Store several buckets in one transaction."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            now = datetime.now().isoformat()
            cursor.executemany(
                "INSERT OR REPLACE INTO buckets (key, value, updated_at) VALUES (?, ?, ?)",
                [(key, value, now) for key, value in items.items()],
            )
            conn.commit()
        finally:
            conn.close()

    def remove_item(self, key: str) -> None:
        """Delete a bucket.

        Args:
            key: Bucket name.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM buckets WHERE key = ?", (key,))
            conn.commit()
        finally:
            conn.close()

    def keys(self) -> list[str]:
        """List stored bucket names in sorted order."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("SELECT key FROM buckets ORDER BY key")
            return [row["key"] for row in cursor.fetchall()]
        finally:
            conn.close()

    def get_stats(self) -> dict:
        """Get database statistics.

        Returns:
            Dictionary mapping bucket names to their stored size in characters.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("SELECT key, length(value) AS size FROM buckets ORDER BY key")
            return {row["key"]: row["size"] for row in cursor.fetchall()}
        finally:
            conn.close()

"""
repositories/settings_repo.py
------------------------------
Data access layer for the bot_settings key/value table.
"""

from typing import Any, Optional

from db.connection import Database, get_database
from models.setting import Setting
from utils.logger import get_logger

logger = get_logger(__name__)


class SettingsRepository:
    """Repository for bot-wide string settings and counters."""

    def __init__(self, db: Optional[Database] = None):
        self._db = db

    @property
    def db(self) -> Database:
        return self._db or get_database()

    def get(self, key: str) -> Optional[Setting]:
        """Fetch a setting row, or None if the key was never written."""
        sql = "SELECT key, value, updated_at FROM bot_settings WHERE key = %s;"
        conn = self.db.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (key,))
                row = cur.fetchone()
                if row:
                    return Setting(key=row[0], value=row[1], updated_at=row[2])
                return None
        finally:
            self.db.release_connection(conn)

    def get_setting(self, key: str) -> Optional[str]:
        """Return the stored value for `key`, or None."""
        setting = self.get(key)
        return setting.value if setting else None

    def set_setting(self, key: str, value: Any) -> None:
        """Insert or overwrite a setting. The value is stored as str(value)."""
        sql = """
            INSERT INTO bot_settings (key, value, updated_at)
            VALUES (%s, %s, CURRENT_TIMESTAMP)
            ON CONFLICT (key)
            DO UPDATE SET value = EXCLUDED.value, updated_at = CURRENT_TIMESTAMP;
        """
        conn = self.db.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (key, str(value)))
            conn.commit()
            logger.debug(f"Setting {key!r} = {value!r}")
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to set setting {key!r}: {e}")
            raise
        finally:
            self.db.release_connection(conn)

    def increment_setting(self, key: str, delta: int = 1) -> int:
        """
        Add `delta` to an integer setting and return the new value.

        A missing or non-numeric value counts as 0. This is a read followed
        by a separate write: concurrent increments of the same key can lose
        updates.
        """
        current = self.get(key)
        new_value = (current.as_int() if current else 0) + delta
        self.set_setting(key, new_value)
        return new_value

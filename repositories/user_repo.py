"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
"""

import time
from typing import Optional

from db.connection import Database, get_database
from models.user import User, UserIdentifier, UserUpdate, resolve_user_id
from utils.logger import get_logger

logger = get_logger(__name__)

_USER_COLUMNS = (
    "id, username, balance, wallet, referred_by, verified, registered_at, last_seen, "
    "message_count, activity_score, last_bonus_claim, created_at, updated_at"
)


def _now_ms() -> int:
    return int(time.time() * 1000)


def _row_to_user(row) -> User:
    return User(
        id=row[0],
        username=row[1],
        balance=row[2],
        wallet=row[3],
        referred_by=row[4],
        verified=row[5],
        registered_at=row[6],
        last_seen=row[7],
        message_count=row[8],
        activity_score=row[9],
        last_bonus_claim=row[10],
        created_at=row[11],
        updated_at=row[12],
    )


class UserRepository:
    """Repository for the users table."""

    def __init__(self, db: Optional[Database] = None):
        self._db = db

    @property
    def db(self) -> Database:
        return self._db or get_database()

    def ensure_user(
        self,
        identifier: UserIdentifier,
        display_name: Optional[str] = None,
        track_activity: bool = False,
    ) -> Optional[int]:
        """
        Register a user on first contact, otherwise refresh their activity.

        New users are inserted with ON CONFLICT DO NOTHING so two handlers
        racing on the same id both succeed. Existing users get `last_seen`
        bumped, their username refreshed when a different non-empty one is
        supplied, and (with `track_activity`) their message count and
        activity score recomputed. Only those columns are written.

        Args:
            identifier: A user id, or a record exposing `id` or `uid`.
            display_name: Optional display name from the chat platform.
            track_activity: Count this call as one message.

        Returns:
            The resolved user id, or None if the identifier is unusable.
        """
        user_id = resolve_user_id(identifier)
        if not user_id:
            logger.error(f"ensure_user: invalid identifier {identifier!r}")
            return None

        now = _now_ms()
        conn = self.db.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(
                    "SELECT username, registered_at, message_count FROM users WHERE id = %s;",
                    (user_id,),
                )
                row = cur.fetchone()
                if row is None:
                    cur.execute(
                        """
                        INSERT INTO users (id, username, registered_at, last_seen)
                        VALUES (%s, %s, %s, %s)
                        ON CONFLICT (id) DO NOTHING;
                        """,
                        (user_id, display_name or "", now, now),
                    )
                else:
                    stored_name, registered_at, message_count = row
                    update = UserUpdate(last_seen=now).with_username(stored_name, display_name)
                    if track_activity:
                        update.with_activity(message_count, registered_at)
                    cur.execute(*update.to_sql(user_id))
            conn.commit()
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to ensure user {user_id}: {e}")
            raise
        finally:
            self.db.release_connection(conn)

        if row is None:
            logger.info(f"New user added: {display_name or 'unknown'} ({user_id})")
        return user_id

    def get_user(self, identifier: UserIdentifier) -> Optional[User]:
        """
        Fetch a user by id.

        Returns:
            User or None (also None for an unusable identifier).
        """
        user_id = resolve_user_id(identifier)
        if not user_id:
            return None
        conn = self.db.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(f"SELECT {_USER_COLUMNS} FROM users WHERE id = %s;", (user_id,))
                row = cur.fetchone()
                return _row_to_user(row) if row else None
        finally:
            self.db.release_connection(conn)

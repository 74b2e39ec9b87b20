"""
models/user.py
--------------
Domain model for chat users, plus the helpers `ensure_user` relies on:
identifier resolution and the partial-update builder.
"""

import re
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Mapping, Optional, Union

MS_PER_HOUR = 3_600_000
MIN_ACTIVITY_HOURS = 0.01

_ID_PATTERN = re.compile(r"-?\d+", re.ASCII)

# A bare id, a dict-like record, or any object exposing `id` / `uid`
# (e.g. telegram.User).
UserIdentifier = Union[int, str, Mapping[str, Any], Any]


@dataclass
class User:
    """
    Represents a row of the users table.

    Attributes:
        id: Chat-platform account id (primary key).
        username: Display name, empty string when unknown.
        registered_at: Epoch milliseconds of first contact.
        last_seen: Epoch milliseconds of the latest contact.
        balance: Fixed-point balance, maintained outside this package.
        wallet: Optional wallet reference.
        referred_by: Id of the referring user, if any.
        verified: Whether the account has been verified.
        message_count: Messages counted by activity tracking.
        activity_score: Messages per hour since registration.
        last_bonus_claim: Epoch milliseconds of the last bonus claim (0 = never).
    """
    id: int
    registered_at: int
    last_seen: int
    username: Optional[str] = None
    balance: Decimal = Decimal("0")
    wallet: Optional[str] = None
    referred_by: Optional[int] = None
    verified: bool = False
    message_count: int = 0
    activity_score: Decimal = Decimal("0")
    last_bonus_claim: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __str__(self) -> str:
        name = self.username or "unknown"
        return f"{name} ({self.id}) | {self.message_count} msgs | score {self.activity_score}"


def _coerce_id(value: Any) -> Optional[int]:
    if isinstance(value, bool) or not value:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _ID_PATTERN.fullmatch(value.strip()):
        return int(value) or None
    return None


def resolve_user_id(identifier: UserIdentifier) -> Optional[int]:
    """
    Extract a user id from a bare id or a record carrying `id` / `uid`.

    The first present, non-empty candidate wins. Returns None when
    nothing usable is found.
    """
    if isinstance(identifier, (int, str)):
        return _coerce_id(identifier)
    if identifier is None:
        return None
    for field_name in ("id", "uid"):
        if isinstance(identifier, Mapping):
            candidate = identifier.get(field_name)
        else:
            candidate = getattr(identifier, field_name, None)
        if candidate:
            return _coerce_id(candidate)
    return None


def activity_score(message_count: int, registered_at: int, now: int) -> float:
    """Messages per hour since registration, with a floor on elapsed hours."""
    hours = (now - registered_at) / MS_PER_HOUR
    return message_count / max(hours, MIN_ACTIVITY_HOURS)


@dataclass
class UserUpdate:
    """
    The set of columns one `ensure_user` call intends to change.

    Only fields that are not None end up in the SET clause, so columns
    written by other code paths (balance, wallet...) are never touched.
    """
    last_seen: int
    username: Optional[str] = None
    message_count: Optional[int] = None
    activity_score: Optional[float] = None

    def with_username(self, stored: Optional[str], supplied: Optional[str]) -> "UserUpdate":
        if supplied and supplied != stored:
            self.username = supplied
        return self

    def with_activity(self, stored_count: Optional[int], registered_at: int) -> "UserUpdate":
        self.message_count = (stored_count or 0) + 1
        self.activity_score = activity_score(self.message_count, registered_at, self.last_seen)
        return self

    def columns(self) -> list[tuple[str, Any]]:
        """(column, value) pairs in a fixed order, skipping unset fields."""
        pairs = [
            ("last_seen", self.last_seen),
            ("username", self.username),
            ("message_count", self.message_count),
            ("activity_score", self.activity_score),
        ]
        return [(name, value) for name, value in pairs if value is not None]

    def to_sql(self, user_id: int) -> tuple[str, tuple]:
        """Build the UPDATE statement and its parameters."""
        pairs = self.columns()
        assignments = ", ".join(f"{name} = %s" for name, _ in pairs)
        sql = f"UPDATE users SET {assignments}, updated_at = CURRENT_TIMESTAMP WHERE id = %s;"
        return sql, tuple(value for _, value in pairs) + (user_id,)

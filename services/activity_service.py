"""
services/activity_service.py
-----------------------------
Business logic for user registration and message activity tracking.
"""

from typing import Optional

from config import TOTAL_MESSAGES_KEY
from repositories.settings_repo import SettingsRepository
from repositories.user_repo import UserRepository
from utils.logger import get_logger

logger = get_logger(__name__)


def display_name_of(tg_user) -> Optional[str]:
    """Prefer the @username, fall back to the first name."""
    return getattr(tg_user, "username", None) or getattr(tg_user, "first_name", None)


class ActivityService:
    """Keeps the users table and the global message counter up to date."""

    def __init__(self, user_repo: Optional[UserRepository] = None,
                 settings_repo: Optional[SettingsRepository] = None):
        self.user_repo = user_repo or UserRepository()
        self.settings_repo = settings_repo or SettingsRepository()

    def register(self, tg_user) -> Optional[int]:
        """Make sure the user exists and refresh last_seen / username."""
        return self.user_repo.ensure_user(tg_user, display_name_of(tg_user))

    def record_message(self, tg_user) -> Optional[int]:
        """
        Count one message for the user and for the bot as a whole.

        Returns:
            The new global message total, or None if the user could not be resolved.
        """
        user_id = self.user_repo.ensure_user(tg_user, display_name_of(tg_user), track_activity=True)
        if user_id is None:
            return None
        return self.settings_repo.increment_setting(TOTAL_MESSAGES_KEY)

    def get_stats_text(self, tg_user) -> str:
        """Build the /stats reply for a user."""
        user = self.user_repo.get_user(tg_user)
        total = self.settings_repo.get_setting(TOTAL_MESSAGES_KEY) or "0"
        if user is None:
            return f"No activity recorded for you yet.\nBot total: {total} messages."
        return (
            f"*Your activity*\n"
            f"Messages: {user.message_count}\n"
            f"Activity score: {float(user.activity_score):.2f} msgs/hour\n"
            f"Bot total: {total} messages"
        )

"""
handlers/activity_handler.py
-----------------------------
Catch-all handler for plain text messages: counts each one
towards the sender's activity and the bot-wide total.
"""

from telegram import Update
from telegram.ext import ContextTypes

from services.activity_service import ActivityService
from utils.logger import get_logger

logger = get_logger(__name__)
activity_service = ActivityService()


async def handle_text_message(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle any plain text message (not a command)."""
    user = update.effective_user
    if user is None or update.message is None:
        return

    total = activity_service.record_message(user)
    if total is not None:
        logger.debug(f"Message from {user.id} recorded; bot total is now {total}.")

"""
handlers/start_handler.py
--------------------------
Handles /start, /help and /stats commands.
Registers the user and shows their activity.
"""

from telegram import Update
from telegram.ext import ContextTypes

from services.activity_service import ActivityService
from utils.logger import get_logger

logger = get_logger(__name__)
activity_service = ActivityService()

HELP_TEXT = """
*Available commands:*
/start - register with the bot
/help - show this help
/stats - your message count and activity score

Every message you send is counted towards your activity score.
"""


async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /start command - register user and show welcome message."""
    user = update.effective_user
    if activity_service.register(user) is None:
        return
    logger.info(f"User {user.id} ({user.first_name}) started the bot.")

    await update.message.reply_text(
        f"Hello {user.first_name}! 👋\n"
        f"You are registered. Type /help to see what I can do.",
    )


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /help command - show all available commands."""
    await update.message.reply_text(HELP_TEXT, parse_mode="Markdown")


async def stats_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /stats command - show the user's activity and the bot-wide total."""
    user = update.effective_user
    activity_service.register(user)
    await update.message.reply_text(activity_service.get_stats_text(user), parse_mode="Markdown")

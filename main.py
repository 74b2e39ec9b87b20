"""
main.py
-------
Entry point for the chat bot.

Responsibilities:
    - Initialize the database connection pool and schema.
    - Configure and start the Telegram bot with all handlers.
"""

from telegram import BotCommand, Update
from telegram.ext import (
    Application,
    CommandHandler,
    ContextTypes,
    MessageHandler,
    filters,
)

from config import TELEGRAM_BOT_TOKEN
from db.connection import init_pool, close_pool
from db.init_db import create_tables
from handlers.activity_handler import handle_text_message
from handlers.start_handler import start_command, help_command, stats_command
from utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


async def set_bot_commands(application: Application) -> None:
    """Register bot commands menu in Telegram on startup."""
    commands = [
        BotCommand("start", "Register with the bot"),
        BotCommand("help", "Show help"),
        BotCommand("stats", "Your activity"),
    ]
    await application.bot.set_my_commands(commands)
    logger.info("Bot commands menu registered successfully.")


async def log_error(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Log exceptions raised by handlers (database errors included)."""
    user_id = update.effective_user.id if isinstance(update, Update) and update.effective_user else None
    logger.error(f"Handler failed for user {user_id}: {context.error}", exc_info=context.error)


def build_application(token: str) -> Application:
    """Build the Telegram application with every handler registered."""
    app = Application.builder().token(token).post_init(set_bot_commands).build()

    app.add_handler(CommandHandler("start", start_command))
    app.add_handler(CommandHandler("help", help_command))
    app.add_handler(CommandHandler("stats", stats_command))
    app.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, handle_text_message))
    app.add_error_handler(log_error)
    return app


def main() -> None:
    """Initialize and run the bot."""
    setup_logging()

    # ── 1. Database setup ─────────────────────────────────
    logger.info("Initializing database...")
    create_tables(init_pool())

    # ── 2. Build the Telegram application ─────────────────
    logger.info("Starting Telegram bot...")
    app = build_application(TELEGRAM_BOT_TOKEN)

    # ── 3. Start polling ──────────────────────────────────
    try:
        app.run_polling(drop_pending_updates=True, allowed_updates=["message"])
    finally:
        close_pool()
        logger.info("Bot stopped.")


if __name__ == "__main__":
    main()

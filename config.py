"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from urllib.parse import urlparse

from dotenv import load_dotenv

load_dotenv()


# ── Telegram ──────────────────────────────────────────────
TELEGRAM_BOT_TOKEN: str = os.getenv("TELEGRAM_BOT_TOKEN", "")

# ── PostgreSQL ────────────────────────────────────────────
DB_HOST: str = os.getenv("DB_HOST", "localhost")
DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
DB_NAME: str = os.getenv("DB_NAME", "chatbot")
DB_USER: str = os.getenv("DB_USER", "chatbot_user")
DB_PASS: str = os.getenv("DB_PASS", "")

DATABASE_URL: str = os.getenv("DATABASE_URL") or (
    f"postgresql://{DB_USER}:{DB_PASS}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
)

_LOCAL_HOSTS = ("localhost", "127.0.0.1", "::1")


def default_sslmode(url: str) -> str:
    """
    Pick a libpq sslmode for a connection URL.

    Local targets get no TLS at all; anything else is encrypted
    but the server certificate is not verified ("require").
    Set DB_SSLMODE=verify-full to turn verification on.
    """
    host = urlparse(url).hostname or ""
    return "disable" if host in _LOCAL_HOSTS else "require"


DB_SSLMODE: str = os.getenv("DB_SSLMODE") or default_sslmode(DATABASE_URL)
DB_POOL_MIN: int = int(os.getenv("DB_POOL_MIN", "1"))
DB_POOL_MAX: int = int(os.getenv("DB_POOL_MAX", "5"))

# ── Settings keys ─────────────────────────────────────────
TOTAL_MESSAGES_KEY: str = os.getenv("TOTAL_MESSAGES_KEY", "total_messages")

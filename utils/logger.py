"""
utils/logger.py
---------------
Logging setup shared by the bot, the repositories and `python -m db.init_db`.
Modules call `get_logger(__name__)`; `main` calls `setup_logging()` first
so the level from LOG_LEVEL applies before any handler runs.
"""

import logging
import os
import sys
from typing import Optional

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Libraries that log every Telegram poll / HTTP request at INFO.
_NOISY_LOGGERS = ("httpx", "telegram.ext.Updater")

_handler: Optional[logging.Handler] = None


def setup_logging(level: Optional[str] = None) -> None:
    """
    Attach the stdout handler to the root logger and set its level.

    Calling it again only changes the level.

    Args:
        level: Level name; defaults to the LOG_LEVEL environment variable, then INFO.
    """
    global _handler
    root = logging.getLogger()
    root.setLevel((level or os.getenv("LOG_LEVEL") or "INFO").upper())
    if _handler is not None:
        return
    _handler = logging.StreamHandler(sys.stdout)
    _handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root.addHandler(_handler)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Named logger; configures logging on first use if nobody did yet."""
    if _handler is None:
        setup_logging()
    return logging.getLogger(name)

import logging

from utils import logger as logmod


def test_setup_logging_sets_level_and_adds_one_handler(monkeypatch):
    root = logging.getLogger()
    previous = root.level
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    try:
        logmod.setup_logging("debug")
        handlers = list(root.handlers)
        logmod.setup_logging("warning")

        assert root.level == logging.WARNING
        assert root.handlers == handlers
        assert logmod._handler in root.handlers
        assert logging.getLogger("httpx").level == logging.WARNING
    finally:
        root.setLevel(previous)


def test_get_logger_returns_named_logger():
    assert logmod.get_logger("repositories.user_repo").name == "repositories.user_repo"

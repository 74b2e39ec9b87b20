"""Pytest configuration and fixtures."""
from unittest.mock import MagicMock

import pytest


@pytest.fixture
def cursor():
    """Mock psycopg2 cursor returned by `with conn.cursor() as cur`."""
    return MagicMock()


@pytest.fixture
def fake_db(cursor):
    """Mock Database handle whose connections all share `cursor`."""
    conn = MagicMock()
    conn.cursor.return_value.__enter__.return_value = cursor
    db = MagicMock()
    db.get_connection.return_value = conn
    db.conn = conn
    return db


@pytest.fixture
def frozen_now(monkeypatch):
    """Pin the clock used by ensure_user to a fixed epoch-ms value."""
    now = 1_700_000_000_000
    monkeypatch.setattr("repositories.user_repo._now_ms", lambda: now)
    return now

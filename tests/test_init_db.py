import psycopg2
import pytest

from config import default_sslmode
from db.init_db import SCHEMA_SQL, create_tables


def test_create_tables_executes_schema_and_commits(fake_db, cursor):
    create_tables(fake_db)

    cursor.execute.assert_called_once_with(SCHEMA_SQL)
    fake_db.conn.commit.assert_called_once()
    fake_db.release_connection.assert_called_once_with(fake_db.conn)


def test_create_tables_is_repeatable(fake_db, cursor):
    create_tables(fake_db)
    create_tables(fake_db)

    assert cursor.execute.call_count == 2
    assert "CREATE TABLE IF NOT EXISTS users" in SCHEMA_SQL
    assert "CREATE TABLE IF NOT EXISTS bot_settings" in SCHEMA_SQL


def test_create_tables_failure_is_fatal(fake_db, cursor):
    cursor.execute.side_effect = psycopg2.ProgrammingError("syntax error")

    with pytest.raises(psycopg2.ProgrammingError):
        create_tables(fake_db)

    fake_db.conn.rollback.assert_called_once()
    fake_db.release_connection.assert_called_once_with(fake_db.conn)


@pytest.mark.parametrize(
    "url, expected",
    [
        ("postgresql://u:p@localhost:5432/db", "disable"),
        ("postgresql://u:p@127.0.0.1/db", "disable"),
        ("postgresql://u:p@db.example.com:5432/db", "require"),
    ],
)
def test_default_sslmode(url, expected):
    assert default_sslmode(url) == expected

"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from typing import Optional

from db.connection import Database, get_database
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Users table: one row per chat account, keyed by the platform's user id
CREATE TABLE IF NOT EXISTS users (
    id                BIGINT PRIMARY KEY,
    username          TEXT,
    balance           DECIMAL(20, 2) DEFAULT 0,
    wallet            TEXT,
    referred_by       BIGINT,
    verified          BOOLEAN DEFAULT FALSE,
    registered_at     BIGINT NOT NULL,
    last_seen         BIGINT NOT NULL,
    message_count     INTEGER DEFAULT 0,
    activity_score    DECIMAL(10, 4) DEFAULT 0,
    last_bonus_claim  BIGINT DEFAULT 0,
    created_at        TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    updated_at        TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

-- Bot-wide key/value settings and counters
CREATE TABLE IF NOT EXISTS bot_settings (
    key         TEXT PRIMARY KEY,
    value       TEXT NOT NULL,
    updated_at  TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);
"""


def create_tables(db: Optional[Database] = None) -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).

    Raises:
        psycopg2.DatabaseError: Startup cannot continue without the schema.
    """
    db = db or get_database()
    conn = db.get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute(SCHEMA_SQL)
        conn.commit()
        logger.info("Database schema initialized successfully.")
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to initialize schema: {e}")
        raise
    finally:
        db.release_connection(conn)


if __name__ == "__main__":
    from db.connection import init_pool
    create_tables(init_pool())
    print("Database schema created successfully.")

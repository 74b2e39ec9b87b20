"""
db/connection.py
----------------
Manages the PostgreSQL connection pool.
Uses psycopg2's ThreadedConnectionPool, which is safe to share across
threads. Repositories receive a `Database` handle; the
process-wide one is created by `init_pool()`.
"""

from typing import Optional

import psycopg2
from psycopg2 import pool

from config import DATABASE_URL, DB_POOL_MAX, DB_POOL_MIN, DB_SSLMODE
from utils.logger import get_logger

logger = get_logger(__name__)


class Database:
    """Owns a connection pool and hands out connections from it."""

    def __init__(self, dsn: str, min_conn: int = 1, max_conn: int = 5,
                 sslmode: Optional[str] = None):
        kwargs = {"sslmode": sslmode} if sslmode else {}
        self._pool = pool.ThreadedConnectionPool(min_conn, max_conn, dsn, **kwargs)

    def get_connection(self):
        """Get a connection from the pool."""
        return self._pool.getconn()

    def release_connection(self, conn) -> None:
        """Return a connection back to the pool."""
        self._pool.putconn(conn)

    def close(self) -> None:
        """Close all connections in the pool."""
        self._pool.closeall()


_database: Optional[Database] = None


def init_pool(min_conn: int = DB_POOL_MIN, max_conn: int = DB_POOL_MAX) -> Database:
    """
    Initialize the process-wide connection pool.

    Args:
        min_conn: Minimum number of connections to keep open.
        max_conn: Maximum number of connections allowed.

    Returns:
        The shared Database handle (the existing one if already initialized).

    Raises:
        psycopg2.OperationalError: If the database is unreachable.
    """
    global _database
    if _database is not None:
        return _database
    try:
        _database = Database(DATABASE_URL, min_conn, max_conn, sslmode=DB_SSLMODE)
        logger.info(f"Database connection pool initialized (sslmode={DB_SSLMODE}).")
    except psycopg2.OperationalError as e:
        logger.error(f"Failed to initialize database pool: {e}")
        raise
    return _database


def get_database() -> Database:
    """
    Get the process-wide Database handle.

    Raises:
        RuntimeError: If the pool has not been initialized.
    """
    if _database is None:
        raise RuntimeError("Database pool not initialized. Call init_pool() first.")
    return _database


def close_pool() -> None:
    """Close all connections in the process-wide pool."""
    global _database
    if _database is not None:
        _database.close()
        _database = None
        logger.info("Database connection pool closed.")

"""
pgsimple/db/connection.py
-------------------------
Helpers for opening a psycopg2 connection from configuration.

The Database facade never calls these: callers open a connection,
hand it over, and close it themselves.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

import psycopg2

from pgsimple.config import DATABASE_URL
from pgsimple.utils.logger import get_logger

logger = get_logger(__name__)


def connect(dsn: Optional[str] = None):
    """
    Open a new connection.

    Args:
        dsn: Connection string. Defaults to ``DATABASE_URL`` from config.

    Raises:
        psycopg2.OperationalError: If the database is unreachable.
    """
    try:
        conn = psycopg2.connect(dsn or DATABASE_URL)
    except psycopg2.OperationalError as e:
        logger.error(f"Failed to connect to database: {e}")
        raise
    logger.info("Database connection opened.")
    return conn


@contextmanager
def connection(dsn: Optional[str] = None) -> Iterator:
    """Open a connection for the duration of a ``with`` block, then close it."""
    conn = connect(dsn)
    try:
        yield conn
    finally:
        conn.close()
        logger.info("Database connection closed.")

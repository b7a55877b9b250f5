"""
db/connection.py
----------------
Provides the PostgreSQL connection used by the repositories.
A single connection is opened lazily and shared until closed.
"""

from typing import Any

import psycopg2
from psycopg2.extensions import connection as PgConnection

from config import DATABASE_URL
from db.exceptions import DataAccessError
from utils.logger import get_logger

logger = get_logger(__name__)

_conn: PgConnection | None = None


def get_connection() -> PgConnection:
    """
    Get the shared database connection, opening it on first use.

    Returns:
        A psycopg2 connection object.

    Raises:
        DataAccessError: If the database is unreachable or the DSN is invalid.
    """
    global _conn
    if _conn is not None and not _conn.closed:
        return _conn
    try:
        _conn = psycopg2.connect(DATABASE_URL)
        logger.info("Database connection opened.")
    except psycopg2.Error as e:
        logger.error(f"Failed to open database connection: {e}")
        raise DataAccessError(str(e)) from e
    return _conn


def close_connection() -> None:
    """Close the shared connection if it is open."""
    global _conn
    if _conn is not None:
        close_quietly(_conn)
        _conn = None
        logger.info("Database connection closed.")


def close_quietly(resource: Any) -> None:
    """
    Close a cursor or connection, logging instead of raising on failure.

    Args:
        resource: Any object with a ``close()`` method, or None.
    """
    if resource is None:
        return
    try:
        resource.close()
    except psycopg2.Error as e:
        logger.warning(f"Failed to close {type(resource).__name__}: {e}")

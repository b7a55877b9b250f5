"""
repositories/pg_base.py
-----------------------
Connection handling shared by the PostgreSQL repositories.
"""

from typing import NoReturn

import psycopg2

from db.exceptions import DataAccessError
from utils.logger import get_logger

logger = get_logger(__name__)

DB_EXCEPTION_MSG = "Something was wrong: "
UNEXPECTED_ERROR = "Unexpected error! No rows affected!"


class PgRepository:
    """Base for repositories bound to one open psycopg2 connection."""

    def __init__(self, conn):
        """
        Args:
            conn: An open psycopg2 connection, used for every operation.
        """
        self.conn = conn

    def _no_rows_affected(self) -> NoReturn:
        """Abort the current transaction and signal an empty write."""
        self.conn.rollback()
        raise DataAccessError(UNEXPECTED_ERROR)

    def _fail(self, context: str, error: psycopg2.Error) -> NoReturn:
        """Roll back, log and re-raise a database error as DataAccessError."""
        try:
            self.conn.rollback()
        except psycopg2.Error as rollback_error:
            logger.warning(f"Rollback failed: {rollback_error}")
        logger.error(f"{context}: {error}")
        raise DataAccessError(DB_EXCEPTION_MSG + str(error).strip()) from error

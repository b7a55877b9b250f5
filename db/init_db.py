"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

import psycopg2

from db.connection import get_connection
from db.exceptions import DataAccessError
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Departments: the owning side of the seller relation
CREATE TABLE IF NOT EXISTS department (
    Id              SERIAL PRIMARY KEY,
    Name            VARCHAR(60) NOT NULL
);

-- Sellers: each row belongs to exactly one department
CREATE TABLE IF NOT EXISTS seller (
    Id              SERIAL PRIMARY KEY,
    Name            VARCHAR(60) NOT NULL,
    Email           VARCHAR(100) NOT NULL,
    BirthDate       DATE NOT NULL,
    BaseSalary      NUMERIC NOT NULL,
    DepartmentId    INT NOT NULL REFERENCES department(Id)
);

-- Index for seller lookups by department
CREATE INDEX IF NOT EXISTS idx_seller_department ON seller(DepartmentId);
"""


def create_tables(conn=None) -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).

    Args:
        conn: Connection to use; defaults to the shared connection.

    Raises:
        DataAccessError: If the schema could not be created.
    """
    if conn is None:
        conn = get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute(SCHEMA_SQL)
        conn.commit()
        logger.info("Database schema initialized successfully.")
    except psycopg2.Error as e:
        conn.rollback()
        logger.error(f"Failed to initialize schema: {e}")
        raise DataAccessError(f"Something was wrong: {e}") from e


if __name__ == "__main__":
    from db.connection import close_connection
    try:
        create_tables()
        print("Database schema created successfully.")
    finally:
        close_connection()

"""
repositories/department_repo.py
-------------------------------
Data access layer for departments.
All SQL queries related to the `department` table live here.
"""

from typing import Optional

import psycopg2

from models.department import Department
from repositories.generic_repo import GenericRepository
from repositories.pg_base import PgRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class DepartmentRepository(GenericRepository[Department]):
    """Contract for department persistence."""


class DepartmentRepositoryPg(PgRepository, DepartmentRepository):
    """PostgreSQL repository for CRUD operations on the department table."""

    # ── CREATE ────────────────────────────────────────────

    def insert(self, department: Department) -> Department:
        """
        Insert a new department.

        Args:
            department: The Department to persist (its `id` is ignored).

        Returns:
            A copy of the department with its generated `id`.
        """
        sql = "INSERT INTO department (Name) VALUES (%s) RETURNING Id;"
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql, (department.name,))
                row = cur.fetchone()
            if row is None:
                self._no_rows_affected()
            self.conn.commit()
        except psycopg2.Error as e:
            self._fail(f"Failed to insert department '{department.name}'", e)
        created = department.with_id(row[0])
        logger.info(f"Added department #{created.id} '{created.name}'")
        return created

    # ── READ ──────────────────────────────────────────────

    def find_by_id(self, department_id: int) -> Optional[Department]:
        """
        Fetch a single department by ID.

        Returns:
            A Department or None if not found.
        """
        sql = "SELECT Id, Name FROM department WHERE Id = %s;"
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql, (department_id,))
                row = cur.fetchone()
            self.conn.commit()
        except psycopg2.Error as e:
            self._fail(f"Failed to fetch department #{department_id}", e)
        return self._row_to_department(row) if row else None

    def find_all(self) -> list[Department]:
        """Fetch all departments ordered by name."""
        sql = "SELECT Id, Name FROM department ORDER BY Name;"
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql)
                rows = cur.fetchall()
            self.conn.commit()
        except psycopg2.Error as e:
            self._fail("Failed to fetch departments", e)
        return [self._row_to_department(r) for r in rows]

    # ── UPDATE ────────────────────────────────────────────

    def update(self, department: Department) -> None:
        """
        Rename an existing department.

        Raises:
            DataAccessError: If no department has `department.id`.
        """
        sql = "UPDATE department SET Name = %s WHERE Id = %s;"
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql, (department.name, department.id))
                updated = cur.rowcount
            if updated == 0:
                self._no_rows_affected()
            self.conn.commit()
        except psycopg2.Error as e:
            self._fail(f"Failed to update department #{department.id}", e)
        logger.info(f"Updated department #{department.id}")

    # ── DELETE ────────────────────────────────────────────

    def delete_by_id(self, department_id: int) -> None:
        """Delete a department by ID. Missing IDs are ignored."""
        sql = "DELETE FROM department WHERE Id = %s;"
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql, (department_id,))
                deleted = cur.rowcount > 0
            self.conn.commit()
        except psycopg2.Error as e:
            self._fail(f"Failed to delete department #{department_id}", e)
        if deleted:
            logger.info(f"Deleted department #{department_id}")

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_department(row: tuple) -> Department:
        """Convert a (Id, Name) row tuple to a Department domain object."""
        return Department(id=row[0], name=row[1])

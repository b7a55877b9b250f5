"""
repositories/seller_repo.py
---------------------------
Data access layer for sellers.
All SQL queries related to the `seller` table live here. Every read joins
the owning department so sellers come back with their Department attached.
"""

from abc import abstractmethod
from typing import Optional

import psycopg2

from models.department import Department
from models.seller import Seller
from repositories.generic_repo import GenericRepository
from repositories.pg_base import PgRepository
from utils.logger import get_logger

logger = get_logger(__name__)

_SELECT_WITH_DEPARTMENT = """
    SELECT s.Id, s.Name, s.Email, s.BirthDate, s.BaseSalary, s.DepartmentId,
           d.Name AS DepName
    FROM seller AS s
    INNER JOIN department AS d ON s.DepartmentId = d.Id
"""


class SellerRepository(GenericRepository[Seller]):
    """Contract for seller persistence."""

    @abstractmethod
    def find_by_department(self, department: Department) -> list[Seller]:
        """Return the sellers of `department` ordered by name."""


class SellerRepositoryPg(PgRepository, SellerRepository):
    """PostgreSQL repository for CRUD operations on the seller table."""

    # ── CREATE ────────────────────────────────────────────

    def insert(self, seller: Seller) -> Seller:
        """
        Insert a new seller.

        The department is referenced by id only; it is neither written nor
        checked here; an unknown id is rejected by the foreign key.

        Args:
            seller: The Seller to persist (its `id` is ignored).

        Returns:
            A copy of the seller with its generated `id`.
        """
        sql = """
            INSERT INTO seller (Name, Email, BirthDate, BaseSalary, DepartmentId)
            VALUES (%s, %s, %s, %s, %s)
            RETURNING Id;
        """
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql, self._write_params(seller))
                row = cur.fetchone()
            if row is None:
                self._no_rows_affected()
            self.conn.commit()
        except psycopg2.Error as e:
            self._fail(f"Failed to insert seller '{seller.name}'", e)
        created = seller.with_id(row[0])
        logger.info(f"Added seller #{created.id} '{created.name}' to department #{seller.department.id}")
        return created

    # ── READ ──────────────────────────────────────────────

    def find_by_id(self, seller_id: int) -> Optional[Seller]:
        """
        Fetch a single seller by ID, with its department.

        Returns:
            A Seller or None if not found.
        """
        sql = _SELECT_WITH_DEPARTMENT + "WHERE s.Id = %s;"
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql, (seller_id,))
                row = cur.fetchone()
            self.conn.commit()
        except psycopg2.Error as e:
            self._fail(f"Failed to fetch seller #{seller_id}", e)
        if not row:
            return None
        return self._row_to_seller(row, self._row_to_department(row))

    def find_all(self) -> list[Seller]:
        """
        Fetch all sellers ordered by name.

        Sellers of the same department share a single Department instance.
        """
        sql = _SELECT_WITH_DEPARTMENT + "ORDER BY s.Name;"
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql)
                rows = cur.fetchall()
            self.conn.commit()
        except psycopg2.Error as e:
            self._fail("Failed to fetch sellers", e)

        departments: dict[int, Department] = {}
        sellers = []
        for row in rows:
            department = departments.get(row[5])
            if department is None:
                department = self._row_to_department(row)
                departments[department.id] = department
            sellers.append(self._row_to_seller(row, department))
        return sellers

    def find_by_department(self, department: Department) -> list[Seller]:
        """
        Fetch the sellers of one department ordered by name.

        Args:
            department: Department to filter on; only its `id` is used.

        Returns:
            List of Seller objects, empty if the department has none.
        """
        sql = _SELECT_WITH_DEPARTMENT + "WHERE s.DepartmentId = %s ORDER BY s.Name;"
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql, (department.id,))
                rows = cur.fetchall()
            self.conn.commit()
        except psycopg2.Error as e:
            self._fail(f"Failed to fetch sellers of department #{department.id}", e)

        if not rows:
            return []
        # All rows carry the same department.
        found = self._row_to_department(rows[0])
        return [self._row_to_seller(r, found) for r in rows]

    # ── UPDATE ────────────────────────────────────────────

    def update(self, seller: Seller) -> None:
        """
        Update every column of an existing seller.

        Raises:
            DataAccessError: If no seller has `seller.id`, or the
                department id is rejected by the database.
        """
        sql = """
            UPDATE seller
            SET Name = %s, Email = %s, BirthDate = %s, BaseSalary = %s, DepartmentId = %s
            WHERE Id = %s;
        """
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql, self._write_params(seller) + (seller.id,))
                updated = cur.rowcount
            if updated == 0:
                self._no_rows_affected()
            self.conn.commit()
        except psycopg2.Error as e:
            self._fail(f"Failed to update seller #{seller.id}", e)
        logger.info(f"Updated seller #{seller.id}")

    # ── DELETE ────────────────────────────────────────────

    def delete_by_id(self, seller_id: int) -> None:
        """Delete a seller by ID. Deleting a missing ID is a no-op."""
        sql = "DELETE FROM seller WHERE Id = %s;"
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql, (seller_id,))
                deleted = cur.rowcount > 0
            self.conn.commit()
        except psycopg2.Error as e:
            self._fail(f"Failed to delete seller #{seller_id}", e)
        if deleted:
            logger.info(f"Deleted seller #{seller_id}")

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _write_params(seller: Seller) -> tuple:
        """Column values for INSERT/UPDATE, in statement order."""
        return (
            seller.name, seller.email, seller.birth_date,
            seller.base_salary, seller.department.id,
        )

    @staticmethod
    def _row_to_department(row: tuple) -> Department:
        """Build the Department from the joined DepartmentId/DepName columns."""
        return Department(id=row[5], name=row[6])

    @staticmethod
    def _row_to_seller(row: tuple, department: Department) -> Seller:
        """Convert a joined row tuple to a Seller owned by `department`."""
        return Seller(
            id=row[0],
            name=row[1],
            email=row[2],
            birth_date=row[3],
            base_salary=row[4],
            department=department,
        )

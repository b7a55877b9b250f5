"""
repositories/factory.py
-----------------------
Builds repositories bound to a database connection.
"""

from db.connection import get_connection
from repositories.department_repo import DepartmentRepository, DepartmentRepositoryPg
from repositories.seller_repo import SellerRepository, SellerRepositoryPg


def create_department_repository(conn=None) -> DepartmentRepository:
    """Return a department repository on `conn`, or on the shared connection."""
    return DepartmentRepositoryPg(conn if conn is not None else get_connection())


def create_seller_repository(conn=None) -> SellerRepository:
    """Return a seller repository on `conn`, or on the shared connection."""
    return SellerRepositoryPg(conn if conn is not None else get_connection())

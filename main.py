"""
main.py
-------
Console entry point.

Responsibilities:
    - Open the database connection and make sure the schema exists.
    - Print every department followed by its sellers.
    - Close the connection on exit.
"""

import sys

from db.connection import close_connection, get_connection
from db.exceptions import DataAccessError
from db.init_db import create_tables
from services.department_service import DepartmentService
from services.seller_service import SellerService
from utils.logger import get_logger

logger = get_logger(__name__)


def print_listing(department_service: DepartmentService, seller_service: SellerService) -> None:
    """Write departments and their sellers to stdout."""
    departments = department_service.find_all()
    if not departments:
        print("No departments registered.")
        return
    for department in departments:
        print(department)
        sellers = seller_service.find_by_department(department)
        if not sellers:
            print("  (no sellers)")
        for seller in sellers:
            print(f"  {seller}")


def main() -> int:
    """Run the listing. Returns the process exit code."""
    try:
        conn = get_connection()
        create_tables(conn)
        print_listing(DepartmentService(), SellerService())
    except DataAccessError as e:
        logger.error(f"Database error: {e}")
        return 1
    finally:
        close_connection()
    return 0


if __name__ == "__main__":
    sys.exit(main())

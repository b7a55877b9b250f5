"""
models/ - Domain Layer
======================
Plain entity values mapped to the `department` and `seller` tables.
"""

from models.department import Department
from models.seller import Seller

__all__ = ["Department", "Seller"]

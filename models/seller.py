"""
models/seller.py
----------------
Domain model for sellers.
"""

from dataclasses import dataclass, replace
from datetime import date
from decimal import Decimal
from typing import Optional

from models.department import Department


@dataclass(frozen=True)
class Seller:
    """
    Represents a seller working in a department.

    Attributes:
        name: Full name.
        email: Contact e-mail address.
        birth_date: Date of birth.
        base_salary: Monthly base salary.
        department: The department the seller belongs to. Sellers
            loaded in the same query may share one Department value.
        id: Database primary key (None for new records).
    """
    name: str
    email: str
    birth_date: date
    base_salary: Decimal
    department: Department
    id: Optional[int] = None

    def with_id(self, new_id: int) -> "Seller":
        """Return a copy carrying the database-assigned id."""
        return replace(self, id=new_id)

    def __str__(self) -> str:
        return f"#{self.id} {self.name} <{self.email}> | {self.base_salary:.2f} | {self.department.name}"

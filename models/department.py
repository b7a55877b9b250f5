"""
models/department.py
--------------------
Domain model for departments.
"""

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class Department:
    """
    Represents a department that sellers belong to.

    Attributes:
        name: Department name.
        id: Database primary key (None for new records).
    """
    name: str
    id: Optional[int] = None

    def with_id(self, new_id: int) -> "Department":
        """Return a copy carrying the database-assigned id."""
        return replace(self, id=new_id)

    def __str__(self) -> str:
        return f"#{self.id} {self.name}"

"""
services/department_service.py
-------------------------------
Operations a form or list view performs on departments.
"""

from typing import Optional

from models.department import Department
from repositories.department_repo import DepartmentRepository
from repositories.factory import create_department_repository


class DepartmentService:
    """Thin orchestration over the department repository."""

    def __init__(self, repo: Optional[DepartmentRepository] = None):
        self.repo = repo if repo is not None else create_department_repository()

    def find_all(self) -> list[Department]:
        """All departments ordered by name."""
        return self.repo.find_all()

    def save_or_update(self, department: Department) -> Department:
        """
        Insert a new department or update an existing one.

        Args:
            department: A department without `id` is inserted, one with
                an `id` is updated.

        Returns:
            The persisted department, carrying its id.
        """
        if department.id is None:
            return self.repo.insert(department)
        self.repo.update(department)
        return department

    def remove(self, department: Department) -> None:
        """
        Delete a persisted department.

        Raises:
            ValueError: If the department was never persisted.
        """
        if department.id is None:
            raise ValueError("Department has no id; it was never saved.")
        self.repo.delete_by_id(department.id)

"""
repositories/generic_repo.py
----------------------------
The CRUD contract shared by every entity repository.
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class GenericRepository(ABC, Generic[T]):
    """
    Contract for a repository over one entity type.

    Implementations are bound to a single connection and are not
    safe to share between threads.
    """

    @abstractmethod
    def insert(self, entity: T) -> T:
        """
        Persist a new entity.

        Returns:
            A copy of `entity` carrying the generated id.

        Raises:
            DataAccessError: On a database failure or if no row was inserted.
        """

    @abstractmethod
    def update(self, entity: T) -> None:
        """
        Persist every field of an existing entity, keyed by its id.

        Raises:
            DataAccessError: On a database failure or if no row matched the id.
        """

    @abstractmethod
    def delete_by_id(self, entity_id: int) -> None:
        """Delete the row with this id. Deleting a missing id is a no-op."""

    @abstractmethod
    def find_by_id(self, entity_id: int) -> Optional[T]:
        """Return the entity with this id, or None if there is none."""

    @abstractmethod
    def find_all(self) -> list[T]:
        """Return every entity ordered by name."""

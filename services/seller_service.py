"""
services/seller_service.py
---------------------------
Operations a form or list view performs on sellers.
"""

from typing import Optional

from models.department import Department
from models.seller import Seller
from repositories.factory import create_seller_repository
from repositories.seller_repo import SellerRepository


class SellerService:
    """Thin orchestration over the seller repository."""

    def __init__(self, repo: Optional[SellerRepository] = None):
        self.repo = repo if repo is not None else create_seller_repository()

    def find_all(self) -> list[Seller]:
        """All sellers ordered by name."""
        return self.repo.find_all()

    def find_by_department(self, department: Department) -> list[Seller]:
        """Sellers of one department ordered by name."""
        return self.repo.find_by_department(department)

    def save_or_update(self, seller: Seller) -> Seller:
        """Insert the seller when it has no `id`, otherwise update it."""
        if seller.id is None:
            return self.repo.insert(seller)
        self.repo.update(seller)
        return seller

    def remove(self, seller: Seller) -> None:
        """
        Delete a persisted seller.

        Raises:
            ValueError: If the seller was never persisted.
        """
        if seller.id is None:
            raise ValueError("Seller has no id; it was never saved.")
        self.repo.delete_by_id(seller.id)

"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure.  Implementations are bound to a unit of work and see
only that unit's transaction.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str, *, for_update: bool = False) -> Product | None:
        """Return a product by its ID, or None if not found.

        With ``for_update`` the row stays locked against concurrent
        writers until the enclosing unit of work ends.
        """

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        """Return a product by its exact (case-insensitive) name, or None."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""

    @abstractmethod
    def delete(self, product_id: str) -> bool:
        """Remove a product; return False if it did not exist."""

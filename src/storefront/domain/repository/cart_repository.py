"""Abstract repository for Cart aggregate (one cart per user)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def get_for_user(self, user_id: str) -> Cart | None:
        """Return the user's cart, or None if they have none."""

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Persist a new or updated cart, replacing all of its lines."""

    @abstractmethod
    def delete_for_user(self, user_id: str) -> None:
        """Delete the user's cart and its lines, if any."""

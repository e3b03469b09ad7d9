"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int, *, for_update: bool = False) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_for_user(self, user_id: str) -> list[Order]:
        """Return the user's orders, oldest first."""

    @abstractmethod
    def add(self, order: Order) -> None:
        """Persist a new order and assign its ID."""

    @abstractmethod
    def update_status(self, order: Order) -> None:
        """Persist the order's status.  Line items are immutable."""

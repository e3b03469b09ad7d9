"""Order aggregate: an immutable record of a purchase.

Line items and the total are frozen when the order is created; the only
change this package ever makes to an existing order is the one-way
transition into CANCELLED.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import AlreadyCancelledError, ValidationError
from storefront.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "pending"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class OrderLineItem:
    """Price snapshot of a product at purchase time."""

    product_id: str
    product_name: str
    quantity: Quantity
    unit_price: Money  # captured at placement, never re-read from the catalog

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use ``Order.place()`` for new orders; ``__init__`` stays plain so the
    repository can reconstitute persisted orders, including their stored
    total, without recomputing anything.
    """

    id: int | None
    user_id: str
    items: list[OrderLineItem]
    total_amount: Money
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def place(user_id: str, items: list[OrderLineItem]) -> Order:
        """Create a new pending order and compute its total once."""
        if not items:
            raise ValidationError("Order must contain at least one item")

        total = Money.zero(items[0].unit_price.currency)
        for item in items:
            total = total + item.line_total

        return Order(id=None, user_id=user_id, items=list(items), total_amount=total)

    @property
    def is_cancelled(self) -> bool:
        return self.status == OrderStatus.CANCELLED

    def is_owned_by(self, user_id: str) -> bool:
        return self.user_id == user_id

    def cancel(self) -> None:
        """Transition any non-cancelled status -> CANCELLED.

        Stock restoration must be done by the caller, inside the same
        unit of work.
        """
        if self.is_cancelled:
            raise AlreadyCancelledError(self.id)  # type: ignore[arg-type]
        self.status = OrderStatus.CANCELLED

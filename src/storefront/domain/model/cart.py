"""Cart aggregate: the products a user intends to buy.

A cart belongs to exactly one user and holds at most one line per
product.  It carries no prices: the live catalog price is captured only
when the cart is converted into an order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from storefront.domain.model.value_objects import Quantity


@dataclass
class CartLine:
    product_id: str
    quantity: Quantity


@dataclass
class Cart:

    user_id: str
    items: list[CartLine] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_empty(self) -> bool:
        return not self.items

    def quantity_of(self, product_id: str) -> int:
        line = self._find_line(product_id)
        return line.quantity.value if line is not None else 0

    def add_item(self, product_id: str, quantity: Quantity) -> None:
        """Add *quantity* units, merging with an existing line for the product."""
        line = self._find_line(product_id)
        if line is None:
            self.items.append(CartLine(product_id=product_id, quantity=quantity))
        else:
            line.quantity = line.quantity + quantity

    def remove_item(self, product_id: str) -> None:
        """Drop the line for *product_id*; a no-op if it is not in the cart."""
        self.items = [line for line in self.items if line.product_id != product_id]

    def _find_line(self, product_id: str) -> CartLine | None:
        for line in self.items:
            if line.product_id == product_id:
                return line
        return None

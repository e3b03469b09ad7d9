"""Application service: Place Order from Cart use case.

Converts the acting user's cart into a pending order in one unit of
work:

1. Load the cart (missing or empty -> EmptyCartError).
2. Reserve every line through the InventoryLedger in product-ID order,
   capturing each product's current price.  The first missing product
   or short line aborts the whole unit of work.
3. Create the order, delete the cart, commit.

Nothing is compensated by hand: any failure, including the commit
itself, leaves stock, orders and the cart exactly as they were.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import Actor, OrderDTO, order_to_dto
from storefront.domain.exceptions import EmptyCartError
from storefront.domain.model.order import Order, OrderLineItem
from storefront.domain.model.product import Product
from storefront.domain.repository.unit_of_work import UnitOfWork
from storefront.domain.service.inventory_ledger import InventoryLedger

logger = structlog.get_logger(__name__)


class PlaceOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, actor: Actor) -> OrderDTO:
        with self._uow:
            cart = self._uow.carts.get_for_user(actor.user_id)
            if cart is None or cart.is_empty:
                raise EmptyCartError(actor.user_id)

            ledger = InventoryLedger(self._uow.products)
            reserved: dict[str, Product] = {}

            # Product row locks are always taken in ID order.
            for line in sorted(cart.items, key=lambda item: item.product_id):
                reserved[line.product_id] = ledger.reserve(line.product_id, line.quantity.value)

            line_items = [
                OrderLineItem(
                    product_id=line.product_id,
                    product_name=reserved[line.product_id].name,
                    quantity=line.quantity,
                    unit_price=reserved[line.product_id].price,  # <-- price snapshot
                )
                for line in cart.items
            ]

            order = Order.place(user_id=actor.user_id, items=line_items)
            self._uow.orders.add(order)
            self._uow.carts.delete_for_user(actor.user_id)
            self._uow.commit()

        logger.info(
            "Order placed",
            order_id=order.id,
            user_id=actor.user_id,
            line_count=len(order.items),
            total=str(order.total_amount.amount),
        )
        return order_to_dto(order)

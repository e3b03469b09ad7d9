"""SQLAlchemy implementation of CartRepository.

A cart is one ``carts`` row plus one ``cart_items`` row per line; the
``position`` column keeps lines in the order they were first added.
"""

from __future__ import annotations

from datetime import timezone

from sqlalchemy import delete, insert, select
from sqlalchemy.orm import Session

from storefront.domain.model.cart import Cart, CartLine
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.cart_repository import CartRepository
from storefront.infrastructure.persistence.tables import cart_items, carts


class SqlCartRepository(CartRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_for_user(self, user_id: str) -> Cart | None:
        cart_row = self._session.execute(
            select(carts).where(carts.c.user_id == user_id)
        ).mappings().first()
        if cart_row is None:
            return None

        item_rows = self._session.execute(
            select(cart_items)
            .where(cart_items.c.user_id == user_id)
            .order_by(cart_items.c.position)
        ).mappings()

        created_at = cart_row["created_at"]
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)

        return Cart(
            user_id=user_id,
            items=[
                CartLine(product_id=row["product_id"], quantity=Quantity(row["quantity"]))
                for row in item_rows
            ],
            created_at=created_at,
        )

    def save(self, cart: Cart) -> None:
        exists = self._session.execute(
            select(carts.c.user_id).where(carts.c.user_id == cart.user_id)
        ).first()
        if exists is None:
            self._session.execute(
                insert(carts).values(user_id=cart.user_id, created_at=cart.created_at)
            )

        self._session.execute(delete(cart_items).where(cart_items.c.user_id == cart.user_id))
        if cart.items:
            self._session.execute(
                insert(cart_items),
                [
                    {
                        "user_id": cart.user_id,
                        "product_id": line.product_id,
                        "position": position,
                        "quantity": line.quantity.value,
                    }
                    for position, line in enumerate(cart.items)
                ],
            )

    def delete_for_user(self, user_id: str) -> None:
        self._session.execute(delete(cart_items).where(cart_items.c.user_id == user_id))
        self._session.execute(delete(carts).where(carts.c.user_id == user_id))

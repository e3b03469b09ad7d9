"""SQLAlchemy implementation of OrderRepository."""

from __future__ import annotations

from collections import defaultdict
from datetime import timezone
from decimal import Decimal

from sqlalchemy import insert, select, update
from sqlalchemy.orm import Session

from storefront.domain.model.order import Order, OrderLineItem, OrderStatus
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.tables import order_items, orders


class SqlOrderRepository(OrderRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int, *, for_update: bool = False) -> Order | None:
        stmt = select(orders).where(orders.c.id == order_id)
        if for_update:
            stmt = stmt.with_for_update()
        row = self._session.execute(stmt).mappings().first()
        if row is None:
            return None
        return self._to_domain(row, self._load_items([order_id])[order_id])

    def list_for_user(self, user_id: str) -> list[Order]:
        rows = list(
            self._session.execute(
                select(orders).where(orders.c.user_id == user_id).order_by(orders.c.id)
            ).mappings()
        )
        items = self._load_items([row["id"] for row in rows])
        return [self._to_domain(row, items[row["id"]]) for row in rows]

    def add(self, order: Order) -> None:
        result = self._session.execute(
            insert(orders).values(
                user_id=order.user_id,
                status=order.status.value,
                total_amount=str(order.total_amount.amount),
                currency=order.total_amount.currency,
                created_at=order.created_at,
            )
        )
        order.id = result.inserted_primary_key[0]
        self._session.execute(
            insert(order_items),
            [
                {
                    "order_id": order.id,
                    "position": position,
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "quantity": item.quantity.value,
                    "unit_price": str(item.unit_price.amount),
                }
                for position, item in enumerate(order.items)
            ],
        )

    def update_status(self, order: Order) -> None:
        self._session.execute(
            update(orders).where(orders.c.id == order.id).values(status=order.status.value)
        )

    # --- Serialization --------------------------------------------------------

    def _load_items(self, order_ids: list[int]) -> dict[int, list]:
        grouped: dict[int, list] = defaultdict(list)
        if not order_ids:
            return grouped
        rows = self._session.execute(
            select(order_items)
            .where(order_items.c.order_id.in_(order_ids))
            .order_by(order_items.c.order_id, order_items.c.position)
        ).mappings()
        for row in rows:
            grouped[row["order_id"]].append(row)
        return grouped

    @staticmethod
    def _to_domain(row, item_rows) -> Order:
        currency = row["currency"]
        created_at = row["created_at"]
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)

        return Order(
            id=row["id"],
            user_id=row["user_id"],
            items=[
                OrderLineItem(
                    product_id=i["product_id"],
                    product_name=i["product_name"],
                    quantity=Quantity(i["quantity"]),
                    unit_price=Money(Decimal(i["unit_price"]), currency),
                )
                for i in item_rows
            ],
            total_amount=Money(Decimal(row["total_amount"]), currency),
            status=OrderStatus(row["status"]),
            created_at=created_at,
        )

"""Application service: List Orders use case (query)."""

from __future__ import annotations

from storefront.application.dto import Actor, OrderDTO, order_to_dto
from storefront.domain.repository.unit_of_work import UnitOfWork


class ListOrdersHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, actor: Actor) -> list[OrderDTO]:
        """Return the acting user's own orders, oldest first."""
        with self._uow:
            orders = self._uow.orders.list_for_user(actor.user_id)
        return [order_to_dto(order) for order in orders]

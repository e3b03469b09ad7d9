"""Application service: Show Order use case (query)."""

from __future__ import annotations

from storefront.application.dto import Actor, OrderDTO, order_to_dto
from storefront.domain.exceptions import OrderNotFoundError, UnauthorizedError
from storefront.domain.repository.unit_of_work import UnitOfWork


class ShowOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, actor: Actor, order_id: int) -> OrderDTO:
        with self._uow:
            order = self._uow.orders.get_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        if not order.is_owned_by(actor.user_id) and not actor.is_admin:
            raise UnauthorizedError(
                f"User '{actor.user_id}' may not view order #{order_id}"
            )
        return order_to_dto(order)

"""Application service: Cancel Order use case.

In one unit of work: restore stock for every line, mark the order
CANCELLED and, for self-service cancellations, bump the acting user's
cancellation counter (blocking them once it reaches the threshold).

Admin cancellations on a customer's behalf never count against that
customer.  Lines whose product has since been deleted are skipped for
restocking; the cancellation still goes through.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import Actor, CancellationDTO
from storefront.domain.exceptions import (
    AlreadyCancelledError,
    OrderNotFoundError,
    UnauthorizedError,
    UserNotFoundError,
)
from storefront.domain.model.user import DEFAULT_BLOCK_THRESHOLD
from storefront.domain.repository.unit_of_work import UnitOfWork
from storefront.domain.service.inventory_ledger import InventoryLedger

logger = structlog.get_logger(__name__)


class CancelOrderHandler:

    def __init__(
        self,
        uow: UnitOfWork,
        block_threshold: int = DEFAULT_BLOCK_THRESHOLD,
    ) -> None:
        self._uow = uow
        self._block_threshold = block_threshold

    def handle(self, order_id: int, actor: Actor) -> CancellationDTO:
        restored: dict[str, int] = {}
        skipped: list[str] = []
        cancel_count: int | None = None
        newly_blocked = False
        user_blocked = False

        with self._uow:
            order = self._uow.orders.get_by_id(order_id, for_update=True)
            if order is None:
                raise OrderNotFoundError(order_id)

            if not order.is_owned_by(actor.user_id) and not actor.is_admin:
                logger.warning(
                    "Cancellation refused, not the order owner",
                    order_id=order_id,
                    user_id=actor.user_id,
                    owner_id=order.user_id,
                )
                raise UnauthorizedError(
                    f"User '{actor.user_id}' may not cancel order #{order_id}"
                )

            if order.is_cancelled:
                raise AlreadyCancelledError(order_id)

            ledger = InventoryLedger(self._uow.products)
            for line in sorted(order.items, key=lambda item: item.product_id):
                qty = line.quantity.value
                if ledger.release(line.product_id, qty) is None:
                    skipped.append(line.product_id)
                else:
                    restored[line.product_id] = restored.get(line.product_id, 0) + qty

            order.cancel()
            self._uow.orders.update_status(order)

            if not actor.is_admin:
                user = self._uow.users.get_by_id(actor.user_id, for_update=True)
                if user is None:
                    raise UserNotFoundError(actor.user_id)
                newly_blocked = user.record_self_cancellation(self._block_threshold)
                self._uow.users.save(user)
                cancel_count = user.cancel_count
                user_blocked = user.blocked

            self._uow.commit()

        logger.info(
            "Order cancelled",
            order_id=order_id,
            cancelled_by=actor.user_id,
            role=actor.role.value,
            skipped_products=skipped,
        )
        if newly_blocked:
            logger.warning(
                "User blocked after repeated cancellations",
                user_id=actor.user_id,
                cancel_count=cancel_count,
                threshold=self._block_threshold,
            )

        return CancellationDTO(
            order_id=order_id,
            status=order.status.value,
            restored=restored,
            skipped_product_ids=skipped,
            cancel_count=cancel_count,
            user_blocked=user_blocked,
        )

"""Application service: Delete Product use case (admin only).

Orders referencing the product keep their line snapshot; cancelling
them later simply cannot restock it.
"""

from __future__ import annotations

import structlog

from storefront.application.access_gate import require_admin
from storefront.application.dto import Actor
from storefront.domain.exceptions import ProductNotFoundError
from storefront.domain.repository.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)


class DeleteProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, actor: Actor, product_id: str) -> None:
        require_admin(actor, "delete products")

        with self._uow:
            if not self._uow.products.delete(product_id):
                raise ProductNotFoundError(product_id)
            self._uow.commit()

        logger.info("Product deleted", product_id=product_id, deleted_by=actor.user_id)

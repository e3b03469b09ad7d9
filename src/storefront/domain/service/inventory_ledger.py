"""Domain service: Inventory Ledger.

The single authority for moving product stock.  Every stock change made
while placing or cancelling an order goes through here, so the
non-negativity rule and the row locking live in one place.

The ledger has no atomicity of its own: it works on the repositories of
the caller's unit of work, and a rollback of that unit discards its
changes.
"""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import (
    InsufficientStockError,
    ProductNotFoundError,
    ValidationError,
)
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class InventoryLedger:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def reserve(self, product_id: str, quantity: int) -> Product:
        """Take *quantity* units out of stock.

        Returns the product as read under lock so the caller can capture
        its current price.
        """
        _require_positive(quantity)
        product = self._product_repo.get_by_id(product_id, for_update=True)
        if product is None:
            raise ProductNotFoundError(product_id)
        if quantity > product.stock:
            raise InsufficientStockError(
                product_id=product.id,
                product_name=product.name,
                requested=quantity,
                available=product.stock,
            )
        product.stock -= quantity
        self._product_repo.save(product)
        return product

    def release(self, product_id: str, quantity: int) -> Product | None:
        """Put *quantity* units back into stock.

        A product deleted since the purchase cannot be restocked; that is
        logged and otherwise ignored.
        """
        _require_positive(quantity)
        product = self._product_repo.get_by_id(product_id, for_update=True)
        if product is None:
            logger.warning(
                "Stock release skipped, product no longer exists",
                product_id=product_id,
                quantity=quantity,
            )
            return None
        product.stock += quantity
        self._product_repo.save(product)
        return product


def _require_positive(quantity: int) -> None:
    if quantity <= 0:
        raise ValidationError("Ledger quantity must be positive")

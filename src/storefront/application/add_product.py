"""Application service: Add Product use case (admin only)."""

from __future__ import annotations

import uuid

import structlog

from storefront.application.access_gate import require_admin
from storefront.application.dto import Actor, ProductDTO
from storefront.application.list_products import product_to_dto
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)


class AddProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        actor: Actor,
        name: str,
        price: str,
        stock: int,
        description: str = "",
    ) -> ProductDTO:
        """Add a new product to the catalog."""
        require_admin(actor, "add products")

        with self._uow:
            if name and self._uow.products.get_by_name(name.strip()) is not None:
                raise ValidationError(f"Product '{name.strip()}' already exists")

            product = Product.create(
                product_id=uuid.uuid4().hex,
                name=name,
                price=Money.of(price),
                stock=stock,
                description=description,
            )
            self._uow.products.save(product)
            self._uow.commit()

        logger.info("Product added", product_id=product.id, name=product.name)
        return product_to_dto(product)

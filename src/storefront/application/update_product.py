"""Application service: Update Product use case (admin only)."""

from __future__ import annotations

from storefront.application.access_gate import require_admin
from storefront.application.dto import Actor, ProductDTO
from storefront.application.list_products import product_to_dto
from storefront.domain.exceptions import ProductNotFoundError, ValidationError
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.unit_of_work import UnitOfWork


class UpdateProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        actor: Actor,
        product_id: str,
        new_price: str | None = None,
        new_stock: int | None = None,
    ) -> ProductDTO:
        """Change a product's price and/or stock level.

        Orders already placed keep the price they captured.
        """
        require_admin(actor, "update products")
        if new_price is None and new_stock is None:
            raise ValidationError("Nothing to update: give a new price or stock")

        with self._uow:
            product = self._uow.products.get_by_id(product_id, for_update=True)
            if product is None:
                raise ProductNotFoundError(product_id)

            if new_price is not None:
                product.update_price(Money.of(new_price))
            if new_stock is not None:
                product.set_stock(new_stock)

            self._uow.products.save(product)
            self._uow.commit()

        return product_to_dto(product)

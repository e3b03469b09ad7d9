"""Application service: List Products use case (query, public)."""

from __future__ import annotations

from storefront.application.dto import ProductDTO
from storefront.domain.model.product import Product
from storefront.domain.repository.unit_of_work import UnitOfWork


class ListProductsHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[ProductDTO]:
        with self._uow:
            products = self._uow.products.list_all()
        return [product_to_dto(p) for p in sorted(products, key=lambda p: p.name.lower())]


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        price=str(product.price),
        stock=product.stock,
        description=product.description,
    )

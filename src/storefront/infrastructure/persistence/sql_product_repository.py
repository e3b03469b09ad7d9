"""SQLAlchemy implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.orm import Session

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.tables import products


class SqlProductRepository(ProductRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str, *, for_update: bool = False) -> Product | None:
        stmt = select(products).where(products.c.id == product_id)
        if for_update:
            stmt = stmt.with_for_update()
        row = self._session.execute(stmt).mappings().first()
        return self._to_domain(row) if row is not None else None

    def get_by_name(self, name: str) -> Product | None:
        stmt = select(products).where(func.lower(products.c.name) == name.lower())
        row = self._session.execute(stmt).mappings().first()
        return self._to_domain(row) if row is not None else None

    def list_all(self) -> list[Product]:
        rows = self._session.execute(select(products).order_by(products.c.name)).mappings()
        return [self._to_domain(row) for row in rows]

    def save(self, product: Product) -> None:
        values = self._to_row(product)
        result = self._session.execute(
            update(products).where(products.c.id == product.id).values(**values)
        )
        if result.rowcount == 0:
            self._session.execute(insert(products).values(id=product.id, **values))

    def delete(self, product_id: str) -> bool:
        result = self._session.execute(delete(products).where(products.c.id == product_id))
        return result.rowcount > 0

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_row(product: Product) -> dict:
        return {
            "name": product.name,
            "description": product.description,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "stock": product.stock,
        }

    @staticmethod
    def _to_domain(row) -> Product:
        return Product(
            id=row["id"],
            name=row["name"],
            price=Money(Decimal(row["price"]), row["currency"]),
            stock=row["stock"],
            description=row["description"] or "",
        )

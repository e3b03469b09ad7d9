"""Product aggregate.

Products live independently of orders: prices change, products are added
to and removed from the catalog.  Stock is only moved by the
InventoryLedger while an order is placed or cancelled; catalog
administration may overwrite it with ``set_stock``.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    Invariants:
    - ``price`` is strictly positive
    - ``stock`` is never negative
    """

    id: str
    name: str
    price: Money
    stock: int = 0
    description: str = ""

    @staticmethod
    def create(
        product_id: str,
        name: str,
        price: Money,
        stock: int,
        description: str = "",
    ) -> Product:
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        product = Product(id=product_id, name=name.strip(), price=price,
                          description=description)
        product.update_price(price)
        product.set_stock(stock)
        return product

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        Existing orders are unaffected: they captured the price at
        purchase time.
        """
        if new_price.is_zero:
            raise ValidationError("Product price must be greater than zero")
        self.price = new_price

    def set_stock(self, stock: int) -> None:
        if not isinstance(stock, int) or stock < 0:
            raise ValidationError(f"Stock must be a non-negative integer, got {stock!r}")
        self.stock = stock

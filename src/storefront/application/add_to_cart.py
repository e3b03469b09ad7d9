"""Application service: Add to Cart use case.

Creates the cart on first use and merges repeated adds of the same
product.  Stock is checked but not reserved: it is only taken when the
cart becomes an order.
"""

from __future__ import annotations

from storefront.application.dto import Actor, CartDTO
from storefront.application.show_cart import cart_to_dto
from storefront.domain.exceptions import InsufficientStockError, ProductNotFoundError
from storefront.domain.model.cart import Cart
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.unit_of_work import UnitOfWork


class AddToCartHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, actor: Actor, product_id: str, quantity: int) -> CartDTO:
        qty = Quantity(quantity)

        with self._uow:
            product = self._uow.products.get_by_id(product_id)
            if product is None:
                raise ProductNotFoundError(product_id)

            cart = self._uow.carts.get_for_user(actor.user_id)
            if cart is None:
                cart = Cart(user_id=actor.user_id)

            wanted = cart.quantity_of(product_id) + qty.value
            if wanted > product.stock:
                raise InsufficientStockError(
                    product_id=product.id,
                    product_name=product.name,
                    requested=wanted,
                    available=product.stock,
                )

            cart.add_item(product_id, qty)
            self._uow.carts.save(cart)
            dto = cart_to_dto(cart, self._uow.products)
            self._uow.commit()

        return dto

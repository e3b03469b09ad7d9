"""Application service: Remove from Cart use case."""

from __future__ import annotations

from storefront.application.dto import Actor, CartDTO
from storefront.application.show_cart import cart_to_dto
from storefront.domain.exceptions import CartNotFoundError
from storefront.domain.repository.unit_of_work import UnitOfWork


class RemoveFromCartHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, actor: Actor, product_id: str) -> CartDTO:
        """Drop a product from the cart.

        The cart itself survives even when its last line goes; placing an
        order from it then fails with EmptyCartError.
        """
        with self._uow:
            cart = self._uow.carts.get_for_user(actor.user_id)
            if cart is None:
                raise CartNotFoundError(actor.user_id)

            cart.remove_item(product_id)
            self._uow.carts.save(cart)
            dto = cart_to_dto(cart, self._uow.products)
            self._uow.commit()

        return dto

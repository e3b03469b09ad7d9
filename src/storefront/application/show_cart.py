"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from storefront.application.dto import Actor, CartDTO, CartLineDTO
from storefront.domain.model.cart import Cart
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.unit_of_work import UnitOfWork


class ShowCartHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, actor: Actor) -> CartDTO:
        with self._uow:
            cart = self._uow.carts.get_for_user(actor.user_id)
            if cart is None:
                return CartDTO(user_id=actor.user_id, items=[])
            return cart_to_dto(cart, self._uow.products)


def cart_to_dto(cart: Cart, product_repo: ProductRepository) -> CartDTO:
    """Describe *cart* using current catalog names and prices."""
    lines: list[CartLineDTO] = []
    for line in cart.items:
        product = product_repo.get_by_id(line.product_id)
        lines.append(
            CartLineDTO(
                product_id=line.product_id,
                product_name=product.name if product else None,
                quantity=line.quantity.value,
                unit_price=str(product.price) if product else None,
            )
        )
    return CartDTO(user_id=cart.user_id, items=lines)

"""Builders shared by the application-layer tests."""

from __future__ import annotations

from storefront.application.dto import Actor
from storefront.domain.model.cart import Cart
from storefront.domain.model.product import Product
from storefront.domain.model.user import Role, User
from storefront.domain.model.value_objects import Money, Quantity
from tests.fakes import FakeStore, FakeUnitOfWork

ALICE = Actor(user_id="alice", role=Role.CUSTOMER)
BOB = Actor(user_id="bob", role=Role.CUSTOMER)
ADMIN = Actor(user_id="root", role=Role.ADMIN)


def make_uow(
    products: list[tuple[str, str, int]] | None = None,
    carts: dict[str, list[tuple[str, int]]] | None = None,
) -> FakeUnitOfWork:
    """Build a fake unit of work.

    *products* are (product_id, price, stock) tuples; *carts* maps a user
    ID to (product_id, quantity) lines.  Alice, Bob and an admin exist.
    """
    store = FakeStore()
    for pid, price, stock in products or []:
        store.products[pid] = Product(id=pid, name=pid.capitalize(),
                                      price=Money.of(price), stock=stock)
    for actor, name in ((ALICE, "Alice"), (BOB, "Bob"), (ADMIN, "Root")):
        store.users[actor.user_id] = User(
            id=actor.user_id, name=name, email=f"{actor.user_id}@shop.test",
            role=actor.role,
        )
    for user_id, lines in (carts or {}).items():
        cart = Cart(user_id=user_id)
        for pid, qty in lines:
            cart.add_item(pid, Quantity(qty))
        store.carts[user_id] = cart
    return FakeUnitOfWork(store)

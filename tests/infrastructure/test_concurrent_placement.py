"""Concurrent order placement against one SQLite database.

Two customers each try to buy the whole stock of the same product at the
same time.  Exactly one may win.
"""

import threading

from storefront.application.dto import Actor
from storefront.application.place_order import PlaceOrderHandler
from storefront.domain.exceptions import InsufficientStockError
from storefront.domain.model.cart import Cart
from storefront.domain.model.user import Role, User
from storefront.domain.model.value_objects import Quantity

STOCK = 5


def _prepare(make_uow, user_ids):
    with make_uow() as uow:
        for user_id in user_ids:
            uow.users.save(User(id=user_id, name=user_id, email=f"{user_id}@shop.test"))
            cart = Cart(user_id=user_id)
            cart.add_item("widget", Quantity(STOCK))
            uow.carts.save(cart)
        uow.commit()


def _race(make_uow, user_ids):
    barrier = threading.Barrier(len(user_ids))
    outcomes: dict[str, object] = {}

    def place(user_id):
        handler = PlaceOrderHandler(make_uow())
        barrier.wait()
        try:
            outcomes[user_id] = handler.handle(Actor(user_id=user_id, role=Role.CUSTOMER))
        except Exception as exc:  # collected and asserted on below
            outcomes[user_id] = exc

    threads = [threading.Thread(target=place, args=(uid,)) for uid in user_ids]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=30)
    return outcomes


class TestConcurrentPlacement:

    def test_exactly_one_of_two_wins(self, seeded):
        users = ["carol", "dave"]
        _prepare(seeded, users)

        outcomes = _race(seeded, users)

        failures = [o for o in outcomes.values() if isinstance(o, Exception)]
        successes = [o for o in outcomes.values() if not isinstance(o, Exception)]
        assert len(successes) == 1
        assert len(failures) == 1
        assert isinstance(failures[0], InsufficientStockError)

        with seeded() as uow:
            assert uow.products.get_by_id("widget").stock == 0
            orders = uow.orders.list_for_user("carol") + uow.orders.list_for_user("dave")
        assert len(orders) == 1

    def test_loser_keeps_cart(self, seeded):
        users = ["carol", "dave"]
        _prepare(seeded, users)

        outcomes = _race(seeded, users)

        loser = next(uid for uid, o in outcomes.items() if isinstance(o, Exception))
        winner = next(uid for uid in users if uid != loser)
        with seeded() as uow:
            assert uow.carts.get_for_user(loser).quantity_of("widget") == STOCK
            assert uow.carts.get_for_user(winner) is None

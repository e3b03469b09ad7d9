"""In-memory fakes for testing.

The repositories implement the same abstract interfaces as the SQL
ones but keep everything in dicts on a shared FakeStore, handing out
and storing copies so a change only lands through a repository write.
FakeUnitOfWork snapshots the store when a block starts and puts the
snapshot back on rollback, so all-or-nothing behaviour can be asserted
without a database.
"""

from __future__ import annotations

import copy

from storefront.domain.exceptions import StorageError
from storefront.domain.model.cart import Cart
from storefront.domain.model.order import Order
from storefront.domain.model.product import Product
from storefront.domain.model.user import User
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.unit_of_work import UnitOfWork
from storefront.domain.repository.user_repository import UserRepository


class FakeStore:

    def __init__(self) -> None:
        self.products: dict[str, Product] = {}
        self.carts: dict[str, Cart] = {}
        self.orders: dict[int, Order] = {}
        self.users: dict[str, User] = {}
        self.next_order_id = 1

    def snapshot(self) -> dict:
        return copy.deepcopy(self.__dict__)

    def restore(self, snapshot: dict) -> None:
        self.__dict__.update(copy.deepcopy(snapshot))


class FakeProductRepository(ProductRepository):

    def __init__(self, store: FakeStore) -> None:
        self._store = store

    def get_by_id(self, product_id: str, *, for_update: bool = False) -> Product | None:
        return copy.deepcopy(self._store.products.get(product_id))

    def get_by_name(self, name: str) -> Product | None:
        for p in self._store.products.values():
            if p.name.lower() == name.lower():
                return copy.deepcopy(p)
        return None

    def list_all(self) -> list[Product]:
        return copy.deepcopy(list(self._store.products.values()))

    def save(self, product: Product) -> None:
        self._store.products[product.id] = copy.deepcopy(product)

    def delete(self, product_id: str) -> bool:
        return self._store.products.pop(product_id, None) is not None


class FakeCartRepository(CartRepository):

    def __init__(self, store: FakeStore) -> None:
        self._store = store

    def get_for_user(self, user_id: str) -> Cart | None:
        return copy.deepcopy(self._store.carts.get(user_id))

    def save(self, cart: Cart) -> None:
        self._store.carts[cart.user_id] = copy.deepcopy(cart)

    def delete_for_user(self, user_id: str) -> None:
        self._store.carts.pop(user_id, None)


class FakeOrderRepository(OrderRepository):

    def __init__(self, store: FakeStore) -> None:
        self._store = store

    def get_by_id(self, order_id: int, *, for_update: bool = False) -> Order | None:
        return copy.deepcopy(self._store.orders.get(order_id))

    def list_for_user(self, user_id: str) -> list[Order]:
        return [copy.deepcopy(o) for o in self._store.orders.values() if o.user_id == user_id]

    def add(self, order: Order) -> None:
        order.id = self._store.next_order_id
        self._store.next_order_id += 1
        self._store.orders[order.id] = copy.deepcopy(order)

    def update_status(self, order: Order) -> None:
        self._store.orders[order.id].status = order.status


class FakeUserRepository(UserRepository):

    def __init__(self, store: FakeStore) -> None:
        self._store = store

    def get_by_id(self, user_id: str, *, for_update: bool = False) -> User | None:
        return copy.deepcopy(self._store.users.get(user_id))

    def get_by_email(self, email: str) -> User | None:
        for u in self._store.users.values():
            if u.email == email.strip().lower():
                return copy.deepcopy(u)
        return None

    def save(self, user: User) -> None:
        self._store.users[user.id] = copy.deepcopy(user)


class FakeUnitOfWork(UnitOfWork):

    def __init__(self, store: FakeStore | None = None, fail_on_commit: bool = False) -> None:
        self.store = store or FakeStore()
        self.fail_on_commit = fail_on_commit
        self.commits = 0
        self.rollbacks = 0
        self._snapshot: dict | None = None
        self.products = FakeProductRepository(self.store)
        self.carts = FakeCartRepository(self.store)
        self.orders = FakeOrderRepository(self.store)
        self.users = FakeUserRepository(self.store)

    def rollback(self) -> None:
        self.store.restore(self._snapshot)
        self.rollbacks += 1

    def _begin(self) -> None:
        self._snapshot = self.store.snapshot()

    def _commit(self) -> None:
        if self.fail_on_commit:
            raise StorageError("simulated commit failure")
        self.commits += 1

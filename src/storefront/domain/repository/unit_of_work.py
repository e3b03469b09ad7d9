"""Abstract unit of work: one atomic transaction across all repositories.

Usage::

    with uow:
        product = uow.products.get_by_id("p1", for_update=True)
        ...
        uow.commit()

Leaving the ``with`` block without calling ``commit()``, by returning
early or by an exception, rolls everything back.  Exactly one of commit
or rollback happens per block.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository


class UnitOfWork(ABC):

    products: ProductRepository
    carts: CartRepository
    orders: OrderRepository
    users: UserRepository

    def __enter__(self) -> UnitOfWork:
        self._committed = False
        self._begin()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            if not self._committed:
                self.rollback()
        finally:
            self._end()

    def commit(self) -> None:
        self._commit()
        self._committed = True

    @abstractmethod
    def rollback(self) -> None:
        """Discard every change made in the current block."""

    @abstractmethod
    def _begin(self) -> None:
        """Start a transaction and bind the repositories to it."""

    @abstractmethod
    def _commit(self) -> None:
        """Make every change in the current block durable."""

    def _end(self) -> None:
        """Release resources held by the block (connections, locks)."""

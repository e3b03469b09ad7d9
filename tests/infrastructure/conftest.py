"""Fixtures backed by a real SQLite database file."""

from __future__ import annotations

import pytest

from storefront.domain.model.product import Product
from storefront.domain.model.user import Role, User
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.persistence.database import make_engine, make_session_factory
from storefront.infrastructure.persistence.tables import create_schema
from storefront.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork


@pytest.fixture
def engine(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'test.db'}", lock_timeout=10)
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return make_session_factory(engine)


@pytest.fixture
def make_uow(session_factory):
    def _make() -> SqlAlchemyUnitOfWork:
        return SqlAlchemyUnitOfWork(session_factory)

    return _make


@pytest.fixture
def seeded(make_uow):
    """Two products, a customer and an admin."""
    with make_uow() as uow:
        uow.products.save(Product(id="widget", name="Widget", price=Money.of("10.00"), stock=5))
        uow.products.save(Product(id="gadget", name="Gadget", price=Money.of("2.50"), stock=10))
        uow.users.save(User(id="alice", name="Alice", email="alice@shop.test"))
        uow.users.save(User(id="root", name="Root", email="root@shop.test", role=Role.ADMIN))
        uow.commit()
    return make_uow

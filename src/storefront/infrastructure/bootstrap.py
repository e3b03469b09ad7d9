"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache

from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from storefront.infrastructure.config import Settings, load_settings
from storefront.infrastructure.persistence.database import make_engine, make_session_factory
from storefront.infrastructure.persistence.tables import create_schema
from storefront.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork


@lru_cache(maxsize=1)
def settings() -> Settings:
    return load_settings()


@lru_cache(maxsize=1)
def engine() -> Engine:
    current = settings()
    return make_engine(current.database_url, lock_timeout=current.lock_timeout)


@lru_cache(maxsize=1)
def session_factory() -> sessionmaker:
    return make_session_factory(engine())


def unit_of_work() -> SqlAlchemyUnitOfWork:
    return SqlAlchemyUnitOfWork(session_factory())


def init_database() -> None:
    create_schema(engine())


def reset() -> None:
    """Forget cached settings and engines (after the environment changes)."""
    if engine.cache_info().currsize:
        engine().dispose()
    session_factory.cache_clear()
    engine.cache_clear()
    settings.cache_clear()

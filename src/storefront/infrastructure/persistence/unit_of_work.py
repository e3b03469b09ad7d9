"""SQLAlchemy-backed unit of work.

Each ``with`` block gets its own Session (and therefore its own
database transaction).  Any SQLAlchemy failure inside the block, or at
commit, is rolled back and re-raised as StorageError.
"""

from __future__ import annotations

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from storefront.domain.exceptions import StorageError
from storefront.domain.repository.unit_of_work import UnitOfWork
from storefront.infrastructure.persistence.sql_cart_repository import SqlCartRepository
from storefront.infrastructure.persistence.sql_order_repository import SqlOrderRepository
from storefront.infrastructure.persistence.sql_product_repository import SqlProductRepository
from storefront.infrastructure.persistence.sql_user_repository import SqlUserRepository

logger = structlog.get_logger(__name__)


class SqlAlchemyUnitOfWork(UnitOfWork):

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory
        self._session: Session | None = None

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            super().__exit__(exc_type, exc, tb)
        except SQLAlchemyError as rollback_exc:
            logger.error("Rollback failed", error=str(rollback_exc))
            raise StorageError("Storage failure while rolling back") from rollback_exc

        if isinstance(exc, SQLAlchemyError):
            logger.error("Unit of work aborted by storage failure", error=str(exc))
            raise StorageError(f"Storage failure, no changes were saved: {exc}") from exc

    def rollback(self) -> None:
        self._session.rollback()

    def _begin(self) -> None:
        self._session = self._session_factory()
        self.products = SqlProductRepository(self._session)
        self.carts = SqlCartRepository(self._session)
        self.orders = SqlOrderRepository(self._session)
        self.users = SqlUserRepository(self._session)

    def _commit(self) -> None:
        try:
            self._session.commit()
        except SQLAlchemyError as exc:
            logger.error("Commit failed", error=str(exc))
            raise StorageError(f"Could not commit changes: {exc}") from exc

    def _end(self) -> None:
        self._session.close()
        self._session = None

"""SQLAlchemy implementation of UserRepository."""

from __future__ import annotations

from sqlalchemy import insert, select, update
from sqlalchemy.orm import Session

from storefront.domain.model.user import Role, User
from storefront.domain.repository.user_repository import UserRepository
from storefront.infrastructure.persistence.tables import users


class SqlUserRepository(UserRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, user_id: str, *, for_update: bool = False) -> User | None:
        stmt = select(users).where(users.c.id == user_id)
        if for_update:
            stmt = stmt.with_for_update()
        row = self._session.execute(stmt).mappings().first()
        return self._to_domain(row) if row is not None else None

    def get_by_email(self, email: str) -> User | None:
        stmt = select(users).where(users.c.email == email.strip().lower())
        row = self._session.execute(stmt).mappings().first()
        return self._to_domain(row) if row is not None else None

    def save(self, user: User) -> None:
        values = {
            "name": user.name,
            "email": user.email,
            "role": user.role.value,
            "cancel_count": user.cancel_count,
            "blocked": user.blocked,
        }
        result = self._session.execute(
            update(users).where(users.c.id == user.id).values(**values)
        )
        if result.rowcount == 0:
            self._session.execute(insert(users).values(id=user.id, **values))

    @staticmethod
    def _to_domain(row) -> User:
        return User(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            role=Role(row["role"]),
            cancel_count=row["cancel_count"],
            blocked=bool(row["blocked"]),
        )

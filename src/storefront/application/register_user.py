"""Application service: Register User use case.

Credentials are handled by whatever authenticates requests; this only
records the identity, role and a fresh cancellation reputation.
"""

from __future__ import annotations

import uuid

import structlog

from storefront.application.dto import UserDTO, user_to_dto
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.user import Role, User
from storefront.domain.repository.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)


class RegisterUserHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, name: str, email: str, role: str = Role.CUSTOMER.value) -> UserDTO:
        try:
            user_role = Role(role)
        except ValueError as exc:
            raise ValidationError(f"Unknown role: {role!r}") from exc

        user = User.register(uuid.uuid4().hex, name=name, email=email, role=user_role)

        with self._uow:
            if self._uow.users.get_by_email(user.email) is not None:
                raise ValidationError(f"Email '{user.email}' is already registered")
            self._uow.users.save(user)
            self._uow.commit()

        logger.info("User registered", user_id=user.id, role=user.role.value)
        return user_to_dto(user)

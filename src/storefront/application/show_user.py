"""Application service: Show User use case (query)."""

from __future__ import annotations

from storefront.application.dto import Actor, UserDTO, user_to_dto
from storefront.domain.exceptions import UnauthorizedError, UserNotFoundError
from storefront.domain.repository.unit_of_work import UnitOfWork


class ShowUserHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, actor: Actor, user_id: str) -> UserDTO:
        if user_id != actor.user_id and not actor.is_admin:
            raise UnauthorizedError(f"User '{actor.user_id}' may not view user '{user_id}'")

        with self._uow:
            user = self._uow.users.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user_to_dto(user)

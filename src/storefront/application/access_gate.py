"""Access gate: turns a claimed user ID into a verified Actor.

Runs before a protected operation opens its own unit of work: unknown
and blocked users are turned away without touching any state.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import Actor
from storefront.domain.exceptions import (
    UnauthorizedError,
    UserBlockedError,
    UserNotFoundError,
)
from storefront.domain.repository.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)


class AccessGate:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def authenticate(self, user_id: str) -> Actor:
        with self._uow:
            user = self._uow.users.get_by_id(user_id)

        if user is None:
            logger.warning("Access denied, unknown user", user_id=user_id)
            raise UserNotFoundError(user_id)
        if user.blocked:
            logger.warning(
                "Access denied, user blocked",
                user_id=user_id,
                cancel_count=user.cancel_count,
            )
            raise UserBlockedError(user_id)

        return Actor(user_id=user.id, role=user.role)


def require_admin(actor: Actor, action: str) -> None:
    """Reject *actor* unless they hold the elevated role."""
    if not actor.is_admin:
        logger.warning("Admin action refused", user_id=actor.user_id, action=action)
        raise UnauthorizedError(f"Only admins may {action}")

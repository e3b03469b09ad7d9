"""User aggregate: identity, role and cancellation reputation.

Credentials and registration flows live outside this package; a User
here is what the order core needs to know about the person acting.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from storefront.domain.exceptions import ValidationError

DEFAULT_BLOCK_THRESHOLD = 3


class Role(Enum):
    ADMIN = "admin"
    CUSTOMER = "customer"

    @property
    def is_elevated(self) -> bool:
        return self is Role.ADMIN


@dataclass
class User:
    """Aggregate root for users.

    Invariant: ``blocked`` is True iff ``cancel_count`` has reached the
    block threshold.  Only ``record_self_cancellation`` changes either
    field.
    """

    id: str
    name: str
    email: str
    role: Role = Role.CUSTOMER
    cancel_count: int = 0
    blocked: bool = False

    @staticmethod
    def register(user_id: str, name: str, email: str, role: Role = Role.CUSTOMER) -> User:
        if not name or not name.strip():
            raise ValidationError("User name is required")
        if not email or "@" not in email:
            raise ValidationError(f"Invalid email address: {email!r}")
        return User(id=user_id, name=name.strip(), email=email.strip().lower(), role=role)

    def record_self_cancellation(self, threshold: int = DEFAULT_BLOCK_THRESHOLD) -> bool:
        """Count one self-service cancellation.

        Returns True when this cancellation is the one that blocks the user.
        """
        if threshold < 1:
            raise ValidationError("Block threshold must be at least 1")
        self.cancel_count += 1
        if self.cancel_count >= threshold and not self.blocked:
            self.blocked = True
            return True
        return False

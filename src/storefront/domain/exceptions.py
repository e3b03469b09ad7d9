"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Storage failures are deliberately *not* domain exceptions: they are reported
as a generic failure and the whole operation may be retried.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class AuthorizationError(DomainException):
    """The acting user may not perform the requested operation."""


# --- Validation -----------------------------------------------------------------


class EmptyCartError(ValidationError):
    def __init__(self, user_id: str) -> None:
        super().__init__(f"Cart for user '{user_id}' is empty")
        self.user_id = user_id


class InsufficientStockError(ValidationError):
    def __init__(
        self,
        product_id: str,
        product_name: str,
        requested: int,
        available: int,
    ) -> None:
        super().__init__(
            f"Insufficient stock for {product_name} "
            f"(need {requested}, have {available} in stock)"
        )
        self.product_id = product_id
        self.product_name = product_name
        self.requested = requested
        self.available = available


class AlreadyCancelledError(ValidationError):
    def __init__(self, order_id: int) -> None:
        super().__init__(f"Order #{order_id} is already cancelled")
        self.order_id = order_id


# --- Not found ------------------------------------------------------------------


class ProductNotFoundError(EntityNotFoundError):
    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product '{product_id}' not found")
        self.product_id = product_id


class OrderNotFoundError(EntityNotFoundError):
    def __init__(self, order_id: int) -> None:
        super().__init__(f"Order #{order_id} not found")
        self.order_id = order_id


class CartNotFoundError(EntityNotFoundError):
    def __init__(self, user_id: str) -> None:
        super().__init__(f"No cart found for user '{user_id}'")
        self.user_id = user_id


class UserNotFoundError(EntityNotFoundError):
    def __init__(self, user_id: str) -> None:
        super().__init__(f"User '{user_id}' not found")
        self.user_id = user_id


# --- Authorization --------------------------------------------------------------


class UnauthorizedError(AuthorizationError):
    """Acting user is neither the owner of the resource nor an admin."""


class UserBlockedError(AuthorizationError):
    def __init__(self, user_id: str) -> None:
        super().__init__(
            f"User '{user_id}' is blocked due to repeated cancellations"
        )
        self.user_id = user_id


# --- Infrastructure -------------------------------------------------------------


class StorageError(Exception):
    """The datastore failed to complete a unit of work.

    Raised for commit failures, lock timeouts and connectivity problems.
    Nothing from the failed unit of work is persisted.
    """

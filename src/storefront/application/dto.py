"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.order import Order
from storefront.domain.model.user import Role, User


@dataclass(frozen=True)
class Actor:
    """Verified identity of whoever is making the request."""

    user_id: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role.is_elevated


@dataclass(frozen=True)
class OrderLineItemDTO:
    product_id: str
    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    id: int
    user_id: str
    status: str
    items: list[OrderLineItemDTO]
    total: str
    created_at: str


@dataclass(frozen=True)
class CancellationDTO:
    """Outcome of a cancellation, including its effect on the actor."""

    order_id: int
    status: str
    restored: dict[str, int]  # product_id -> units put back in stock
    skipped_product_ids: list[str]  # products deleted since purchase
    cancel_count: int | None  # None for admin cancellations
    user_blocked: bool


@dataclass(frozen=True)
class CartLineDTO:
    product_id: str
    product_name: str | None  # None when the product was deleted
    quantity: int
    unit_price: str | None


@dataclass(frozen=True)
class CartDTO:
    user_id: str
    items: list[CartLineDTO]


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    price: str
    stock: int
    description: str


@dataclass(frozen=True)
class UserDTO:
    id: str
    name: str
    email: str
    role: str
    cancel_count: int
    blocked: bool


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        user_id=order.user_id,
        status=order.status.value,
        items=[
            OrderLineItemDTO(
                product_id=item.product_id,
                product_name=item.product_name,
                quantity=item.quantity.value,
                unit_price=str(item.unit_price),
                line_total=str(item.line_total),
            )
            for item in order.items
        ],
        total=str(order.total_amount),
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )


def user_to_dto(user: User) -> UserDTO:
    return UserDTO(
        id=user.id,
        name=user.name,
        email=user.email,
        role=user.role.value,
        cancel_count=user.cancel_count,
        blocked=user.blocked,
    )

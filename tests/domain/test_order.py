"""Unit tests for the Order aggregate."""

import pytest

from storefront.domain.exceptions import AlreadyCancelledError, ValidationError
from storefront.domain.model.order import Order, OrderLineItem, OrderStatus
from storefront.domain.model.value_objects import Money, Quantity


def _line(product_id: str = "a", qty: int = 2, price: str = "10.00") -> OrderLineItem:
    return OrderLineItem(
        product_id=product_id,
        product_name=f"Product {product_id}",
        quantity=Quantity(qty),
        unit_price=Money.of(price),
    )


class TestOrderPlace:

    def test_new_order_is_pending(self):
        order = Order.place("u1", [_line()])
        assert order.status == OrderStatus.PENDING
        assert order.id is None
        assert order.user_id == "u1"

    def test_total_is_sum_of_lines(self):
        order = Order.place("u1", [_line("a", 2, "10.00"), _line("b", 3, "1.50")])
        assert order.total_amount == Money.of("24.50")

    def test_empty_order_rejected(self):
        with pytest.raises(ValidationError, match="at least one item"):
            Order.place("u1", [])

    def test_total_is_not_recomputed(self):
        # A persisted total is authoritative even if lines would sum differently.
        order = Order(id=7, user_id="u1", items=[_line()], total_amount=Money.of("18.00"))
        assert order.total_amount == Money.of("18.00")


class TestOrderCancel:

    @pytest.mark.parametrize(
        "status", [OrderStatus.PENDING, OrderStatus.SHIPPED, OrderStatus.DELIVERED]
    )
    def test_cancel_from_any_live_status(self, status):
        order = Order(id=1, user_id="u1", items=[_line()], total_amount=Money.of("20"),
                      status=status)
        order.cancel()
        assert order.status == OrderStatus.CANCELLED
        assert order.is_cancelled

    def test_cancel_twice_rejected(self):
        order = Order.place("u1", [_line()])
        order.id = 3
        order.cancel()
        with pytest.raises(AlreadyCancelledError, match="#3 is already cancelled"):
            order.cancel()

    def test_ownership(self):
        order = Order.place("u1", [_line()])
        assert order.is_owned_by("u1")
        assert not order.is_owned_by("u2")

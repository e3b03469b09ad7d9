"""Unit tests for the Cart aggregate."""

from storefront.domain.model.cart import Cart
from storefront.domain.model.value_objects import Quantity


class TestCart:

    def test_new_cart_is_empty(self):
        assert Cart(user_id="u1").is_empty

    def test_add_new_line(self):
        cart = Cart(user_id="u1")
        cart.add_item("a", Quantity(2))
        assert cart.quantity_of("a") == 2
        assert not cart.is_empty

    def test_add_merges_existing_line(self):
        cart = Cart(user_id="u1")
        cart.add_item("a", Quantity(2))
        cart.add_item("a", Quantity(3))
        assert len(cart.items) == 1
        assert cart.quantity_of("a") == 5

    def test_lines_keep_insertion_order(self):
        cart = Cart(user_id="u1")
        for pid in ("c", "a", "b"):
            cart.add_item(pid, Quantity(1))
        assert [line.product_id for line in cart.items] == ["c", "a", "b"]

    def test_remove_line(self):
        cart = Cart(user_id="u1")
        cart.add_item("a", Quantity(1))
        cart.add_item("b", Quantity(1))
        cart.remove_item("a")
        assert cart.quantity_of("a") == 0
        assert cart.quantity_of("b") == 1

    def test_remove_missing_line_is_noop(self):
        cart = Cart(user_id="u1")
        cart.add_item("a", Quantity(1))
        cart.remove_item("zzz")
        assert cart.quantity_of("a") == 1

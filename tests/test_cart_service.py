"""Tests for the cart accumulator and derived totals."""

from decimal import Decimal

import pydantic
import pytest

from storefront.domain.models import CartLineItem
from storefront.services.cart_service import CartService, cart_totals


def line(product_id: int, price: str, quantity: int) -> CartLineItem:
    return CartLineItem(
        product_id=product_id,
        name=f"Product {product_id}",
        price=Decimal(price),
        quantity=quantity,
    )


class TestAddItem:
    def test_same_product_twice_merges_into_one_line(self):
        cart = CartService()
        cart.add_item(line(1, "10.00", 2))
        merged = cart.add_item(line(1, "10.00", 3))

        assert len(cart.items()) == 1
        assert merged.quantity == 5
        assert cart.items()[0].quantity == 5

    def test_different_products_keep_insertion_order(self):
        cart = CartService()
        cart.add_item(line(3, "1.00", 1))
        cart.add_item(line(1, "1.00", 1))
        assert [i.product_id for i in cart.items()] == [3, 1]

    def test_added_line_is_a_copy(self):
        cart = CartService()
        incoming = line(1, "10.00", 1)
        cart.add_item(incoming)
        cart.add_item(line(1, "10.00", 1))
        assert incoming.quantity == 1

    def test_non_positive_quantity_rejected_by_model(self):
        with pytest.raises(pydantic.ValidationError):
            line(1, "10.00", 0)


class TestUpdateAndRemove:
    def test_update_quantity_sets_value(self):
        cart = CartService([line(1, "10.00", 2)])
        updated = cart.update_quantity(1, 7)
        assert updated.quantity == 7
        assert cart.items()[0].quantity == 7

    @pytest.mark.parametrize("quantity", [0, -3])
    def test_update_to_zero_or_negative_removes(self, quantity):
        cart = CartService([line(1, "10.00", 2), line(2, "5.00", 1)])
        assert cart.update_quantity(1, quantity) is None
        assert [i.product_id for i in cart.items()] == [2]

    def test_update_missing_product_returns_none(self):
        cart = CartService([line(1, "10.00", 2)])
        assert cart.update_quantity(9, 4) is None
        assert len(cart.items()) == 1

    def test_remove_missing_is_noop(self):
        cart = CartService([line(1, "10.00", 2)])
        cart.remove_item(9)
        assert len(cart.items()) == 1

    def test_clear(self):
        cart = CartService([line(1, "10.00", 2)])
        cart.clear()
        assert cart.is_empty()
        assert cart.subtotal() == Decimal("0")


class TestTotals:
    def test_example_cart(self):
        totals = cart_totals([line(1, "10", 2), line(2, "5", 1)])
        assert totals.subtotal == Decimal("25.00")
        assert totals.tax == Decimal("2.00")
        assert totals.shipping == Decimal("5.00")
        assert totals.total == Decimal("32.00")

    def test_empty_cart_is_all_zero(self):
        totals = cart_totals([])
        assert totals.subtotal == totals.tax == totals.shipping == totals.total == Decimal("0")

    def test_tax_rounded_to_cents(self):
        totals = cart_totals([line(2, "39.95", 2)])
        assert totals.subtotal == Decimal("79.90")
        assert totals.tax == Decimal("6.39")
        assert totals.total == Decimal("91.29")

    def test_totals_follow_mutations(self):
        cart = CartService([line(1, "10", 2)])
        assert cart.totals().total == Decimal("26.60")

        cart.update_quantity(1, 1)
        assert cart.totals().subtotal == Decimal("10.00")

        cart.remove_item(1)
        assert cart.totals().total == Decimal("0")


class TestSerialization:
    def test_json_restores_lines(self):
        cart = CartService([line(1, "10.00", 2), line(4, "129.00", 1)])
        restored = CartService.from_json(cart.to_json())
        assert restored.items() == cart.items()
        assert restored.totals() == cart.totals()

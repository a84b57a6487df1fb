"""Integration tests for the RemoveItem use case."""

from decimal import Decimal

import pytest

from shopcart.application.remove_item import RemoveItemHandler
from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.cart import Cart
from shopcart.domain.model.product import Product


def _setup() -> tuple[RemoveItemHandler, Cart]:
    cart = Cart()
    cart.add_item(Product(1, "Widget"), Decimal("15.00"), 1)
    cart.add_item(Product(2, "Gadget"), Decimal("25.00"), 1)
    return RemoveItemHandler(cart), cart


class TestRemoveByCode:

    def test_removes_matching_product(self):
        handler, cart = _setup()
        assert handler.handle(code=1) is True
        assert [i.product.code for i in cart.items] == [2]

    def test_second_removal_reports_false(self):
        handler, _ = _setup()
        handler.handle(code=1)
        assert handler.handle(code=1) is False

    def test_unknown_code_reports_false(self):
        handler, cart = _setup()
        assert handler.handle(code=99) is False
        assert len(cart) == 2


class TestRemoveByPosition:

    def test_removes_line_at_position(self):
        handler, cart = _setup()
        assert handler.handle(position=1) is True
        assert [i.product.code for i in cart.items] == [1]

    def test_out_of_range_reports_false(self):
        handler, cart = _setup()
        assert handler.handle(position=2) is False
        assert handler.handle(position=-1) is False
        assert len(cart) == 2


class TestRemoveSelector:

    def test_neither_selector_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="exactly one"):
            handler.handle()

    def test_both_selectors_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="exactly one"):
            handler.handle(code=1, position=0)

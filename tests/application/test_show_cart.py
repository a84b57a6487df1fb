"""Integration tests for the ShowCart query."""

from decimal import Decimal

from shopcart.application.show_cart import ShowCartHandler
from shopcart.domain.model.cart import Cart
from shopcart.domain.model.product import Product


class TestShowCart:

    def test_empty_cart(self):
        dto = ShowCartHandler(Cart()).handle()
        assert dto.lines == []
        assert dto.total == "$0.00"
        assert dto.item_count == 0

    def test_lines_in_insertion_order(self):
        cart = Cart()
        cart.add_item(Product(2, "Gadget"), Decimal("25.00"), 5)
        cart.add_item(Product(1, "Widget"), Decimal("15.00"), 3)

        dto = ShowCartHandler(cart).handle()

        assert [line.description for line in dto.lines] == ["Gadget", "Widget"]
        assert [line.position for line in dto.lines] == [0, 1]
        assert dto.lines[0].line_total == "$125.00"
        assert dto.total == "$170.00"
        assert dto.item_count == 8

    def test_reflects_later_changes(self):
        cart = Cart()
        handler = ShowCartHandler(cart)
        cart.add_item(Product(1, "Widget"), Decimal("1.00"), 1)
        cart.add_item(Product(1, "Widget"), Decimal("2.00"), 1)

        dto = handler.handle()
        assert dto.lines[0].quantity == 2
        assert dto.lines[0].unit_price == "$2.00"

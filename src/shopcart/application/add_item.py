"""Application service: Add Item use case."""

from __future__ import annotations

import logging

from shopcart.application.dto import CartLineDTO, ItemSpec
from shopcart.application.show_cart import to_line_dto
from shopcart.domain.model.cart import Cart
from shopcart.domain.model.money import to_decimal
from shopcart.domain.model.product import Product

logger = logging.getLogger(__name__)


class AddItemHandler:

    def __init__(self, cart: Cart) -> None:
        self._cart = cart

    def handle(self, spec: ItemSpec) -> CartLineDTO:
        """Add (or merge) a line and return it as it now stands."""
        product = Product(code=spec.code, description=spec.description)
        unit_price = None if spec.unit_price is None else to_decimal(spec.unit_price)

        self._cart.add_item(product, unit_price, spec.quantity)

        item = self._cart.get_item(product)
        position = self._cart.position_of(product)
        logger.info("Added %d x %s at %s", spec.quantity, product, item.unit_price)
        return to_line_dto(position, item)  # type: ignore[arg-type]

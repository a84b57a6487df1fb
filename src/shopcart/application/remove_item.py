"""Application service: Remove Item use case."""

from __future__ import annotations

import logging

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.cart import Cart

logger = logging.getLogger(__name__)


class RemoveItemHandler:

    def __init__(self, cart: Cart) -> None:
        self._cart = cart

    def handle(self, code: int | None = None, position: int | None = None) -> bool:
        """Remove a line by product code or by insertion position.

        Exactly one of *code* / *position* must be given. Returns False when
        nothing matched; that is not an error.
        """
        if (code is None) == (position is None):
            raise ValidationError("Specify exactly one of product code or position")

        if position is not None:
            removed = self._cart.remove_item_at(position)
        else:
            product = self._cart.find_product(code)  # type: ignore[arg-type]
            removed = product is not None and self._cart.remove_item(product)

        if not removed:
            logger.info("Nothing removed (code=%s, position=%s)", code, position)
        return removed

"""Cart aggregate — the core of the domain.

The Cart owns an insertion-ordered list of distinct products and a mapping
from each product to its current Item. Both structures always hold exactly
the same products.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from shopcart.domain.model.item import (
    Item,
    merge,
    validate_product,
    validate_quantity,
    validate_unit_price,
)
from shopcart.domain.model.money import round_total, sum_amounts
from shopcart.domain.model.product import Product

logger = logging.getLogger(__name__)


class Cart:
    """Aggregate root for one customer's selected items.

    Not thread-safe; callers sharing a cart must serialize access.
    """

    def __init__(self) -> None:
        self._products: list[Product] = []
        self._items: dict[Product, Item] = {}

    # --- Mutations ------------------------------------------------------------

    def add_item(
        self,
        product: Product,
        unit_price: Decimal | str | float | int,
        quantity: int,
    ) -> None:
        """Add *quantity* units of *product* at *unit_price*.

        If the product is already in the cart the quantities are summed and
        the new unit price replaces the old one. All arguments are validated
        before the cart is touched, so a failed call changes nothing.
        """
        validate_product(product)
        validate_unit_price(unit_price)
        validate_quantity(quantity)

        existing = self._items.get(product)
        if existing is None:
            item = Item(product, unit_price, quantity)
            self._products.append(product)
        else:
            item = merge(existing, unit_price, quantity)
        self._items[product] = item

        logger.debug(
            "Cart line %s: qty=%d unit_price=%s", product.code, item.quantity, item.unit_price
        )

    def remove_item(self, target: Product | int | None) -> bool:
        """Remove a product, or the product at a position.

        Accepts either a Product or an ``int`` position (see
        ``remove_item_at``). Returns True if something was removed.
        """
        if target is None:
            return False
        if isinstance(target, Product):
            return self._remove_product(target)
        if isinstance(target, int) and not isinstance(target, bool):
            return self.remove_item_at(target)
        raise TypeError(
            f"remove_item expects a Product or an int position, got {type(target).__name__}"
        )

    def remove_item_at(self, position: int) -> bool:
        """Remove the product at 0-based insertion *position*.

        Out-of-range positions, negative ones included, remove nothing and
        return False.
        """
        if not 0 <= position < len(self._products):
            return False
        return self._remove_product(self._products[position])

    # --- Queries --------------------------------------------------------------

    @property
    def total(self) -> Decimal:
        """Sum of line totals, rounded half-even to cents."""
        return round_total(sum_amounts(item.line_total for item in self._items.values()))

    @property
    def items(self) -> tuple[Item, ...]:
        """Current items in the order their products were first added."""
        return tuple(self._items[product] for product in self._products)

    @property
    def is_empty(self) -> bool:
        return not self._products

    def get_item(self, product: Product) -> Item | None:
        return self._items.get(product)

    def position_of(self, product: Product) -> int | None:
        """Return the insertion position of *product*, or None if absent."""
        try:
            return self._products.index(product)
        except ValueError:
            return None

    def find_product(self, code: int) -> Product | None:
        for product in self._products:
            if product.code == code:
                return product
        return None

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, product: object) -> bool:
        return product in self._items

    def __repr__(self) -> str:
        return f"Cart(products={len(self)}, total={self.total})"

    # --- Internal helpers -----------------------------------------------------

    def _remove_product(self, product: Product) -> bool:
        if self._items.pop(product, None) is None:
            return False
        self._products.remove(product)
        logger.debug("Cart line %s removed", product.code)
        return True

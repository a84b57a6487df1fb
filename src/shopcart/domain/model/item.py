"""Item value object — one line of a cart.

An Item pairs a product with the unit price and quantity it was added at.
Items are immutable: the cart replaces them instead of editing them.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from shopcart.domain.exceptions import (
    InvalidProductError,
    InvalidQuantityError,
    InvalidUnitPriceError,
    NullProductError,
)
from shopcart.domain.model.money import multiply, to_decimal, truncate_price
from shopcart.domain.model.product import Product


@dataclass(frozen=True)
class Item:
    """A product with its unit price and quantity.

    ``unit_price`` is stored truncated to cents (``1.999`` becomes ``1.99``).
    Equality covers all three fields.
    """

    product: Product
    unit_price: Decimal
    quantity: int

    def __post_init__(self) -> None:
        price = validate_unit_price(self.unit_price)
        validate_quantity(self.quantity)
        validate_product(self.product)
        object.__setattr__(self, "unit_price", truncate_price(price))

    @property
    def line_total(self) -> Decimal:
        # Not rounded; the cart rounds once over the sum.
        return multiply(self.unit_price, self.quantity)


def validate_product(product: Product | None) -> None:
    if product is None:
        raise NullProductError()
    if not isinstance(product, Product):
        raise InvalidProductError(
            f"Expected a Product, got {type(product).__name__}"
        )


def validate_unit_price(unit_price: Decimal | str | float | int | None) -> Decimal:
    """Return *unit_price* as a Decimal, rejecting null and negative values."""
    if unit_price is None:
        raise InvalidUnitPriceError()
    price = to_decimal(unit_price)
    if price < Decimal("0"):
        raise InvalidUnitPriceError(f"Unit price cannot be negative, got {price}")
    return price


def validate_quantity(quantity: int) -> None:
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise InvalidQuantityError(
            f"Quantity must be an integer, got {type(quantity).__name__}"
        )
    if quantity < 0:
        raise InvalidQuantityError()


def merge(existing: Item, unit_price: Decimal | str | float | int, quantity: int) -> Item:
    """Fold a new (price, quantity) pair into *existing*.

    Quantities add up; the incoming price replaces the old one. The result
    goes through the regular constructor so it is validated and truncated
    like any other Item.
    """
    validate_unit_price(unit_price)
    validate_quantity(quantity)
    return Item(
        product=existing.product,
        unit_price=unit_price,
        quantity=existing.quantity + quantity,
    )

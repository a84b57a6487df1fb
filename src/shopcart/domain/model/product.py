"""Product value object.

Products are created by the caller and held by reference inside carts and
items. Two products are the same product when they share a code, whatever
their descriptions say.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from shopcart.domain.exceptions import InvalidProductError


@dataclass(frozen=True)
class Product:
    """A catalog entry that can be put in a cart.

    Equality and hashing are derived from ``code`` only; ``description`` is
    excluded from comparison.
    """

    code: int
    description: str = field(compare=False)

    def __post_init__(self) -> None:
        if self.code is None:
            raise InvalidProductError("Product code must not be null")
        if isinstance(self.code, bool) or not isinstance(self.code, int):
            raise InvalidProductError(
                f"Product code must be an integer, got {type(self.code).__name__}"
            )
        if self.description is None:
            raise InvalidProductError("Product description must not be null")
        if not isinstance(self.description, str):
            raise InvalidProductError(
                f"Product description must be a string, got {type(self.description).__name__}"
            )

    def __str__(self) -> str:
        return f"#{self.code} {self.description}"

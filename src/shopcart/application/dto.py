"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ItemSpec:
    """Input: a product and the price/quantity it is being added at."""

    code: int
    description: str
    unit_price: str | None
    quantity: int


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line as displayed to the user."""

    position: int
    code: int
    description: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    """Output: the whole cart as displayed to the user."""

    lines: list[CartLineDTO]
    total: str
    item_count: int

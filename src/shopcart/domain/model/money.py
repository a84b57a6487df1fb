"""Decimal helpers for prices and totals.

Two rounding policies live here and must stay separate:

- unit prices are *truncated* to cents when an Item is built
- cart totals are *rounded half-even* to cents when they are reported
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import ROUND_DOWN, ROUND_HALF_EVEN, Decimal, InvalidOperation, localcontext

from shopcart.domain.exceptions import InvalidUnitPriceError

PRICE_SCALE = Decimal("0.01")
ZERO = Decimal("0.00")


def to_decimal(value: str | float | int | Decimal) -> Decimal:
    """Coerce *value* to a finite Decimal.

    Floats go through ``str()`` first so ``1.999`` becomes ``Decimal("1.999")``
    rather than its binary expansion.
    """
    if value is None or isinstance(value, bool):
        raise InvalidUnitPriceError(f"Invalid unit price: {value!r}")
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value).strip())
        except (InvalidOperation, ValueError) as exc:
            raise InvalidUnitPriceError(f"Invalid unit price: {value!r}") from exc
    if not amount.is_finite():
        raise InvalidUnitPriceError(f"Invalid unit price: {value!r}")
    return amount


def _exact_prec(*amounts: Decimal) -> int:
    """Digits needed to hold any of *amounts* (plus cents) without rounding."""
    widest = max(a.adjusted() for a in amounts)
    finest = min(a.as_tuple().exponent for a in amounts)
    return max(28, widest - min(finest, -2) + 1)


def _quantize(amount: Decimal, rounding: str) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = _exact_prec(amount) + 1
        return amount.quantize(PRICE_SCALE, rounding=rounding)


def truncate_price(amount: Decimal) -> Decimal:
    """Drop digits beyond the cent without adjusting the kept ones."""
    return _quantize(amount, ROUND_DOWN)


def round_total(amount: Decimal) -> Decimal:
    """Round to the cent, ties going to the even neighbour."""
    return _quantize(amount, ROUND_HALF_EVEN)


def multiply(amount: Decimal, factor: int) -> Decimal:
    """Exact ``amount * factor``, however many digits that takes."""
    with localcontext() as ctx:
        ctx.prec = max(28, len(amount.as_tuple().digits) + len(str(abs(factor))))
        return amount * factor


def sum_amounts(amounts: Iterable[Decimal]) -> Decimal:
    """Exact sum of *amounts*; ``ZERO`` when there are none."""
    amounts = list(amounts)
    if not amounts:
        return ZERO
    with localcontext() as ctx:
        ctx.prec = _exact_prec(*amounts) + len(str(len(amounts)))
        result = ZERO
        for amount in amounts:
            result += amount
        return result


def format_amount(amount: Decimal) -> str:
    return f"${round_total(amount)}"

"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from shopcart.application.dto import CartDTO, CartLineDTO
from shopcart.domain.model.cart import Cart
from shopcart.domain.model.item import Item
from shopcart.domain.model.money import format_amount


class ShowCartHandler:

    def __init__(self, cart: Cart) -> None:
        self._cart = cart

    def handle(self) -> CartDTO:
        return CartDTO(
            lines=[to_line_dto(pos, item) for pos, item in enumerate(self._cart.items)],
            total=format_amount(self._cart.total),
            item_count=sum(item.quantity for item in self._cart.items),
        )


def to_line_dto(position: int, item: Item) -> CartLineDTO:
    return CartLineDTO(
        position=position,
        code=item.product.code,
        description=item.product.description,
        quantity=item.quantity,
        unit_price=format_amount(item.unit_price),
        line_total=format_amount(item.line_total),
    )

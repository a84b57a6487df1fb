"""Composition root — wires a fresh cart to its use-case handlers.

This is the only place in the codebase that knows about *all* layers.
Nothing is persisted: every session starts from an empty cart.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from shopcart.application.add_item import AddItemHandler
from shopcart.application.remove_item import RemoveItemHandler
from shopcart.application.show_cart import ShowCartHandler
from shopcart.domain.model.cart import Cart


@dataclass
class CartSession:
    cart: Cart = field(default_factory=Cart)

    def __post_init__(self) -> None:
        self.add_item = AddItemHandler(self.cart)
        self.remove_item = RemoveItemHandler(self.cart)
        self.show_cart = ShowCartHandler(self.cart)


def new_session() -> CartSession:
    return CartSession()

"""Unit tests for the Product value object."""

from dataclasses import FrozenInstanceError

import pytest

from shopcart.domain.exceptions import InvalidProductError
from shopcart.domain.model.product import Product


class TestProductCreation:

    def test_happy_path(self):
        p = Product(1, "Widget")
        assert p.code == 1
        assert p.description == "Widget"

    def test_null_code_rejected(self):
        with pytest.raises(InvalidProductError, match="code must not be null"):
            Product(None, "Widget")

    def test_null_description_rejected(self):
        with pytest.raises(InvalidProductError, match="description must not be null"):
            Product(1, None)

    def test_non_integer_code_rejected(self):
        with pytest.raises(InvalidProductError, match="must be an integer"):
            Product("1", "Widget")

    def test_immutable(self):
        p = Product(1, "Widget")
        with pytest.raises(FrozenInstanceError):
            p.code = 2


class TestProductEquality:

    def test_same_code_is_same_product(self):
        assert Product(1, "Widget") == Product(1, "Renamed widget")

    def test_hash_follows_code(self):
        assert hash(Product(1, "Widget")) == hash(Product(1, "Other"))
        assert len({Product(1, "a"), Product(1, "b"), Product(2, "a")}) == 2

    def test_different_code_differs(self):
        assert Product(1, "Widget") != Product(2, "Widget")

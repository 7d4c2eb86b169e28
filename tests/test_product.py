"""Unit tests for ProductModel rules."""

from decimal import Decimal

import pytest

from storefront.data.models import ProductModel
from storefront.domain.exceptions import ValidationError


def _product(stock: int = 5, price="10.00") -> ProductModel:
    return ProductModel(name="Widget", current_price=price, stock_quantity=stock)


class TestIsInStock:

    @pytest.mark.parametrize(
        "requested, expected",
        [(-3, True), (0, True), (1, True), (5, True), (6, False), (100, False)],
    )
    def test_compares_request_against_stock(self, requested, expected):
        assert _product(stock=5).is_in_stock(requested) is expected

    def test_sold_out_product_only_satisfies_non_positive_requests(self):
        product = _product(stock=0)
        assert product.is_in_stock(0)
        assert product.is_in_stock(-1)
        assert not product.is_in_stock(1)

    def test_check_does_not_change_stock(self):
        product = _product(stock=2)
        product.is_in_stock(10)
        assert product.stock_quantity == 2


class TestUnsavedProduct:

    def test_stock_defaults_to_zero_before_insert(self):
        product = ProductModel(name="W", current_price="1.00")
        assert product.stock_quantity == 0
        assert not product.is_in_stock(1)
        assert product.is_in_stock(0)


class TestProductValidation:

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="Stock quantity"):
            _product(stock=-1)

    def test_stock_cannot_drop_below_zero_later(self):
        product = _product(stock=1)
        with pytest.raises(ValidationError):
            product.stock_quantity = -5

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name"):
            ProductModel(name="   ", current_price="1.00", stock_quantity=1)

    def test_float_price_is_stored_as_decimal(self):
        product = _product(price=19.99)
        assert product.current_price == Decimal("19.99")

    def test_non_finite_price_rejected(self):
        with pytest.raises(ValidationError, match="finite"):
            _product(price=float("inf"))

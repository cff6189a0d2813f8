"""Unit tests for the Sale aggregate."""

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.sale import Sale, SaleHeader, SaleLine, SaleType
from storefront.domain.model.value_objects import Money, Quantity


def _header(store_id: str = "store-1") -> SaleHeader:
    return SaleHeader(
        store_id=store_id,
        address="1 Main St",
        payment_type="CARD",
        sale_type=SaleType.ONLINE,
        cumulative_discount=Money.zero(),
        freight_price=Money.of("4.99"),
    )


def _line(product_id: str = "A", qty: int = 1, price: str = "150.00") -> SaleLine:
    return SaleLine(product_id=product_id, quantity_sold=Quantity(qty), selling_price=Money.of(price))


class TestSaleCreation:

    def test_total_is_sum_of_lines(self):
        sale = Sale.create("owner-1", _header(), [_line("A", 3, "150"), _line("B", 2, "50")])
        assert sale.total_amount == Money.of("550.00")

    def test_id_is_none_until_persisted(self):
        assert Sale.create("owner-1", _header(), [_line()]).id is None

    def test_no_lines_rejected(self):
        with pytest.raises(ValidationError, match="at least one line"):
            Sale.create("owner-1", _header(), [])

    def test_blank_store_rejected(self):
        with pytest.raises(ValidationError, match="Store ID"):
            Sale.create("owner-1", _header(store_id=" "), [_line()])

    def test_freight_and_discount_do_not_change_total(self):
        sale = Sale.create("owner-1", _header(), [_line("A", 1, "10")])
        assert sale.total_amount == Money.of("10")


class TestSaleLine:

    def test_line_total(self):
        assert _line(qty=3, price="150").line_total == Money.of("450")


class TestSaleType:

    def test_parse_is_case_insensitive(self):
        assert SaleType.parse(" in_store ") is SaleType.IN_STORE

    def test_unknown_rejected(self):
        with pytest.raises(ValidationError, match="Unknown sale type"):
            SaleType.parse("BARTER")

"""Unit tests for the offer price calculation."""

from decimal import Decimal

import pytest

from storefront.domain.model.value_objects import Money, Percentage
from storefront.domain.service.price_calculator import compute_offer_price


def test_quarter_off_two_hundred_is_one_fifty():
    result = compute_offer_price(Money.of("200"), Percentage.of("25"))
    assert result == Money.of("150.00")
    assert str(result) == "$150.00"


def test_zero_percent_keeps_selling_price():
    assert compute_offer_price(Money.of("99.99"), Percentage.of("0")) == Money.of("99.99")


def test_missing_percentage_means_no_discount():
    assert compute_offer_price(Money.of("42.00"), None) == Money.of("42.00")


def test_full_discount_is_free():
    assert compute_offer_price(Money.of("42.00"), Percentage.of("100")) == Money.zero()


def test_zero_selling_price_stays_zero():
    assert compute_offer_price(Money.zero(), Percentage.of("10")) == Money.zero()


def test_result_rounded_to_cents():
    result = compute_offer_price(Money.of("10"), Percentage.of("33.333"))
    assert result.amount == Decimal("6.67")


def test_currency_preserved():
    result = compute_offer_price(Money.of("10", "EUR"), Percentage.of("50"))
    assert result == Money.of("5.00", "EUR")


@pytest.mark.parametrize("selling_price", ["0", "0.01", "19.99", "200", "12345.67"])
def test_non_increasing_in_percentage(selling_price):
    price = Money.of(selling_price)
    previous = compute_offer_price(price, Percentage.of("0"))
    assert previous == price
    for step in range(1, 101):
        current = compute_offer_price(price, Percentage.of(step))
        assert current <= previous
        previous = current

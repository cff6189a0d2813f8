"""Domain service: Price Calculator.

The offer price is the price actually charged.  It is always derived from
the selling price and the discount percentage and is never set directly.
"""

from __future__ import annotations

from decimal import Decimal

from storefront.domain.model.value_objects import Money, Percentage


def compute_offer_price(
    selling_price: Money,
    offer_percentage: Percentage | None,
) -> Money:
    """Return ``selling_price * (1 - offer_percentage / 100)`` rounded to cents.

    A missing percentage means no discount.  A zero price or a zero
    percentage is a real value and passes through unchanged.
    """
    if offer_percentage is None:
        offer_percentage = Percentage.zero()
    discounted = selling_price.amount * (Decimal("1") - offer_percentage.fraction)
    return Money(discounted, selling_price.currency).quantized()

"""Price history entries: an append-only audit of superseded prices."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from storefront.domain.model.value_objects import Money, Percentage


@dataclass(frozen=True)
class PriceHistoryEntry:
    """The price/discount pair that was active *before* a change.

    Entries are never mutated or deleted once appended.
    """

    product_id: str
    price: Money
    offer_percentage: Percentage
    recorded_at: datetime

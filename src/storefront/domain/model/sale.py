"""Sale aggregate: the ledger record of a completed multi-line sale.

The Sale owns its line items.  It is created once, atomically with its
lines, and never updated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, Quantity


class SaleType(Enum):
    ONLINE = "ONLINE"
    IN_STORE = "IN_STORE"

    @staticmethod
    def parse(raw: str) -> SaleType:
        try:
            return SaleType(raw.strip().upper())
        except ValueError:
            allowed = ", ".join(t.value for t in SaleType)
            raise ValidationError(
                f"Unknown sale type '{raw}' (expected one of: {allowed})"
            ) from None


@dataclass(frozen=True)
class SaleLineRequest:
    """What the buyer asked for.  Deliberately carries no price."""

    product_id: str
    quantity: Quantity


@dataclass(frozen=True)
class SaleLine:
    """A line item priced from the catalog at assembly time."""

    product_id: str
    quantity_sold: Quantity
    selling_price: Money  # authoritative offer price snapshot

    @property
    def line_total(self) -> Money:
        return self.selling_price * self.quantity_sold.value


@dataclass(frozen=True)
class SaleHeader:
    """Caller-supplied header fields of a sale."""

    store_id: str
    address: str
    payment_type: str
    sale_type: SaleType
    cumulative_discount: Money
    freight_price: Money
    user_id: str | None = None


@dataclass
class Sale:
    """Aggregate root for the sales ledger.

    Use ``Sale.create()`` for new sales; it enforces the invariants.
    The ``__init__`` is intentionally simple so the repository can
    reconstitute persisted sales without re-validating.
    """

    id: int | None
    customer_id: str
    header: SaleHeader
    lines: list[SaleLine]
    sale_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(customer_id: str, header: SaleHeader, lines: list[SaleLine]) -> Sale:
        if not lines:
            raise ValidationError("Sale must contain at least one line")
        if not customer_id:
            raise ValidationError("Sale customer is required")
        if not header.store_id or not header.store_id.strip():
            raise ValidationError("Store ID is required")
        return Sale(id=None, customer_id=customer_id, header=header, lines=list(lines))

    @property
    def total_amount(self) -> Money:
        """Sum of line totals, accumulated in line order."""
        result = Money.zero(self.lines[0].selling_price.currency if self.lines else "USD")
        for line in self.lines:
            result = result + line.line_total
        return result

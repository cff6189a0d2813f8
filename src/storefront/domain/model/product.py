"""Product aggregate.

Products live independently of sales.  They have their own lifecycle:
prices and discounts change, and every sale takes a snapshot of the
offer price that was current when it was assembled.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, Percentage
from storefront.domain.service.price_calculator import compute_offer_price


@dataclass
class Product:
    """A product in the catalog.

    ``offer_price`` is derived state: only ``create()`` and ``repriced()``
    compute it.  The plain ``__init__`` exists so repositories can
    reconstitute stored products without recomputing anything.
    """

    id: str
    owner_id: str
    name: str
    cost_price: Money
    selling_price: Money
    offer_percentage: Percentage | None
    offer_price: Money
    description: str = ""
    quantity: int | None = None
    category_name: str = ""
    batch_id: str = ""
    weight: Decimal | None = None
    images: list[str] = field(default_factory=list)
    customer_rating: Decimal | None = None
    expiry: date | None = None
    manufacture_date: date | None = None

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        id: str,
        owner_id: str,
        name: str,
        cost_price: Money,
        selling_price: Money,
        offer_percentage: Percentage | None = None,
        **details,
    ) -> Product:
        """Create a new product with a freshly computed offer price."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if not owner_id:
            raise ValidationError("Product owner is required")
        quantity = details.get("quantity")
        if quantity is not None and quantity < 0:
            raise ValidationError("Product quantity cannot be negative")

        return Product(
            id=id,
            owner_id=owner_id,
            name=name.strip(),
            cost_price=cost_price,
            selling_price=selling_price,
            offer_percentage=(
                offer_percentage if offer_percentage is not None else Percentage.zero()
            ),
            offer_price=compute_offer_price(selling_price, offer_percentage),
            **details,
        )

    # --- Pricing --------------------------------------------------------------

    def repriced(
        self,
        selling_price: Money,
        offer_percentage: Percentage | None,
    ) -> Product:
        """Return a copy carrying the new price pair and its offer price.

        The receiver is left untouched.
        """
        if offer_percentage is None:
            offer_percentage = Percentage.zero()
        return dataclasses.replace(
            self,
            selling_price=selling_price,
            offer_percentage=offer_percentage,
            offer_price=compute_offer_price(selling_price, offer_percentage),
            images=list(self.images),
        )


@dataclass(frozen=True)
class ProductPricing:
    """Projection returned by the catalog's batch lookup."""

    product_id: str
    offer_price: Money
    owner_id: str

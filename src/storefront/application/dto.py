"""Data Transfer Objects: plain containers that cross layer boundaries.

Input records replace loosely-typed request payloads: each field is
validated into a domain value object by the handler that receives it.
Output records carry formatted strings so callers never see domain
internals.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.model.price_history import PriceHistoryEntry
from storefront.domain.model.product import Product
from storefront.domain.model.sale import Sale

# --- Inputs -------------------------------------------------------------------


@dataclass(frozen=True)
class SaleItemSpec:
    """Input: what the buyer asked for (product ID + quantity)."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class SaleRequest:
    """Input: a complete sale request.  There is no price field on purpose."""

    items: list[SaleItemSpec]
    store_id: str
    address: str
    payment_type: str
    sale_type: str
    cumulative_discount: str = "0"
    freight_price: str = "0"
    user_id: str | None = None


@dataclass(frozen=True)
class NewProductSpec:
    """Input: a product to add to the catalog."""

    owner_id: str
    name: str
    cost_price: str
    selling_price: str
    offer_percentage: str | None = None
    description: str = ""
    quantity: int | None = None
    category_name: str = ""
    batch_id: str = ""
    weight: str | None = None
    images: list[str] = field(default_factory=list)
    customer_rating: str | None = None
    expiry: str | None = None  # ISO date, e.g. "2027-01-31"
    manufacture_date: str | None = None


# --- Outputs ------------------------------------------------------------------


@dataclass(frozen=True)
class ProductDTO:
    id: str
    owner_id: str
    name: str
    cost_price: str
    selling_price: str
    offer_percentage: str
    offer_price: str
    quantity: int | None


@dataclass(frozen=True)
class SaleLineDTO:
    product_id: str
    quantity_sold: int
    selling_price: str  # formatted, e.g. "$150.00"
    line_total: str


@dataclass(frozen=True)
class SaleDTO:
    id: int
    customer_id: str
    store_id: str
    address: str
    payment_type: str
    sale_type: str
    cumulative_discount: str
    freight_price: str
    items: list[SaleLineDTO]
    total_amount: str
    sale_date: str


@dataclass(frozen=True)
class PriceHistoryDTO:
    product_id: str
    price: str
    offer_percentage: str
    recorded_at: str


# --- Mapping ------------------------------------------------------------------


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        owner_id=product.owner_id,
        name=product.name,
        cost_price=str(product.cost_price),
        selling_price=str(product.selling_price),
        offer_percentage=(
            str(product.offer_percentage) if product.offer_percentage is not None else "0%"
        ),
        offer_price=str(product.offer_price),
        quantity=product.quantity,
    )


def sale_to_dto(sale: Sale) -> SaleDTO:
    header = sale.header
    return SaleDTO(
        id=sale.id,  # type: ignore[arg-type]
        customer_id=sale.customer_id,
        store_id=header.store_id,
        address=header.address,
        payment_type=header.payment_type,
        sale_type=header.sale_type.value,
        cumulative_discount=str(header.cumulative_discount),
        freight_price=str(header.freight_price),
        items=[
            SaleLineDTO(
                product_id=line.product_id,
                quantity_sold=line.quantity_sold.value,
                selling_price=str(line.selling_price),
                line_total=str(line.line_total),
            )
            for line in sale.lines
        ],
        total_amount=str(sale.total_amount),
        sale_date=sale.sale_date.strftime("%Y-%m-%d %H:%M UTC"),
    )


def history_to_dto(entry: PriceHistoryEntry) -> PriceHistoryDTO:
    return PriceHistoryDTO(
        product_id=entry.product_id,
        price=str(entry.price),
        offer_percentage=str(entry.offer_percentage),
        recorded_at=entry.recorded_at.isoformat(),
    )

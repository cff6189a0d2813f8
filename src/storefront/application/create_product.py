"""Application service: Create Product use case."""

from __future__ import annotations

import uuid
from datetime import date
from decimal import Decimal, InvalidOperation

from storefront.application.dto import NewProductSpec, ProductDTO, product_to_dto
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, Percentage
from storefront.domain.repository.product_repository import ProductRepository


class CreateProductHandler:

    def __init__(self, product_repo: ProductRepository, currency: str = "USD") -> None:
        self._product_repo = product_repo
        self._currency = currency

    def handle(self, spec: NewProductSpec) -> ProductDTO:
        """Add a product to the catalog with a computed offer price."""
        offer_percentage = (
            Percentage.of(spec.offer_percentage)
            if spec.offer_percentage is not None
            else None
        )
        product = Product.create(
            id=str(uuid.uuid4()),
            owner_id=spec.owner_id,
            name=spec.name,
            cost_price=Money.of(spec.cost_price, self._currency),
            selling_price=Money.of(spec.selling_price, self._currency),
            offer_percentage=offer_percentage,
            description=spec.description,
            quantity=spec.quantity,
            category_name=spec.category_name,
            batch_id=spec.batch_id,
            weight=_parse_decimal(spec.weight, "weight"),
            images=list(spec.images),
            customer_rating=_parse_decimal(spec.customer_rating, "customer rating"),
            expiry=_parse_date(spec.expiry, "expiry"),
            manufacture_date=_parse_date(spec.manufacture_date, "manufacture date"),
        )
        self._product_repo.save(product)
        return product_to_dto(product)


def _parse_decimal(raw: str | None, label: str) -> Decimal | None:
    if raw is None:
        return None
    try:
        return Decimal(str(raw))
    except InvalidOperation as exc:
        raise ValidationError(f"Invalid {label}: {raw!r}") from exc


def _parse_date(raw: str | None, label: str) -> date | None:
    if not raw:
        return None
    try:
        return date.fromisoformat(raw)
    except ValueError as exc:
        raise ValidationError(f"Invalid {label} date: {raw!r}") from exc

"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from storefront.infrastructure.config import Settings
from storefront.infrastructure.persistence.json_price_history_repository import (
    JsonPriceHistoryRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.json_sale_repository import (
    JsonSaleRepository,
)


def product_repository(settings: Settings) -> JsonProductRepository:
    return JsonProductRepository(settings.data_dir / "products.json")


def sale_repository(settings: Settings) -> JsonSaleRepository:
    return JsonSaleRepository(settings.data_dir / "sales.json")


def price_history_repository(settings: Settings) -> JsonPriceHistoryRepository:
    return JsonPriceHistoryRepository(settings.data_dir / "price_history.json")

"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.product import Product, ProductPricing
from storefront.domain.model.value_objects import Money, Percentage
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def get_pricing(self, product_ids: Iterable[str]) -> dict[str, ProductPricing]:
        wanted = set(product_ids)
        return {
            p.id: ProductPricing(product_id=p.id, offer_price=p.offer_price, owner_id=p.owner_id)
            for p in self._load().values()
            if p.id in wanted
        }

    def list_by_owner(self, owner_id: str) -> list[Product]:
        return [p for p in self._load().values() if p.owner_id == owner_id]

    def save(self, product: Product) -> None:
        products = self._load()
        products[product.id] = product
        self._file.persist([self._to_raw(p) for p in products.values()])

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        return {raw["id"]: self._to_domain(raw) for raw in self._file.load()}

    @staticmethod
    def _to_raw(p: Product) -> dict:
        return {
            "id": p.id,
            "owner_id": p.owner_id,
            "name": p.name,
            "description": p.description,
            "currency": p.selling_price.currency,
            "cost_price": str(p.cost_price.amount),
            "selling_price": str(p.selling_price.amount),
            "offer_percentage": (
                str(p.offer_percentage.value) if p.offer_percentage is not None else None
            ),
            "offer_price": str(p.offer_price.amount),
            "quantity": p.quantity,
            "category_name": p.category_name,
            "batch_id": p.batch_id,
            "weight": str(p.weight) if p.weight is not None else None,
            "images": list(p.images),
            "customer_rating": (
                str(p.customer_rating) if p.customer_rating is not None else None
            ),
            "expiry": p.expiry.isoformat() if p.expiry else None,
            "manufacture_date": (
                p.manufacture_date.isoformat() if p.manufacture_date else None
            ),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        currency = raw.get("currency", "USD")
        pct = raw.get("offer_percentage")
        return Product(
            id=raw["id"],
            owner_id=raw["owner_id"],
            name=raw["name"],
            description=raw.get("description", ""),
            cost_price=Money(Decimal(raw["cost_price"]), currency),
            selling_price=Money(Decimal(raw["selling_price"]), currency),
            offer_percentage=Percentage(Decimal(pct)) if pct is not None else None,
            offer_price=Money(Decimal(raw["offer_price"]), currency),
            quantity=raw.get("quantity"),
            category_name=raw.get("category_name", ""),
            batch_id=raw.get("batch_id", ""),
            weight=Decimal(raw["weight"]) if raw.get("weight") is not None else None,
            images=list(raw.get("images") or []),
            customer_rating=(
                Decimal(raw["customer_rating"])
                if raw.get("customer_rating") is not None
                else None
            ),
            expiry=date.fromisoformat(raw["expiry"]) if raw.get("expiry") else None,
            manufacture_date=(
                date.fromisoformat(raw["manufacture_date"])
                if raw.get("manufacture_date")
                else None
            ),
        )

"""JSON-file-backed implementation of PriceHistoryRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.price_history import PriceHistoryEntry
from storefront.domain.model.value_objects import Money, Percentage
from storefront.domain.repository.price_history_repository import (
    PriceHistoryRepository,
)
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonPriceHistoryRepository(PriceHistoryRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def append(self, entry: PriceHistoryEntry) -> None:
        records = self._file.load()
        records.append(
            {
                "product_id": entry.product_id,
                "price": str(entry.price.amount),
                "currency": entry.price.currency,
                "offer_percentage": str(entry.offer_percentage.value),
                "recorded_at": entry.recorded_at.isoformat(),
            }
        )
        self._file.persist(records)

    def list_for_product(self, product_id: str) -> list[PriceHistoryEntry]:
        return [
            PriceHistoryEntry(
                product_id=raw["product_id"],
                price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
                offer_percentage=Percentage(Decimal(raw["offer_percentage"])),
                recorded_at=datetime.fromisoformat(raw["recorded_at"]),
            )
            for raw in self._file.load()
            if raw["product_id"] == product_id
        ]

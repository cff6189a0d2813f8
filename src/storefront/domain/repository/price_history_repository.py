"""Abstract repository for price history entries (append-only)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.price_history import PriceHistoryEntry


class PriceHistoryRepository(ABC):

    @abstractmethod
    def append(self, entry: PriceHistoryEntry) -> None:
        """Append an entry.  There is no update or delete."""

    @abstractmethod
    def list_for_product(self, product_id: str) -> list[PriceHistoryEntry]:
        """Return a product's entries in the order they were appended."""

"""Abstract repository for the Product aggregate (the catalog store).

Defined in the domain layer so the domain never depends on
infrastructure.  Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from storefront.domain.model.product import Product, ProductPricing


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_pricing(self, product_ids: Iterable[str]) -> dict[str, ProductPricing]:
        """Batch lookup of pricing projections keyed by product ID.

        IDs that do not exist are simply absent from the result.
        """

    @abstractmethod
    def list_by_owner(self, owner_id: str) -> list[Product]:
        """Return every product owned by a customer."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""

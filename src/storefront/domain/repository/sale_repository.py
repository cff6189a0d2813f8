"""Abstract repository for the Sale aggregate (the ledger store)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.sale import Sale


class SaleRepository(ABC):

    @abstractmethod
    def add(self, sale: Sale) -> None:
        """Persist a new sale header together with all of its lines.

        Must be all-or-nothing: on failure neither the header nor any
        line is visible afterwards.  Assigns ``sale.id`` on success.
        """

    @abstractmethod
    def get_by_id(self, sale_id: int) -> Sale | None:
        """Return a sale by its ID, or None if not found."""

    @abstractmethod
    def list_by_customer(self, customer_id: str) -> list[Sale]:
        """Return every sale attributed to a customer, oldest first."""

    @abstractmethod
    def count_by_customer(self, customer_id: str) -> int:
        """Return how many sales are attributed to a customer."""

"""Application services: sales ledger queries."""

from __future__ import annotations

from storefront.application.dto import SaleDTO, sale_to_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.sale_repository import SaleRepository


class ShowSaleHandler:

    def __init__(self, sale_repo: SaleRepository) -> None:
        self._sale_repo = sale_repo

    def handle(self, sale_id: int) -> SaleDTO:
        sale = self._sale_repo.get_by_id(sale_id)
        if sale is None:
            raise EntityNotFoundError(f"Sale #{sale_id} not found")
        return sale_to_dto(sale)


class ListSalesHandler:

    def __init__(self, sale_repo: SaleRepository) -> None:
        self._sale_repo = sale_repo

    def handle(self, customer_id: str) -> list[SaleDTO]:
        return [sale_to_dto(s) for s in self._sale_repo.list_by_customer(customer_id)]

    def count(self, customer_id: str) -> int:
        return self._sale_repo.count_by_customer(customer_id)

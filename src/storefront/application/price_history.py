"""Application services: price history.

``RecordPriceHistoryHandler`` appends an entry on demand.  Unlike the
automatic audit done during product updates, a failed write here is
reported to the caller.
"""

from __future__ import annotations

from storefront.application.dto import PriceHistoryDTO, history_to_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.value_objects import Money, Percentage
from storefront.domain.repository.price_history_repository import (
    PriceHistoryRepository,
)
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.price_history_recorder import PriceHistoryRecorder


class RecordPriceHistoryHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        history_repo: PriceHistoryRepository,
    ) -> None:
        self._product_repo = product_repo
        self._recorder = PriceHistoryRecorder(history_repo)

    def handle(
        self,
        product_id: str,
        price: str,
        offer_percentage: str | None = None,
    ) -> PriceHistoryDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        entry = self._recorder.record(
            product_id=product.id,
            price=Money.of(price, product.selling_price.currency),
            offer_percentage=(
                Percentage.of(offer_percentage) if offer_percentage is not None else None
            ),
        )
        return history_to_dto(entry)


class ShowPriceHistoryHandler:

    def __init__(self, history_repo: PriceHistoryRepository) -> None:
        self._history_repo = history_repo

    def handle(self, product_id: str) -> list[PriceHistoryDTO]:
        return [
            history_to_dto(entry)
            for entry in self._history_repo.list_for_product(product_id)
        ]

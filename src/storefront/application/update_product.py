"""Application service: Update Product use case.

Partial update of a product's price pair.  The previous pair goes to the
price history first (best effort), then the product is saved with an
offer price recomputed from the new pair.  Existing sales are unaffected;
they captured a price snapshot when they were assembled.
"""

from __future__ import annotations

import logging

from storefront.application.dto import ProductDTO, product_to_dto
from storefront.domain.exceptions import StorageError, UpdateFailure
from storefront.domain.model.value_objects import Money, Percentage
from storefront.domain.repository.price_history_repository import (
    PriceHistoryRepository,
)
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.price_history_recorder import PriceHistoryRecorder

logger = logging.getLogger(__name__)


class UpdateProductHandler:

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
        selling_price: str | None = None,
        offer_percentage: str | None = None,
    ) -> ProductDTO | None:
        """Update a product's selling price and/or offer percentage.

        Returns None when the product does not exist.  Raises
        UpdateFailure if the product could not be saved.
        """
        existing = self._product_repo.get_by_id(product_id)
        if existing is None:
            logger.info("Update skipped: product %s not found", product_id)
            return None

        new_selling_price = (
            Money.of(selling_price, existing.selling_price.currency)
            if selling_price is not None
            else existing.selling_price
        )
        new_offer_percentage = (
            Percentage.of(offer_percentage)
            if offer_percentage is not None
            else existing.offer_percentage
        )

        self._recorder.record_if_changed(
            product_id=existing.id,
            previous_selling_price=existing.selling_price,
            previous_offer_percentage=existing.offer_percentage,
            new_selling_price=new_selling_price,
            new_offer_percentage=new_offer_percentage,
        )

        updated = existing.repriced(new_selling_price, new_offer_percentage)
        try:
            self._product_repo.save(updated)
        except StorageError as exc:
            logger.exception("Could not save product %s", product_id)
            raise UpdateFailure(f"Unable to update product '{product_id}'") from exc

        logger.info(
            "Product %s priced at %s (%s off) -> offer price %s",
            updated.id,
            updated.selling_price,
            updated.offer_percentage,
            updated.offer_price,
        )
        return product_to_dto(updated)

"""Domain service: Price History Recorder.

Keeps the append-only audit of superseded prices.  The audit is best
effort on the update path: a failed append is logged and swallowed so it
never blocks or rolls back the product write that follows it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from storefront.domain.exceptions import AuditWriteFailure, StorageError
from storefront.domain.model.price_history import PriceHistoryEntry
from storefront.domain.model.value_objects import Money, Percentage
from storefront.domain.repository.price_history_repository import (
    PriceHistoryRepository,
)

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _or_zero(pct: Percentage | None) -> Percentage:
    return pct if pct is not None else Percentage.zero()


class PriceHistoryRecorder:

    def __init__(
        self,
        history_repo: PriceHistoryRepository,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._history_repo = history_repo
        self._clock = clock

    def record(
        self,
        product_id: str,
        price: Money,
        offer_percentage: Percentage | None,
    ) -> PriceHistoryEntry:
        """Append an entry unconditionally.

        Raises AuditWriteFailure if the store rejects the write.
        """
        entry = PriceHistoryEntry(
            product_id=product_id,
            price=price,
            offer_percentage=_or_zero(offer_percentage),
            recorded_at=self._clock(),
        )
        try:
            self._history_repo.append(entry)
        except StorageError as exc:
            raise AuditWriteFailure(
                f"Could not record price history for product '{product_id}'"
            ) from exc
        return entry

    def record_if_changed(
        self,
        product_id: str,
        previous_selling_price: Money,
        previous_offer_percentage: Percentage | None,
        new_selling_price: Money,
        new_offer_percentage: Percentage | None,
    ) -> PriceHistoryEntry | None:
        """Record the previous price pair if the update changes it.

        Returns the appended entry, or None when nothing changed or the
        append failed.
        """
        previous_pct = _or_zero(previous_offer_percentage)
        new_pct = _or_zero(new_offer_percentage)

        if previous_selling_price == new_selling_price and previous_pct == new_pct:
            return None

        try:
            return self.record(product_id, previous_selling_price, previous_pct)
        except AuditWriteFailure:
            logger.exception(
                "Price history write failed for product %s; continuing without it",
                product_id,
            )
            return None

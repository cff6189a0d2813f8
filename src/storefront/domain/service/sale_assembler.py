"""Domain service: Sale Assembler.

Turns a buyer's line requests into a fully priced Sale.  Prices always
come from the catalog at assembly time; the caller never controls them.

Two-phase approach (resolve-then-build): every product is looked up and
validated before any line is built, so a bad reference fails the whole
sale before anything could be written.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from storefront.domain.exceptions import ReferentialIntegrityError, ValidationError
from storefront.domain.model.product import ProductPricing
from storefront.domain.model.sale import Sale, SaleHeader, SaleLine, SaleLineRequest
from storefront.domain.repository.product_repository import ProductRepository

CustomerAttribution = Callable[
    [Sequence[SaleLineRequest], dict[str, ProductPricing]], str
]


def first_line_owner(
    lines: Sequence[SaleLineRequest],
    pricing: dict[str, ProductPricing],
) -> str:
    """Attribute the sale to the owner of the first line's product.

    Lines owned by other customers are not split out into separate sales.
    """
    return pricing[lines[0].product_id].owner_id


class SaleAssembler:

    def __init__(
        self,
        product_repo: ProductRepository,
        attribute_customer: CustomerAttribution = first_line_owner,
    ) -> None:
        self._product_repo = product_repo
        self._attribute_customer = attribute_customer

    def assemble(self, lines: Sequence[SaleLineRequest], header: SaleHeader) -> Sale:
        """Build an unsaved Sale priced from the current catalog.

        Raises ValidationError for an empty request and
        ReferentialIntegrityError naming every unknown product.
        """
        if not lines:
            raise ValidationError("Sale must contain at least one line")

        # Phase 1: one batch lookup over the distinct IDs, then validate
        distinct_ids = list(dict.fromkeys(line.product_id for line in lines))
        pricing = self._product_repo.get_pricing(distinct_ids)

        missing = [pid for pid in distinct_ids if pid not in pricing]
        if missing:
            raise ReferentialIntegrityError(missing)

        # Phase 2: build lines from the resolved offer prices
        resolved = [
            SaleLine(
                product_id=line.product_id,
                quantity_sold=line.quantity,
                selling_price=pricing[line.product_id].offer_price,
            )
            for line in lines
        ]

        customer_id = self._attribute_customer(lines, pricing)
        return Sale.create(customer_id=customer_id, header=header, lines=resolved)

"""Application service: Create Sale use case.

Validates the request into domain values, lets the Sale Assembler price
every line from the catalog, then writes the sale header and its lines in
one atomic repository call.
"""

from __future__ import annotations

import logging

from storefront.application.dto import SaleDTO, SaleRequest, sale_to_dto
from storefront.domain.model.sale import SaleHeader, SaleLineRequest, SaleType
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.sale_repository import SaleRepository
from storefront.domain.service.sale_assembler import SaleAssembler

logger = logging.getLogger(__name__)


class CreateSaleHandler:

    def __init__(
        self,
        sale_repo: SaleRepository,
        product_repo: ProductRepository,
        currency: str = "USD",
    ) -> None:
        self._sale_repo = sale_repo
        self._assembler = SaleAssembler(product_repo)
        self._currency = currency

    def handle(self, request: SaleRequest) -> SaleDTO:
        """Create a sale.

        Steps:
        1. Validate the header and line requests.
        2. Resolve every product's current offer price (fails on unknown IDs).
        3. Persist header + lines atomically and return a DTO.
        """
        header = SaleHeader(
            store_id=request.store_id,
            address=request.address,
            payment_type=request.payment_type,
            sale_type=SaleType.parse(request.sale_type),
            cumulative_discount=Money.of(request.cumulative_discount, self._currency),
            freight_price=Money.of(request.freight_price, self._currency),
            user_id=request.user_id,
        )
        lines = [
            SaleLineRequest(product_id=item.product_id, quantity=Quantity(item.quantity))
            for item in request.items
        ]

        sale = self._assembler.assemble(lines, header)
        self._sale_repo.add(sale)

        logger.info(
            "Sale #%s recorded for customer %s: %d line(s), total %s",
            sale.id,
            sale.customer_id,
            len(sale.lines),
            sale.total_amount,
        )
        return sale_to_dto(sale)

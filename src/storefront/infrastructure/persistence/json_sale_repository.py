"""JSON-file-backed implementation of SaleRepository.

Each sale is stored as one record with its lines nested inside, and the
whole ledger file is replaced in a single atomic write, so a header is
never visible without its lines.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.sale import Sale, SaleHeader, SaleLine, SaleType
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.sale_repository import SaleRepository
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonSaleRepository(SaleRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- SaleRepository interface ---------------------------------------------

    def add(self, sale: Sale) -> None:
        records = self._file.load()
        sale_id = self._next_id(records)
        records.append(self._to_raw(sale, sale_id))
        self._file.persist(records)
        # Only assign once the write has landed
        sale.id = sale_id

    def get_by_id(self, sale_id: int) -> Sale | None:
        for raw in self._file.load():
            if raw["id"] == sale_id:
                return self._to_domain(raw)
        return None

    def list_by_customer(self, customer_id: str) -> list[Sale]:
        return [
            self._to_domain(raw)
            for raw in self._file.load()
            if raw["customer_id"] == customer_id
        ]

    def count_by_customer(self, customer_id: str) -> int:
        return sum(1 for raw in self._file.load() if raw["customer_id"] == customer_id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _next_id(records: list[dict]) -> int:
        if not records:
            return 1
        return max(r["id"] for r in records) + 1

    @staticmethod
    def _to_raw(sale: Sale, sale_id: int) -> dict:
        header = sale.header
        return {
            "id": sale_id,
            "customer_id": sale.customer_id,
            "user_id": header.user_id,
            "store_id": header.store_id,
            "address": header.address,
            "payment_type": header.payment_type,
            "sale_type": header.sale_type.value,
            "currency": sale.total_amount.currency,
            "cumulative_discount": str(header.cumulative_discount.amount),
            "freight_price": str(header.freight_price.amount),
            "total_amount": str(sale.total_amount.amount),
            "sale_date": sale.sale_date.isoformat(),
            "lines": [
                {
                    "product_id": line.product_id,
                    "quantity_sold": line.quantity_sold.value,
                    "selling_price": str(line.selling_price.amount),
                }
                for line in sale.lines
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Sale:
        currency = raw.get("currency", "USD")
        header = SaleHeader(
            store_id=raw["store_id"],
            address=raw["address"],
            payment_type=raw["payment_type"],
            sale_type=SaleType(raw["sale_type"]),
            cumulative_discount=Money(Decimal(raw["cumulative_discount"]), currency),
            freight_price=Money(Decimal(raw["freight_price"]), currency),
            user_id=raw.get("user_id"),
        )
        lines = [
            SaleLine(
                product_id=line["product_id"],
                quantity_sold=Quantity(line["quantity_sold"]),
                selling_price=Money(Decimal(line["selling_price"]), currency),
            )
            for line in raw["lines"]
        ]
        return Sale(
            id=raw["id"],
            customer_id=raw["customer_id"],
            header=header,
            lines=lines,
            sale_date=datetime.fromisoformat(raw["sale_date"]),
        )

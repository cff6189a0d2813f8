"""Integration tests for sales and price history queries."""

import pytest

from storefront.application.create_sale import CreateSaleHandler
from storefront.application.dto import SaleItemSpec, SaleRequest
from storefront.application.price_history import (
    RecordPriceHistoryHandler,
    ShowPriceHistoryHandler,
)
from storefront.application.show_sale import ListSalesHandler, ShowSaleHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import AuditWriteFailure, EntityNotFoundError
from tests.fakes import (
    FailingPriceHistoryRepository,
    FakePriceHistoryRepository,
    FakeProductRepository,
    FakeSaleRepository,
    make_product,
)


def _sale(product_id: str) -> SaleRequest:
    return SaleRequest(
        items=[SaleItemSpec(product_id, 1)],
        store_id="store-1",
        address="1 Main St",
        payment_type="CASH",
        sale_type="IN_STORE",
    )


class TestSaleQueries:

    def _setup(self):
        product_repo = FakeProductRepository([
            make_product("A", owner_id="owner-a"),
            make_product("B", owner_id="owner-b"),
        ])
        sale_repo = FakeSaleRepository()
        create = CreateSaleHandler(sale_repo, product_repo)
        return create, sale_repo

    def test_show_sale(self):
        create, sale_repo = self._setup()
        created = create.handle(_sale("A"))
        shown = ShowSaleHandler(sale_repo).handle(created.id)
        assert shown.total_amount == created.total_amount
        assert shown.items == created.items

    def test_show_missing_sale(self):
        with pytest.raises(EntityNotFoundError, match="Sale #42 not found"):
            ShowSaleHandler(FakeSaleRepository()).handle(42)

    def test_list_and_count_by_customer(self):
        create, sale_repo = self._setup()
        create.handle(_sale("A"))
        create.handle(_sale("A"))
        create.handle(_sale("B"))
        handler = ListSalesHandler(sale_repo)
        assert len(handler.handle("owner-a")) == 2
        assert handler.count("owner-a") == 2
        assert handler.count("owner-b") == 1
        assert handler.count("nobody") == 0


class TestPriceHistoryQueries:

    def test_history_after_round_trip_update(self):
        product_repo = FakeProductRepository([
            make_product("A", selling_price="100", offer_percentage="0"),
        ])
        history_repo = FakePriceHistoryRepository()
        update = UpdateProductHandler(product_repo, history_repo)
        update.handle("A", offer_percentage="10")
        update.handle("A", offer_percentage="0")

        entries = ShowPriceHistoryHandler(history_repo).handle("A")
        assert [(e.price, e.offer_percentage) for e in entries] == [
            ("$100.00", "0%"),
            ("$100.00", "10%"),
        ]

    def test_manual_record(self):
        product_repo = FakeProductRepository([make_product("A")])
        history_repo = FakePriceHistoryRepository()
        dto = RecordPriceHistoryHandler(product_repo, history_repo).handle("A", "75", "5")
        assert dto.price == "$75.00"
        assert dto.offer_percentage == "5%"
        assert len(history_repo.entries) == 1

    def test_manual_record_unknown_product(self):
        handler = RecordPriceHistoryHandler(
            FakeProductRepository(), FakePriceHistoryRepository()
        )
        with pytest.raises(EntityNotFoundError):
            handler.handle("ghost", "10")

    def test_manual_record_failure_is_reported(self):
        handler = RecordPriceHistoryHandler(
            FakeProductRepository([make_product("A")]), FailingPriceHistoryRepository()
        )
        with pytest.raises(AuditWriteFailure):
            handler.handle("A", "10")

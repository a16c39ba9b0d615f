"""Integration tests for the query and analytics handlers."""

import threading
from decimal import Decimal

import pytest

from freshtrack.application.analytics_report import AnalyticsHandler
from freshtrack.application.create_product import CreateProductHandler
from freshtrack.application.dto import ProductSpec
from freshtrack.application.query_products import ProductQueryHandler
from freshtrack.application.show_product import ListProductsHandler, ShowProductHandler
from freshtrack.domain.exceptions import (
    InvalidArgumentError,
    NoValidProductsError,
    NotFoundError,
)
from freshtrack.domain.model.product import Category
from tests.fakes import DAY, MAKER, NOW, make_context, make_product


def _context():
    return make_context([
        make_product(1, category=Category.FOOD, price=100, expires_in_days=2),
        make_product(2, category=Category.BEVERAGE, price=200, expires_in_days=20),
        make_product(3, category=Category.FOOD, price=300, expires_in_days=60,
                     manufacturer="Farm Ltd"),
    ])


class TestProductQueries:

    def test_by_category(self):
        handler = ProductQueryHandler(_context())
        assert handler.by_category(Category.FOOD) == [1, 3]
        assert handler.by_category("beverage") == [2]

    def test_by_category_never_returns_unknown_ids(self):
        handler = ProductQueryHandler(_context())
        assert handler.by_category(Category.OTHER) == []

    def test_by_manufacturer(self):
        handler = ProductQueryHandler(_context())
        assert handler.by_manufacturer("Farm Ltd") == [3]

    def test_expiring_uses_clock_by_default(self):
        ctx = _context()
        handler = ProductQueryHandler(ctx)
        assert handler.expiring_within(7) == [1]
        ctx.clock.advance_days(3)
        assert handler.expiring_within(30) == [2]
        assert handler.expired() == [1]

    def test_expiring_rejects_zero_days(self):
        with pytest.raises(InvalidArgumentError):
            ProductQueryHandler(_context()).expiring_within(0)

    def test_is_expired(self):
        handler = ProductQueryHandler(_context())
        assert handler.is_expired(1) is False
        assert handler.is_expired(1, NOW + 2 * DAY) is True

    def test_is_expired_missing(self):
        with pytest.raises(NotFoundError):
            ProductQueryHandler(_context()).is_expired(9)


class TestShowProducts:

    def test_show(self):
        dto = ShowProductHandler(_context()).handle(2)
        assert dto.category == "BEVERAGE"
        assert dto.is_expired is False

    def test_list_in_creation_order(self):
        assert [d.id for d in ListProductsHandler(_context()).handle()] == [1, 2, 3]


class TestAnalytics:

    def test_average_price_excludes_expired(self):
        ctx = _context()
        ctx.clock.advance_days(2)
        assert AnalyticsHandler(ctx).average_price() == 250

    def test_all_expired(self):
        ctx = _context()
        with pytest.raises(NoValidProductsError):
            AnalyticsHandler(ctx).average_price(NOW + 100 * DAY)

    def test_total_inventory_value(self):
        assert AnalyticsHandler(_context()).total_inventory_value() == 6000

    def test_average_shelf_life(self):
        # shelf lives 3, 21 and 61 days
        assert AnalyticsHandler(_context()).average_shelf_life_days() == 28

    def test_turnover(self):
        handler = AnalyticsHandler(_context())
        ratio = handler.inventory_turnover([10, 10, 10], [0, 10, 10])
        assert ratio == Decimal(1000) / Decimal(6000)


class TestConcurrentCreation:

    def test_parallel_creates_all_land(self):
        ctx = make_context()
        handler = CreateProductHandler(ctx)

        def create(product_id: int) -> None:
            handler.handle(MAKER, ProductSpec(
                id=product_id,
                manufacturer="Dairy Co",
                name=f"Batch {product_id}",
                manufacture_date=NOW,
                expiry_date=NOW + 10 * DAY,
                category=Category.FOOD,
                quantity=1,
                price=100,
            ))

        threads = [threading.Thread(target=create, args=(i,)) for i in range(1, 21)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert sorted(ProductQueryHandler(ctx).by_category(Category.FOOD)) == list(range(1, 21))

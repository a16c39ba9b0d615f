"""Integration tests for repricing, quantity updates and the discount."""

import pytest

from freshtrack.application.discount import (
    CancelDiscountHandler,
    SetDiscountHandler,
    ShowDiscountHandler,
)
from freshtrack.application.update_price import (
    UpdatePriceHandler,
    UpdatePricesBatchHandler,
)
from freshtrack.application.update_quantity import UpdateQuantityHandler
from freshtrack.domain.exceptions import (
    ExpiredOrInvalidError,
    InvalidArgumentError,
    NotFoundError,
    UnauthorizedError,
)
from freshtrack.domain.model.value_objects import DiscountState
from tests.fakes import MAKER, OWNER, SHIPPER, make_context, make_product


def _context():
    return make_context([
        make_product(1, expires_in_days=40, price=1),
        make_product(2, expires_in_days=10, price=1),
        make_product(3, expires_in_days=3, price=1),
    ])


class TestUpdatePrice:

    def test_tier_price_written(self):
        ctx = _context()
        handler = UpdatePriceHandler(ctx)
        assert handler.handle(MAKER, 1) == 1000
        assert handler.handle(MAKER, 2) == 800
        assert handler.handle(MAKER, 3) == 500
        assert ctx.products.get_by_id(2).price == 800

    def test_discount_applied(self):
        ctx = _context()
        SetDiscountHandler(ctx).handle(OWNER, 20)
        assert UpdatePriceHandler(ctx).handle(MAKER, 1) == 800

    def test_price_follows_the_clock(self):
        ctx = _context()
        ctx.clock.advance_days(35)
        assert UpdatePriceHandler(ctx).handle(MAKER, 1) == 500

    def test_expired_product_rejected(self):
        ctx = _context()
        ctx.clock.advance_days(3)
        with pytest.raises(ExpiredOrInvalidError):
            UpdatePriceHandler(ctx).handle(MAKER, 3)
        assert ctx.products.get_by_id(3).price == 1

    def test_missing_product(self):
        with pytest.raises(NotFoundError):
            UpdatePriceHandler(_context()).handle(MAKER, 42)

    def test_stranger_rejected(self):
        with pytest.raises(UnauthorizedError):
            UpdatePriceHandler(_context()).handle("stranger", 1)


class TestUpdatePricesBatch:

    def test_reprices_all(self):
        ctx = _context()
        prices = UpdatePricesBatchHandler(ctx).handle(SHIPPER, [1, 2, 3])
        assert prices == {1: 1000, 2: 800, 3: 500}
        assert [p.price for p in ctx.products.list_all()] == [1000, 800, 500]

    def test_missing_id_aborts_whole_batch(self):
        ctx = _context()
        with pytest.raises(NotFoundError, match="#9"):
            UpdatePricesBatchHandler(ctx).handle(SHIPPER, [1, 9, 2])
        assert [p.price for p in ctx.products.list_all()] == [1, 1, 1]

    def test_expired_product_aborts_whole_batch(self):
        ctx = _context()
        ctx.clock.advance_days(5)
        with pytest.raises(ExpiredOrInvalidError):
            UpdatePricesBatchHandler(ctx).handle(SHIPPER, [1, 2, 3])
        assert [p.price for p in ctx.products.list_all()] == [1, 1, 1]

    def test_empty_batch_rejected(self):
        with pytest.raises(InvalidArgumentError):
            UpdatePricesBatchHandler(_context()).handle(SHIPPER, [])


class TestDiscount:

    def test_set_and_cancel(self):
        ctx = _context()
        SetDiscountHandler(ctx).handle(OWNER, 30)
        assert ShowDiscountHandler(ctx).handle() == DiscountState.of(30)

        CancelDiscountHandler(ctx).handle(OWNER)
        assert ShowDiscountHandler(ctx).handle() == DiscountState.inactive()
        assert UpdatePriceHandler(ctx).handle(MAKER, 1) == 1000

    def test_setting_discount_does_not_touch_prices(self):
        ctx = _context()
        SetDiscountHandler(ctx).handle(OWNER, 50)
        assert ctx.products.get_by_id(1).price == 1

    @pytest.mark.parametrize("pct", [0, 100])
    def test_out_of_range_rejected(self, pct):
        ctx = _context()
        with pytest.raises(InvalidArgumentError):
            SetDiscountHandler(ctx).handle(OWNER, pct)
        assert ShowDiscountHandler(ctx).handle() == DiscountState.inactive()

    def test_non_admin_rejected(self):
        ctx = _context()
        with pytest.raises(UnauthorizedError):
            SetDiscountHandler(ctx).handle(MAKER, 10)
        with pytest.raises(UnauthorizedError):
            CancelDiscountHandler(ctx).handle(MAKER)


class TestUpdateQuantity:

    def test_admin_sets_quantity(self):
        ctx = _context()
        UpdateQuantityHandler(ctx).handle(OWNER, 1, 0)
        assert ctx.products.get_by_id(1).quantity == 0

    def test_non_admin_rejected(self):
        ctx = _context()
        with pytest.raises(UnauthorizedError):
            UpdateQuantityHandler(ctx).handle(MAKER, 1, 3)
        assert ctx.products.get_by_id(1).quantity == 10

    def test_negative_rejected(self):
        ctx = _context()
        with pytest.raises(InvalidArgumentError):
            UpdateQuantityHandler(ctx).handle(OWNER, 1, -2)

    def test_missing_product(self):
        with pytest.raises(NotFoundError):
            UpdateQuantityHandler(_context()).handle(OWNER, 77, 1)

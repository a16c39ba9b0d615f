"""Unit tests for the Product aggregate and its supply-chain state machine."""

import pytest

from freshtrack.domain.exceptions import (
    InvalidArgumentError,
    InvalidProductError,
    InvalidTransitionError,
)
from freshtrack.domain.model.product import Category, Location, Product
from tests.fakes import DAY, NOW, make_product


def _create(**overrides) -> Product:
    fields = dict(
        id=7,
        manufacturer="Dairy Co",
        name="Milk",
        manufacture_date=NOW,
        expiry_date=NOW + 10 * DAY,
        category=Category.FOOD,
        quantity=5,
        is_quality_product=False,
        price=100,
    )
    fields.update(overrides)
    return Product.create(**fields)


class TestProductCreation:

    def test_happy_path(self):
        p = _create()
        assert p.id == 7
        assert p.name == "Milk"
        assert p.manufacturer == "Dairy Co"
        assert p.current_location == Location.MANUFACTURER
        assert p.quantity == 5
        assert p.price == 100

    def test_names_are_stripped(self):
        p = _create(name="  Milk ", manufacturer=" Dairy Co  ")
        assert p.name == "Milk"
        assert p.manufacturer == "Dairy Co"

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_rejected(self, name):
        with pytest.raises(InvalidProductError, match="name") as exc_info:
            _create(name=name)
        assert exc_info.value.field == "name"

    def test_blank_manufacturer_rejected(self):
        with pytest.raises(InvalidProductError, match="manufacturer"):
            _create(manufacturer="")

    @pytest.mark.parametrize(
        "overrides, field",
        [
            ({"manufacturer": 5}, "manufacturer"),
            ({"manufacturer": None}, "manufacturer"),
            ({"name": 42}, "name"),
            ({"name": ["Milk"]}, "name"),
        ],
    )
    def test_non_string_text_fields_rejected(self, overrides, field):
        with pytest.raises(InvalidProductError) as exc_info:
            _create(**overrides)
        assert exc_info.value.field == field

    def test_expiry_must_follow_manufacture(self):
        with pytest.raises(InvalidProductError, match="expiry_date"):
            _create(manufacture_date=NOW, expiry_date=NOW)

    def test_zero_price_rejected(self):
        with pytest.raises(InvalidProductError, match="price"):
            _create(price=0)

    def test_zero_quantity_rejected(self):
        with pytest.raises(InvalidProductError, match="quantity"):
            _create(quantity=0)

    def test_unknown_category_rejected(self):
        with pytest.raises(InvalidProductError, match="category"):
            _create(category="FOOD")


class TestProductLocation:

    def test_moves_forward(self):
        p = make_product()
        p.move_to(Location.DISTRIBUTOR)
        p.move_to(Location.RETAILER)
        p.move_to(Location.CUSTOMER)
        assert p.current_location == Location.CUSTOMER

    def test_skipping_stages_allowed(self):
        p = make_product()
        p.move_to(Location.RETAILER)
        assert p.current_location == Location.RETAILER

    def test_same_location_is_noop(self):
        p = make_product()
        p.move_to(Location.DISTRIBUTOR)
        p.move_to(Location.DISTRIBUTOR)
        assert p.current_location == Location.DISTRIBUTOR

    def test_backward_move_rejected(self):
        p = make_product()
        p.move_to(Location.RETAILER)
        with pytest.raises(InvalidTransitionError, match="back to DISTRIBUTOR"):
            p.move_to(Location.DISTRIBUTOR)
        assert p.current_location == Location.RETAILER

    def test_customer_is_terminal(self):
        p = make_product()
        p.move_to(Location.CUSTOMER)
        for earlier in (Location.MANUFACTURER, Location.DISTRIBUTOR, Location.RETAILER):
            with pytest.raises(InvalidTransitionError):
                p.move_to(earlier)

    def test_ordinals(self):
        assert [loc.ordinal for loc in Location] == [0, 1, 2, 3]

    def test_parse(self):
        assert Location.parse("retailer") is Location.RETAILER
        with pytest.raises(InvalidArgumentError, match="Unknown location"):
            Location.parse("warehouse")


class TestProductMutations:

    def test_quantity_can_drop_to_zero(self):
        p = make_product(quantity=10)
        p.update_quantity(0)
        assert p.quantity == 0

    def test_negative_quantity_rejected(self):
        p = make_product(quantity=10)
        with pytest.raises(InvalidArgumentError, match="non-negative"):
            p.update_quantity(-1)
        assert p.quantity == 10

    def test_reprice_rejects_negative(self):
        p = make_product()
        with pytest.raises(InvalidArgumentError, match="cannot be negative"):
            p.reprice(-1)


class TestProductComputed:

    def test_expired_at_exact_expiry(self):
        p = make_product(expires_in_days=3)
        assert p.is_expired(NOW) is False
        assert p.is_expired(NOW + 3 * DAY) is True

    def test_days_until_expiry_rounds_down(self):
        p = make_product(expires_in_days=3)
        assert p.days_until_expiry(NOW + 1) == 2

    def test_shelf_life_days(self):
        p = make_product(made_days_ago=5, expires_in_days=10)
        assert p.shelf_life_days == 15

    def test_inventory_value(self):
        p = make_product(quantity=4, price=250)
        assert p.inventory_value == 1000

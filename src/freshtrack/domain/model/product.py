"""Product aggregate: one perishable inventory record.

A product is created once at the manufacturer and then moves forward
through the supply chain. Identity, naming, dates and category never
change after creation; location, quantity and price do.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from freshtrack.domain.clock import SECONDS_PER_DAY
from freshtrack.domain.exceptions import (
    InvalidArgumentError,
    InvalidProductError,
    InvalidTransitionError,
)


class Category(Enum):
    FOOD = "FOOD"
    BEVERAGE = "BEVERAGE"
    PHARMACEUTICAL = "PHARMACEUTICAL"
    COSMETIC = "COSMETIC"
    OTHER = "OTHER"

    @classmethod
    def parse(cls, value: Category | str) -> Category:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise InvalidArgumentError(f"Unknown category: {value!r}") from None


class Location(Enum):
    """Supply-chain stages, declared in the order a product passes them."""

    MANUFACTURER = "MANUFACTURER"
    DISTRIBUTOR = "DISTRIBUTOR"
    RETAILER = "RETAILER"
    CUSTOMER = "CUSTOMER"

    @property
    def ordinal(self) -> int:
        return list(Location).index(self)

    @classmethod
    def parse(cls, value: Location | str) -> Location:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise InvalidArgumentError(f"Unknown location: {value!r}") from None


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class Product:
    """Aggregate root for a perishable inventory record.

    Use the ``Product.create()`` factory for new products. It enforces
    all creation rules. The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted products without re-validating
    (``manufacture_date < expiry_date`` is never rechecked after creation).
    """

    id: int
    name: str
    manufacturer: str
    manufacture_date: int
    expiry_date: int
    category: Category
    quantity: int
    is_quality_product: bool
    price: int
    current_location: Location = Location.MANUFACTURER

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        id: int,
        manufacturer: str,
        name: str,
        manufacture_date: int,
        expiry_date: int,
        category: Category,
        quantity: int,
        is_quality_product: bool,
        price: int,
    ) -> Product:
        """Create a new product at the manufacturer, enforcing all invariants."""
        if not _is_int(id) or id < 0:
            raise InvalidProductError("id", "must be a non-negative integer")
        if not isinstance(manufacturer, str) or not manufacturer.strip():
            raise InvalidProductError("manufacturer", "is required")
        if not isinstance(name, str) or not name.strip():
            raise InvalidProductError("name", "is required")
        if not _is_int(manufacture_date) or not _is_int(expiry_date):
            raise InvalidProductError("dates", "must be integer timestamps")
        if manufacture_date >= expiry_date:
            raise InvalidProductError(
                "expiry_date", "must be later than the manufacture date"
            )
        if not isinstance(category, Category):
            raise InvalidProductError("category", f"unknown value {category!r}")
        if not _is_int(price) or price <= 0:
            raise InvalidProductError("price", "must be greater than zero")
        if not _is_int(quantity) or quantity <= 0:
            raise InvalidProductError("quantity", "must be greater than zero")

        return Product(
            id=id,
            name=name.strip(),
            manufacturer=manufacturer.strip(),
            manufacture_date=manufacture_date,
            expiry_date=expiry_date,
            category=category,
            quantity=quantity,
            is_quality_product=bool(is_quality_product),
            price=price,
        )

    # --- State transitions ----------------------------------------------------

    def move_to(self, new_location: Location) -> None:
        """Advance the product along the supply chain.

        Staying put is allowed; moving to an earlier stage is not.
        CUSTOMER is terminal because nothing ranks above it.
        """
        if new_location.ordinal < self.current_location.ordinal:
            raise InvalidTransitionError(
                f"Cannot move product #{self.id} from "
                f"{self.current_location.value} back to {new_location.value}"
            )
        self.current_location = new_location

    def update_quantity(self, quantity: int) -> None:
        """Set the stock level; zero marks the product as sold out."""
        if not _is_int(quantity) or quantity < 0:
            raise InvalidArgumentError(
                f"Quantity must be a non-negative integer, got {quantity!r}"
            )
        self.quantity = quantity

    def reprice(self, price: int) -> None:
        if not _is_int(price) or price < 0:
            raise InvalidArgumentError(f"Price cannot be negative, got {price!r}")
        self.price = price

    # --- Computed properties --------------------------------------------------

    def is_expired(self, now: int) -> bool:
        return now >= self.expiry_date

    def days_until_expiry(self, now: int) -> int:
        return (self.expiry_date - now) // SECONDS_PER_DAY

    @property
    def shelf_life_days(self) -> int:
        return (self.expiry_date - self.manufacture_date) // SECONDS_PER_DAY

    @property
    def inventory_value(self) -> int:
        return self.price * self.quantity

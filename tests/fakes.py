"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

from freshtrack.application.context import RegistryContext
from freshtrack.domain.clock import SECONDS_PER_DAY, FixedClock
from freshtrack.domain.model.access_control import AccessControl
from freshtrack.domain.model.product import Category, Product
from freshtrack.domain.model.value_objects import DiscountState
from freshtrack.domain.repository.discount_repository import DiscountRepository
from freshtrack.domain.repository.product_repository import ProductRepository
from freshtrack.domain.repository.role_repository import RoleRepository

NOW = 1_700_000_000
DAY = SECONDS_PER_DAY

OWNER = "owner"
MAKER = "maker"
SHIPPER = "shipper"
SHOP = "shop"


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        self.save_calls = 0
        for p in products or []:
            self._store[p.id] = p

    def next_id(self) -> int:
        return max(self._store) + 1 if self._store else 1

    def get_by_id(self, product_id: int) -> Product | None:
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self.save_calls += 1
        self._store[product.id] = product

    def save_all(self, products: list[Product]) -> None:
        self.save_calls += 1
        for product in products:
            self._store[product.id] = product


class FakeRoleRepository(RoleRepository):

    def __init__(self, access: AccessControl | None = None) -> None:
        self._access = access or AccessControl()

    def get(self) -> AccessControl:
        return self._access

    def save(self, access: AccessControl) -> None:
        self._access = access


class FakeDiscountRepository(DiscountRepository):

    def __init__(self, discount: DiscountState | None = None) -> None:
        self._discount = discount or DiscountState.inactive()

    def get(self) -> DiscountState:
        return self._discount

    def save(self, discount: DiscountState) -> None:
        self._discount = discount


def make_product(
    id: int = 1,
    *,
    name: str = "Milk",
    manufacturer: str = "Dairy Co",
    category: Category = Category.FOOD,
    made_days_ago: int = 1,
    expires_in_days: int = 10,
    quantity: int = 10,
    price: int = 100,
) -> Product:
    """Build a valid product relative to NOW."""
    return Product.create(
        id=id,
        manufacturer=manufacturer,
        name=name,
        manufacture_date=NOW - made_days_ago * DAY,
        expiry_date=NOW + expires_in_days * DAY,
        category=category,
        quantity=quantity,
        is_quality_product=True,
        price=price,
    )


def make_context(products: list[Product] | None = None) -> RegistryContext:
    """Registry owned by OWNER with one principal per operational role."""
    access = AccessControl()
    access.initialize(OWNER)
    access.add_manufacturer(MAKER)
    access.add_distributor(SHIPPER)
    access.add_retailer(SHOP)
    return RegistryContext(
        products=FakeProductRepository(products),
        roles=FakeRoleRepository(access),
        discounts=FakeDiscountRepository(),
        clock=FixedClock(NOW),
    )

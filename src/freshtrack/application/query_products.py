"""Application service: index lookups (queries).

Each lookup scans the repository under the registry lock so it never
observes a half-applied mutation. ``now`` defaults to the context clock.
"""

from __future__ import annotations

from freshtrack.application.context import RegistryContext
from freshtrack.domain.model.product import Category, Location
from freshtrack.domain.service.index_service import IndexService


class ProductQueryHandler:

    def __init__(self, context: RegistryContext) -> None:
        self._ctx = context
        self._index = IndexService(context.products)

    def by_category(self, category: Category | str) -> list[int]:
        category = Category.parse(category)
        with self._ctx.lock:
            return self._index.by_category(category)

    def by_manufacturer(self, manufacturer: str) -> list[int]:
        with self._ctx.lock:
            return self._index.by_manufacturer(manufacturer)

    def by_location(self, location: Location | str) -> list[int]:
        location = Location.parse(location)
        with self._ctx.lock:
            return self._index.by_location(location)

    def expiring_within(self, days: int, now: int | None = None) -> list[int]:
        with self._ctx.lock:
            return self._index.expiring_within(days, self._now(now))

    def expired(self, now: int | None = None) -> list[int]:
        with self._ctx.lock:
            return self._index.expired(self._now(now))

    def is_expired(self, product_id: int, now: int | None = None) -> bool:
        with self._ctx.lock:
            product = self._ctx.require_product(product_id)
            return product.is_expired(self._now(now))

    def _now(self, now: int | None) -> int:
        return self._ctx.clock.now() if now is None else now

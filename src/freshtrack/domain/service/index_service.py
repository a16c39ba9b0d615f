"""Domain service: derived views over the product collection.

Views are filters evaluated against the repository at call time, so
an id can only appear if the product exists and currently matches.
Results keep creation order.
"""

from __future__ import annotations

from freshtrack.domain.exceptions import InvalidArgumentError
from freshtrack.domain.model.product import Category, Location
from freshtrack.domain.repository.product_repository import ProductRepository


class IndexService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def by_category(self, category: Category) -> list[int]:
        return [p.id for p in self._product_repo.list_all() if p.category is category]

    def by_manufacturer(self, manufacturer: str) -> list[int]:
        """Products whose manufacturer name matches exactly."""
        return [
            p.id
            for p in self._product_repo.list_all()
            if p.manufacturer == manufacturer
        ]

    def by_location(self, location: Location) -> list[int]:
        return [
            p.id
            for p in self._product_repo.list_all()
            if p.current_location is location
        ]

    def expiring_within(self, days: int, now: int) -> list[int]:
        """Unexpired products with at most *days* whole days left."""
        if isinstance(days, bool) or not isinstance(days, int) or days <= 0:
            raise InvalidArgumentError(f"Days must be a positive integer, got {days!r}")
        return [
            p.id
            for p in self._product_repo.list_all()
            if not p.is_expired(now) and p.days_until_expiry(now) <= days
        ]

    def expired(self, now: int) -> list[int]:
        return [p.id for p in self._product_repo.list_all() if p.is_expired(now)]

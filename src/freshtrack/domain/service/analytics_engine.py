"""Domain service: inventory aggregates.

Price-based aggregates only count products that have not expired;
shelf life is a property of the record itself and counts every product.
Integer means round down.
"""

from __future__ import annotations

from decimal import Decimal

from freshtrack.domain.exceptions import (
    InvalidArgumentError,
    LengthMismatchError,
    NoProductsError,
    NoValidProductsError,
)
from freshtrack.domain.model.product import Product
from freshtrack.domain.repository.product_repository import ProductRepository


class AnalyticsEngine:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def average_price(self, now: int) -> int:
        """Mean price over unexpired products.

        Raises NoProductsError for an empty registry and
        NoValidProductsError when everything has expired.
        """
        products = self._require_products()
        valid = [p for p in products if not p.is_expired(now)]
        if not valid:
            raise NoValidProductsError("All products have expired")
        return sum(p.price for p in valid) // len(valid)

    def total_inventory_value(self, now: int) -> int:
        return sum(
            p.inventory_value
            for p in self._product_repo.list_all()
            if not p.is_expired(now)
        )

    def average_shelf_life_days(self) -> int:
        products = self._require_products()
        return sum(p.shelf_life_days for p in products) // len(products)

    def inventory_turnover(
        self,
        initial_quantities: list[int],
        final_quantities: list[int],
        now: int,
    ) -> Decimal:
        """Percentage of valued initial stock sold over a window.

        Quantities pair with products in creation order. Unlike the plain
        ``100 * sum(max(0, i - f)) / sum(price * i)`` over every product,
        products already expired at ``now`` are left out of both sums:
        their entries must still be supplied but contribute nothing.
        A zero denominator yields zero.
        """
        products = self._product_repo.list_all()
        if len(initial_quantities) != len(products) or len(final_quantities) != len(products):
            raise LengthMismatchError(
                f"Expected {len(products)} initial and final quantities, got "
                f"{len(initial_quantities)} and {len(final_quantities)}"
            )
        for qty in [*initial_quantities, *final_quantities]:
            if isinstance(qty, bool) or not isinstance(qty, int) or qty < 0:
                raise InvalidArgumentError(f"Quantities must be non-negative integers, got {qty!r}")

        units_sold = 0
        valued_stock = 0
        for product, initial, final in zip(products, initial_quantities, final_quantities):
            if product.is_expired(now):
                continue
            units_sold += max(0, initial - final)
            valued_stock += product.price * initial

        if valued_stock == 0:
            return Decimal(0)
        return Decimal(100 * units_sold) / Decimal(valued_stock)

    # --- Internal helpers -----------------------------------------------------

    def _require_products(self) -> list[Product]:
        products = self._product_repo.list_all()
        if not products:
            raise NoProductsError("No products registered")
        return products

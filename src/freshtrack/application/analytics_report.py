"""Application service: inventory analytics (queries)."""

from __future__ import annotations

from decimal import Decimal

from freshtrack.application.context import RegistryContext
from freshtrack.domain.service.analytics_engine import AnalyticsEngine


class AnalyticsHandler:

    def __init__(self, context: RegistryContext) -> None:
        self._ctx = context
        self._engine = AnalyticsEngine(context.products)

    def average_price(self, now: int | None = None) -> int:
        with self._ctx.lock:
            return self._engine.average_price(self._now(now))

    def total_inventory_value(self, now: int | None = None) -> int:
        with self._ctx.lock:
            return self._engine.total_inventory_value(self._now(now))

    def average_shelf_life_days(self) -> int:
        with self._ctx.lock:
            return self._engine.average_shelf_life_days()

    def inventory_turnover(
        self,
        initial_quantities: list[int],
        final_quantities: list[int],
        now: int | None = None,
    ) -> Decimal:
        with self._ctx.lock:
            return self._engine.inventory_turnover(
                initial_quantities, final_quantities, self._now(now)
            )

    def _now(self, now: int | None) -> int:
        return self._ctx.clock.now() if now is None else now

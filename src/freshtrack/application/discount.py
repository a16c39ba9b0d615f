"""Application service: registry-wide discount.

Changing the discount does not touch stored prices; it takes effect
the next time products are repriced.
"""

from __future__ import annotations

import logging

from freshtrack.application.context import RegistryContext
from freshtrack.domain.model.access_control import Role
from freshtrack.domain.model.value_objects import DiscountState

logger = logging.getLogger(__name__)


class SetDiscountHandler:

    def __init__(self, context: RegistryContext) -> None:
        self._ctx = context

    def handle(self, caller: str, percentage: int) -> DiscountState:
        with self._ctx.lock:
            self._ctx.authorize(caller, Role.ADMIN)
            discount = DiscountState.of(percentage)
            self._ctx.discounts.save(discount)

        logger.info("Discount set to %s by %s", discount, caller)
        return discount


class CancelDiscountHandler:

    def __init__(self, context: RegistryContext) -> None:
        self._ctx = context

    def handle(self, caller: str) -> None:
        with self._ctx.lock:
            self._ctx.authorize(caller, Role.ADMIN)
            self._ctx.discounts.save(DiscountState.inactive())

        logger.info("Discount cancelled by %s", caller)


class ShowDiscountHandler:

    def __init__(self, context: RegistryContext) -> None:
        self._ctx = context

    def handle(self) -> DiscountState:
        with self._ctx.lock:
            return self._ctx.discounts.get()

"""Application service: Update Quantity use case."""

from __future__ import annotations

import logging

from freshtrack.application.context import RegistryContext
from freshtrack.domain.model.access_control import Role

logger = logging.getLogger(__name__)


class UpdateQuantityHandler:

    def __init__(self, context: RegistryContext) -> None:
        self._ctx = context

    def handle(self, caller: str, product_id: int, quantity: int) -> None:
        """Set a product's stock level. Admin only; zero is allowed."""
        with self._ctx.lock:
            self._ctx.authorize(caller, Role.ADMIN)

            product = self._ctx.require_product(product_id)
            product.update_quantity(quantity)
            self._ctx.products.save(product)

        logger.info("Product #%d quantity set to %d by %s", product_id, quantity, caller)

"""Application service: Update Price use cases.

Prices are recomputed from the product's expiry and the current time,
then the registry-wide discount is applied. The batch variant is
all-or-nothing: one missing or expired product aborts the call before
any price is written, so callers can retry the whole list.
"""

from __future__ import annotations

import logging

from freshtrack.application.context import RegistryContext
from freshtrack.domain.exceptions import InvalidArgumentError
from freshtrack.domain.model.product import Product
from freshtrack.domain.service.price_engine import PriceEngine

logger = logging.getLogger(__name__)


class UpdatePriceHandler:

    def __init__(self, context: RegistryContext) -> None:
        self._ctx = context
        self._engine = PriceEngine()

    def handle(self, caller: str, product_id: int) -> int:
        """Reprice one product and return its new price."""
        with self._ctx.lock:
            self._ctx.authorize(caller)

            product = self._ctx.require_product(product_id)
            price = self._engine.price_for(
                product.expiry_date, self._ctx.discounts.get(), self._ctx.clock.now()
            )
            product.reprice(price)
            self._ctx.products.save(product)

        logger.info("Product #%d repriced to %d", product_id, price)
        return price


class UpdatePricesBatchHandler:

    def __init__(self, context: RegistryContext) -> None:
        self._ctx = context
        self._engine = PriceEngine()

    def handle(self, caller: str, product_ids: list[int]) -> dict[int, int]:
        """Reprice several products and return ``{id: new_price}``."""
        if not product_ids:
            raise InvalidArgumentError("Must specify at least one product to reprice")

        with self._ctx.lock:
            self._ctx.authorize(caller)

            discount = self._ctx.discounts.get()
            now = self._ctx.clock.now()

            # Phase 1: price everything, failing before any write
            priced: dict[int, tuple[Product, int]] = {}
            for product_id in product_ids:
                product = self._ctx.require_product(product_id)
                priced[product_id] = (
                    product,
                    self._engine.price_for(product.expiry_date, discount, now),
                )

            # Phase 2: apply and persist
            for product, price in priced.values():
                product.reprice(price)
            self._ctx.products.save_all([product for product, _ in priced.values()])

        logger.info("Repriced %d products (%s)", len(priced), discount)
        return {product_id: price for product_id, (_, price) in priced.items()}

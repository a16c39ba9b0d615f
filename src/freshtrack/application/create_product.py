"""Application service: Create Product use cases.

Single creation and batch creation share the same validation. The
batch is all-or-nothing: every product is built and checked before any
of them is written.
"""

from __future__ import annotations

import logging

from freshtrack.application.context import RegistryContext
from freshtrack.application.dto import ProductDTO, ProductSpec, product_to_dto
from freshtrack.domain.exceptions import DuplicateIdError, InvalidArgumentError
from freshtrack.domain.model.access_control import Role
from freshtrack.domain.model.product import Product

logger = logging.getLogger(__name__)


def _build_product(spec: ProductSpec, product_id: int) -> Product:
    return Product.create(
        id=product_id,
        manufacturer=spec.manufacturer,
        name=spec.name,
        manufacture_date=spec.manufacture_date,
        expiry_date=spec.expiry_date,
        category=spec.category,
        quantity=spec.quantity,
        is_quality_product=spec.is_quality_product,
        price=spec.price,
    )


class CreateProductHandler:

    def __init__(self, context: RegistryContext) -> None:
        self._ctx = context

    def handle(self, caller: str, spec: ProductSpec) -> ProductDTO:
        """Register a new product at the manufacturer.

        Requires the manufacturer role (admins pass too).
        """
        with self._ctx.lock:
            self._ctx.authorize(caller, Role.MANUFACTURER)

            product_id = spec.id if spec.id is not None else self._ctx.products.next_id()
            product = _build_product(spec, product_id)
            if self._ctx.products.get_by_id(product.id) is not None:
                raise DuplicateIdError(f"Product #{product.id} already exists")

            self._ctx.products.save(product)

        logger.info("Product #%d '%s' created by %s", product.id, product.name, caller)
        return product_to_dto(product, self._ctx.clock.now())


class CreateProductsBatchHandler:

    def __init__(self, context: RegistryContext) -> None:
        self._ctx = context

    def handle(self, caller: str, specs: list[ProductSpec]) -> list[ProductDTO]:
        """Register several products atomically.

        Phase 1: build and validate every product, rejecting ids that
                  already exist or repeat within the batch.
        Phase 2: write them all in one repository call.
        """
        if not specs:
            raise InvalidArgumentError("Batch must contain at least one product")

        with self._ctx.lock:
            self._ctx.authorize(caller, Role.MANUFACTURER)

            # Phase 1: build and validate
            explicit_ids = {spec.id for spec in specs if spec.id is not None}
            auto_id = self._ctx.products.next_id()
            seen: set[int] = set()
            products: list[Product] = []

            for spec in specs:
                if spec.id is None:
                    while auto_id in explicit_ids or auto_id in seen:
                        auto_id += 1
                    product_id = auto_id
                else:
                    product_id = spec.id

                product = _build_product(spec, product_id)
                if product.id in seen or self._ctx.products.get_by_id(product.id) is not None:
                    raise DuplicateIdError(f"Product #{product.id} already exists")
                seen.add(product.id)
                products.append(product)

            # Phase 2: persist
            self._ctx.products.save_all(products)

        logger.info("Batch of %d products created by %s", len(products), caller)
        now = self._ctx.clock.now()
        return [product_to_dto(p, now) for p in products]

"""Application service: Show Product / List Products use cases (queries)."""

from __future__ import annotations

from freshtrack.application.context import RegistryContext
from freshtrack.application.dto import ProductDTO, product_to_dto


class ShowProductHandler:

    def __init__(self, context: RegistryContext) -> None:
        self._ctx = context

    def handle(self, product_id: int) -> ProductDTO:
        with self._ctx.lock:
            product = self._ctx.require_product(product_id)
            return product_to_dto(product, self._ctx.clock.now())


class ListProductsHandler:

    def __init__(self, context: RegistryContext) -> None:
        self._ctx = context

    def handle(self) -> list[ProductDTO]:
        with self._ctx.lock:
            now = self._ctx.clock.now()
            return [product_to_dto(p, now) for p in self._ctx.products.list_all()]

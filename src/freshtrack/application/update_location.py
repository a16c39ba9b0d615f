"""Application service: Update Location use case.

Moves a product forward along the supply chain. The stage being
entered decides which role the caller needs; handing over to the
customer only needs some registry role.
"""

from __future__ import annotations

import logging

from freshtrack.application.context import RegistryContext
from freshtrack.application.dto import ProductDTO, product_to_dto
from freshtrack.domain.model.access_control import Role
from freshtrack.domain.model.product import Location

logger = logging.getLogger(__name__)

_ROLE_FOR_TARGET: dict[Location, Role | None] = {
    Location.MANUFACTURER: Role.MANUFACTURER,
    Location.DISTRIBUTOR: Role.DISTRIBUTOR,
    Location.RETAILER: Role.RETAILER,
    Location.CUSTOMER: None,
}


class UpdateLocationHandler:

    def __init__(self, context: RegistryContext) -> None:
        self._ctx = context

    def handle(
        self,
        caller: str,
        product_id: int,
        new_location: Location | str,
    ) -> ProductDTO:
        new_location = Location.parse(new_location)

        with self._ctx.lock:
            self._ctx.authorize(caller, _ROLE_FOR_TARGET[new_location])

            product = self._ctx.require_product(product_id)
            previous = product.current_location
            product.move_to(new_location)
            self._ctx.products.save(product)

        logger.info(
            "Product #%d moved %s -> %s by %s",
            product.id,
            previous.value,
            new_location.value,
            caller,
        )
        return product_to_dto(product, self._ctx.clock.now())

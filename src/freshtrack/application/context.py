"""Registry context shared by every use-case handler.

One context stands for one registry: its repositories, its clock and
the single lock that serializes mutations against each other and
against in-flight reads.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field

from freshtrack.domain.clock import Clock, SystemClock
from freshtrack.domain.exceptions import NotFoundError, UnauthorizedError
from freshtrack.domain.model.access_control import AccessControl, Role
from freshtrack.domain.model.product import Product
from freshtrack.domain.repository.discount_repository import DiscountRepository
from freshtrack.domain.repository.product_repository import ProductRepository
from freshtrack.domain.repository.role_repository import RoleRepository

logger = logging.getLogger(__name__)


@dataclass
class RegistryContext:
    products: ProductRepository
    roles: RoleRepository
    discounts: DiscountRepository
    clock: Clock = field(default_factory=SystemClock)
    lock: threading.RLock = field(default_factory=threading.RLock)

    def authorize(self, caller: str | None, role: Role | None = None) -> AccessControl:
        """Check the caller's capability and return the role table.

        With no *role*, any registry role is enough. Must be called
        with ``lock`` held.
        """
        access = self.roles.get()
        try:
            if role is None:
                access.require_participant(caller)
            else:
                access.require(caller, role)
        except UnauthorizedError:
            logger.warning(
                "Rejected call by %r (required role: %s)",
                caller,
                role.value if role else "any",
            )
            raise
        return access

    def require_product(self, product_id: int) -> Product:
        product = self.products.get_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product #{product_id} not found")
        return product

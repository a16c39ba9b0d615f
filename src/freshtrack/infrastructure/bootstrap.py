"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from freshtrack.application.context import RegistryContext
from freshtrack.domain.clock import SystemClock
from freshtrack.infrastructure.persistence.json_discount_repository import (
    JsonDiscountRepository,
)
from freshtrack.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from freshtrack.infrastructure.persistence.json_role_repository import (
    JsonRoleRepository,
)

DATA_DIR_ENV = "FRESHTRACK_DATA_DIR"
PRINCIPAL_ENV = "FRESHTRACK_PRINCIPAL"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    override = os.environ.get(DATA_DIR_ENV)
    return Path(override) if override else _DEFAULT_DATA_DIR


def registry_context() -> RegistryContext:
    root = data_dir()
    return RegistryContext(
        products=JsonProductRepository(root / "products.json"),
        roles=JsonRoleRepository(root / "roles.json"),
        discounts=JsonDiscountRepository(root / "discount.json"),
        clock=SystemClock(),
    )

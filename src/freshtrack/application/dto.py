"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from freshtrack.domain.model.product import Category, Product


@dataclass(frozen=True)
class ProductSpec:
    """Input: the fields of a product to register.

    ``id`` is the caller-chosen identifier; leave it ``None`` to let the
    repository pick the next free identifier.
    """

    manufacturer: str
    name: str
    manufacture_date: int
    expiry_date: int
    category: Category
    quantity: int
    price: int
    is_quality_product: bool = False
    id: int | None = None


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as displayed to the user."""

    id: int
    name: str
    manufacturer: str
    category: str
    location: str
    quantity: int
    price: int
    is_quality_product: bool
    manufacture_date: int
    expiry_date: int
    is_expired: bool


@dataclass(frozen=True)
class RoleTableDTO:
    owner: str | None
    members: dict[str, list[str]]  # role name -> sorted principals


def product_to_dto(product: Product, now: int) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        manufacturer=product.manufacturer,
        category=product.category.value,
        location=product.current_location.value,
        quantity=product.quantity,
        price=product.price,
        is_quality_product=product.is_quality_product,
        manufacture_date=product.manufacture_date,
        expiry_date=product.expiry_date,
        is_expired=product.is_expired(now),
    )

"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
from pathlib import Path

from freshtrack.domain.model.product import Category, Location, Product
from freshtrack.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> int:
        products = self._load()
        if not products:
            return 1
        return max(products) + 1

    def get_by_id(self, product_id: int) -> Product | None:
        return self._load().get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> None:
        self.save_all([product])

    def save_all(self, products: list[Product]) -> None:
        stored = self._load()
        for product in products:
            stored[product.id] = product
        self._persist(stored)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[int, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {
            item["id"]: Product(
                id=item["id"],
                name=item["name"],
                manufacturer=item["manufacturer"],
                manufacture_date=item["manufacture_date"],
                expiry_date=item["expiry_date"],
                category=Category(item["category"]),
                quantity=item["quantity"],
                is_quality_product=item.get("is_quality_product", False),
                price=item["price"],
                current_location=Location(item.get("location", "MANUFACTURER")),
            )
            for item in raw
        }

    def _persist(self, products: dict[int, Product]) -> None:
        raw = [
            {
                "id": p.id,
                "name": p.name,
                "manufacturer": p.manufacturer,
                "manufacture_date": p.manufacture_date,
                "expiry_date": p.expiry_date,
                "category": p.category.value,
                "quantity": p.quantity,
                "is_quality_product": p.is_quality_product,
                "price": p.price,
                "location": p.current_location.value,
            }
            for p in products.values()
        ]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")

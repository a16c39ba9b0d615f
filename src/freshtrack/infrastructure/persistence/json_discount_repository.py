"""JSON-file-backed implementation of DiscountRepository."""

from __future__ import annotations

import json
from pathlib import Path

from freshtrack.domain.model.value_objects import DiscountState
from freshtrack.domain.repository.discount_repository import DiscountRepository


class JsonDiscountRepository(DiscountRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    def get(self) -> DiscountState:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return DiscountState(
            is_active=raw.get("is_active", False),
            percentage=raw.get("percentage", 0),
        )

    def save(self, discount: DiscountState) -> None:
        raw = {"is_active": discount.is_active, "percentage": discount.percentage}
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self.save(DiscountState.inactive())

"""Abstract repository for the registry-wide DiscountState."""

from __future__ import annotations

from abc import ABC, abstractmethod

from freshtrack.domain.model.value_objects import DiscountState


class DiscountRepository(ABC):

    @abstractmethod
    def get(self) -> DiscountState:
        """Return the current discount, inactive if none was ever set."""

    @abstractmethod
    def save(self, discount: DiscountState) -> None:
        """Replace the current discount."""

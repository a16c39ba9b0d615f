"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass

from freshtrack.domain.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class DiscountState:
    """Registry-wide percentage discount.

    An active discount always lies in the open interval (0, 100), so a
    discounted price is strictly below the original and never negative.
    The inactive state carries a percentage of zero.
    """

    is_active: bool = False
    percentage: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.percentage, bool) or not isinstance(self.percentage, int):
            raise InvalidArgumentError(
                f"Discount percentage must be an integer, "
                f"got {type(self.percentage).__name__}"
            )
        if self.is_active and not 0 < self.percentage < 100:
            raise InvalidArgumentError(
                f"Discount percentage must be between 1 and 99, got {self.percentage}"
            )
        if not self.is_active and self.percentage != 0:
            raise InvalidArgumentError("An inactive discount has no percentage")

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def inactive() -> DiscountState:
        return DiscountState()

    @staticmethod
    def of(percentage: int) -> DiscountState:
        """Build an active discount, validating the percentage."""
        return DiscountState(is_active=True, percentage=percentage)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        if not self.is_active:
            return "no discount"
        return f"{self.percentage}% off"

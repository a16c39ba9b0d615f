"""Domain service: tiered pricing with a discount overlay.

The tier is chosen by whole days remaining until expiry, then the
registry-wide discount (if active) is taken off. Both steps work on
integer prices and round down.
"""

from __future__ import annotations

from freshtrack.domain.clock import SECONDS_PER_DAY
from freshtrack.domain.exceptions import ExpiredOrInvalidError
from freshtrack.domain.model.value_objects import DiscountState

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
LONG_SHELF_LIFE_DAYS = 30
SHORT_SHELF_LIFE_DAYS = 7

LONG_SHELF_LIFE_PRICE = 1000
MEDIUM_SHELF_LIFE_PRICE = 800
SHORT_SHELF_LIFE_PRICE = 500


class PriceEngine:

    def compute_tier_price(self, expiry_date: int, now: int) -> int:
        """Return the tier price for an item expiring at *expiry_date*.

        Raises ExpiredOrInvalidError if the expiry is not in the future.
        """
        if expiry_date <= now:
            raise ExpiredOrInvalidError(
                f"Cannot price an item expiring at {expiry_date} (now {now})"
            )
        days = (expiry_date - now) // SECONDS_PER_DAY
        if days > LONG_SHELF_LIFE_DAYS:
            return LONG_SHELF_LIFE_PRICE
        if days > SHORT_SHELF_LIFE_DAYS:
            return MEDIUM_SHELF_LIFE_PRICE
        return SHORT_SHELF_LIFE_PRICE

    def apply_discount(self, price: int, discount: DiscountState) -> int:
        if not discount.is_active:
            return price
        return price * (100 - discount.percentage) // 100

    def price_for(self, expiry_date: int, discount: DiscountState, now: int) -> int:
        """Tier price followed by the discount overlay."""
        return self.apply_discount(self.compute_tier_price(expiry_date, now), discount)

"""
Promo code discounts for a quoted fare.

A valid code takes a fixed fraction off the price, but a single discount
never exceeds MAX_PROMO_DISCOUNT. Unknown codes leave the price unchanged.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from taxi_fare.config import PROMO_CODES, MAX_PROMO_DISCOUNT
from taxi_fare.fare_calculator import round_money

logger = logging.getLogger(__name__)


@dataclass
class PromoResult:
    """Outcome of applying a promo code."""
    original_price: float
    price: float
    discount: float
    code: Optional[str]
    status: str        # "none", "applied" or "invalid"
    fraction: float = 0.0
    was_capped: bool = False


class PromoApplier:
    """Applies TAXI10 / TAXI20 / TAXI50 style promo codes to a price."""

    def apply(self, price: float, code: Optional[str] = None) -> Tuple[float, float]:
        """Return (new_price, discount_applied), both rounded to cents."""
        result = self.evaluate(price, code)
        return result.price, result.discount

    def evaluate(self, price: float, code: Optional[str] = None) -> PromoResult:
        """
        Apply a promo code and report what happened.

        Args:
            price: Price before the discount
            code: Promo code as typed; None or blank means no promo

        Returns:
            PromoResult with the rounded final price and the post-cap discount
        """
        original = price

        if code is None or not code.strip():
            return PromoResult(
                original_price=original,
                price=round_money(price),
                discount=0.0,
                code=None,
                status="none",
            )

        normalized = code.strip().upper()

        if normalized not in PROMO_CODES:
            logger.info("Invalid promo code %r", code)
            return PromoResult(
                original_price=original,
                price=round_money(price),
                discount=0.0,
                code=normalized,
                status="invalid",
            )

        fraction = PROMO_CODES[normalized]

        # ── Fraction first, then give back anything over the cap ──
        discount = price * fraction
        price *= (1 - fraction)

        was_capped = False
        if discount > MAX_PROMO_DISCOUNT:
            was_capped = True
            price += (discount - MAX_PROMO_DISCOUNT)
            discount = MAX_PROMO_DISCOUNT

        logger.debug(
            "Promo %s on %.2f: -%.2f%s", normalized, original, discount,
            " (capped)" if was_capped else "",
        )

        return PromoResult(
            original_price=original,
            price=round_money(price),
            discount=round_money(discount),
            code=normalized,
            status="applied",
            fraction=fraction,
            was_capped=was_capped,
        )

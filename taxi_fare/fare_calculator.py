"""
Fare Calculator: computes the estimated taxi fare.

Adds distance and time costs to the base rate, applies the car category
and time-of-day coefficients, rounds to cents, returns full breakdown.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from taxi_fare.config import (
    BASE_RATE, PER_KM_RATE, PER_MIN_RATE,
    CarCategory, TimeBand,
    CATEGORY_COEFFICIENTS, BAND_COEFFICIENTS,
    DEFAULT_CATEGORY, DEFAULT_BAND,
)

logger = logging.getLogger(__name__)


def round_money(value: float) -> float:
    """
    Round to 2 decimal places, halves away from zero.

    25.125 -> 25.13 and -0.125 -> -0.13. The built-in round() would give
    25.12 here because it rounds halves to even.

    Values too large to scale by 100 (and inf/nan) come back unchanged.
    """
    scaled = abs(value) * 100
    if not math.isfinite(scaled):
        return value
    # + 0.0 turns a -0.0 result into 0.0
    return math.copysign(math.floor(scaled + 0.5) / 100, value) + 0.0


def resolve_category(category: str) -> Tuple[CarCategory, bool]:
    """Match a car type key exactly. Returns (category, matched)."""
    try:
        return CarCategory(category), True
    except ValueError:
        return DEFAULT_CATEGORY, False


def resolve_band(band: str) -> Tuple[TimeBand, bool]:
    """Match a time-of-day key exactly. Returns (band, matched)."""
    try:
        return TimeBand(band), True
    except ValueError:
        return DEFAULT_BAND, False


@dataclass
class FareQuote:
    """Complete fare result with full breakdown."""
    # Final output
    cost: float

    # Inputs
    distance_km: float
    duration_min: float
    requested_category: str
    requested_band: str

    # Resolved lookups
    category: str
    category_coefficient: float
    category_matched: bool
    band: str
    band_coefficient: float
    band_matched: bool

    # Cost components
    base_rate: float
    distance_cost: float
    time_cost: float
    subtotal: float

    warnings: List[str] = field(default_factory=list)


class FareCalculator:
    """
    Taxi fare calculator.

    Unknown car types and time-of-day values never raise; they fall back to
    the standard category and the day band. The fallback is recorded as a
    warning on the quote so callers can surface it.
    """

    def compute(self, distance_km: float, duration_min: float,
                category: str, band: str) -> float:
        """
        Calculate the rounded fare for a trip.

        Keys are matched case-sensitively against the lower-case table keys,
        so callers lower-case user input first. Distance and time are not
        validated here.
        """
        cost = BASE_RATE
        cost += distance_km * PER_KM_RATE
        cost += duration_min * PER_MIN_RATE

        cost *= CATEGORY_COEFFICIENTS[resolve_category(category)[0]]
        cost *= BAND_COEFFICIENTS[resolve_band(band)[0]]

        return round_money(cost)

    def quote(self, distance_km: float, duration_min: float,
              category: str, band: str) -> FareQuote:
        """
        Calculate the fare and keep every intermediate value.

        Args:
            distance_km: Trip distance in kilometers
            duration_min: Estimated trip time in minutes
            category: Car type key (standard, comfort, business, minivan)
            band: Time-of-day key (day, night, morning, evening)

        Returns:
            FareQuote whose cost equals compute() for the same arguments
        """
        warnings = []

        # ── Step 1: Lookups (with fallback) ──
        car, car_matched = resolve_category(category)
        if not car_matched:
            logger.info("Unknown car type %r, using %s", category, car.value)
            warnings.append(
                f"Unknown car type '{category}'. "
                f"Using {car.value} coefficient {CATEGORY_COEFFICIENTS[car]:.2f}."
            )

        time_band, band_matched = resolve_band(band)
        if not band_matched:
            logger.info("Unknown time of day %r, using %s", band, time_band.value)
            warnings.append(
                f"Unknown time of day '{band}'. "
                f"Using {time_band.value} coefficient {BAND_COEFFICIENTS[time_band]:.2f}."
            )

        # ── Step 2: Cost components ──
        distance_cost = distance_km * PER_KM_RATE
        time_cost = duration_min * PER_MIN_RATE
        subtotal = BASE_RATE + distance_cost + time_cost

        # ── Step 3: Final cost ──
        cost = self.compute(distance_km, duration_min, category, band)
        logger.debug(
            "Fare %.2f for %s km / %s min (%s, %s)",
            cost, distance_km, duration_min, car.value, time_band.value,
        )

        return FareQuote(
            cost=cost,
            distance_km=distance_km,
            duration_min=duration_min,
            requested_category=category,
            requested_band=band,
            category=car.value,
            category_coefficient=CATEGORY_COEFFICIENTS[car],
            category_matched=car_matched,
            band=time_band.value,
            band_coefficient=BAND_COEFFICIENTS[time_band],
            band_matched=band_matched,
            base_rate=BASE_RATE,
            distance_cost=distance_cost,
            time_cost=time_cost,
            subtotal=subtotal,
            warnings=warnings,
        )

    def compare_categories(self, distance_km: float, duration_min: float,
                           band: str) -> Dict[str, float]:
        """Fare under every car category, cheapest coefficient first."""
        ordered = sorted(CarCategory, key=lambda c: CATEGORY_COEFFICIENTS[c])
        return {
            car.value: self.compute(distance_km, duration_min, car.value, band)
            for car in ordered
        }

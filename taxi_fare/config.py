"""
Configuration constants for the Taxi Fare Estimator.
All tariff parameters in one place.
"""
from enum import Enum
from types import MappingProxyType
from typing import Mapping

# ──────────────────────────────────────────────
# Tariff Rates (UAH)
# ──────────────────────────────────────────────

CURRENCY = "UAH"

BASE_RATE = 25.0      # Flat pickup cost
PER_KM_RATE = 8.0     # Cost per kilometer
PER_MIN_RATE = 2.0    # Cost per minute

# ──────────────────────────────────────────────
# Car Categories & Coefficients
# ──────────────────────────────────────────────

class CarCategory(str, Enum):
    STANDARD = "standard"
    COMFORT = "comfort"
    BUSINESS = "business"
    MINIVAN = "minivan"


CATEGORY_COEFFICIENTS: Mapping[CarCategory, float] = MappingProxyType({
    CarCategory.STANDARD: 1.0,
    CarCategory.COMFORT: 1.3,
    CarCategory.BUSINESS: 1.8,
    CarCategory.MINIVAN: 2.0,
})

DEFAULT_CATEGORY = CarCategory.STANDARD  # Used for unknown car types

# ──────────────────────────────────────────────
# Time-of-Day Bands & Coefficients
# ──────────────────────────────────────────────

class TimeBand(str, Enum):
    DAY = "day"
    NIGHT = "night"
    MORNING = "morning"
    EVENING = "evening"


BAND_COEFFICIENTS: Mapping[TimeBand, float] = MappingProxyType({
    TimeBand.DAY: 1.0,
    TimeBand.NIGHT: 1.2,
    TimeBand.MORNING: 1.1,
    TimeBand.EVENING: 1.15,
})

DEFAULT_BAND = TimeBand.DAY  # Used for unknown time-of-day values

# ──────────────────────────────────────────────
# Promo Codes
# ──────────────────────────────────────────────

PROMO_CODES: Mapping[str, float] = MappingProxyType({
    "TAXI10": 0.10,
    "TAXI20": 0.20,
    "TAXI50": 0.50,
})

MAX_PROMO_DISCOUNT = 100.0  # Absolute cap on any single promo discount

# The fraction is applied to the whole price first; when the raw discount
# exceeds the cap, the excess is added back onto the price afterwards.

# ──────────────────────────────────────────────
# Input Defaults (substituted for non-positive input)
# ──────────────────────────────────────────────

DEFAULT_DISTANCE_KM = 5.0
DEFAULT_DURATION_MIN = 15.0

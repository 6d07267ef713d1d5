"""
Tests for the Fare Calculator.

Validates the fare formula, coefficient lookups and their fallbacks,
half-away rounding, car comparison ordering and the quote breakdown.
"""

import logging
import math

import pytest

from taxi_fare.fare_calculator import FareCalculator, round_money
from taxi_fare.config import (
    CarCategory, TimeBand, CATEGORY_COEFFICIENTS, BAND_COEFFICIENTS,
)


@pytest.fixture
def calculator():
    """Create a FareCalculator instance."""
    return FareCalculator()


# ──────────────────────────────────────────────
# Basic Fare Calculation
# ──────────────────────────────────────────────

class TestBasicFare:
    """Fare = base + distance + time, scaled by the coefficients."""

    def test_standard_day_is_plain_formula(self, calculator):
        assert calculator.compute(10, 20, "standard", "day") == 145.0

    @pytest.mark.parametrize("distance, duration", [
        (0, 0), (1, 1), (3.7, 11), (12.5, 42.25), (100, 180),
    ])
    def test_standard_day_matches_rounded_formula(self, calculator, distance, duration):
        expected = round_money(25 + 8 * distance + 2 * duration)
        assert calculator.compute(distance, duration, "standard", "day") == expected

    def test_comfort_coefficient(self, calculator):
        assert calculator.compute(10, 20, "comfort", "day") == 188.5

    def test_business_night(self, calculator):
        assert calculator.compute(10, 20, "business", "night") == pytest.approx(313.2)

    def test_minivan_evening(self, calculator):
        assert calculator.compute(10, 20, "minivan", "evening") == pytest.approx(333.5)

    def test_morning_coefficient(self, calculator):
        assert calculator.compute(5, 15, "standard", "morning") == pytest.approx(104.5)

    def test_deterministic(self, calculator):
        first = calculator.compute(7.3, 18, "comfort", "night")
        second = calculator.compute(7.3, 18, "comfort", "night")
        assert first == second


# ──────────────────────────────────────────────
# Degenerate Input (no validation in the core)
# ──────────────────────────────────────────────

class TestDegenerateInput:
    """Zero and negative values still produce a number, never an error."""

    def test_zero_distance_and_time(self, calculator):
        assert calculator.compute(0, 0, "standard", "day") == 25.0

    def test_negative_distance(self, calculator):
        assert calculator.compute(-10, 0, "standard", "day") == -55.0

    def test_negative_result_scaled(self, calculator):
        assert calculator.compute(-10, 0, "minivan", "day") == -110.0

    def test_huge_distance_does_not_overflow(self, calculator):
        """Cost × 100 overflows to inf; the unrounded cost is returned."""
        cost = calculator.compute(1e306, 0, "standard", "day")
        assert math.isfinite(cost)
        assert cost == pytest.approx(8e306)

    def test_huge_distance_every_category(self, calculator):
        costs = calculator.compare_categories(1e306, 0, "night")
        assert all(math.isfinite(c) for c in costs.values())

    def test_infinite_distance_passes_through(self, calculator):
        assert calculator.compute(math.inf, 0, "standard", "day") == math.inf


# ──────────────────────────────────────────────
# Fallback for Unknown Keys
# ──────────────────────────────────────────────

class TestFallback:
    """Unknown car types price as standard, unknown bands price as day."""

    def test_unknown_category_is_standard(self, calculator):
        assert calculator.compute(10, 20, "limousine", "night") == \
            calculator.compute(10, 20, "standard", "night")

    def test_unknown_band_is_day(self, calculator):
        assert calculator.compute(10, 20, "business", "noon") == \
            calculator.compute(10, 20, "business", "day")

    def test_lookup_is_case_sensitive(self, calculator):
        """Callers lower-case first; mixed case is treated as unknown."""
        assert calculator.compute(10, 20, "Comfort", "NIGHT") == 145.0

    def test_empty_strings_fall_back(self, calculator):
        assert calculator.compute(10, 20, "", "") == 145.0


# ──────────────────────────────────────────────
# Rounding
# ──────────────────────────────────────────────

class TestRounding:
    """Costs are rounded to cents with halves going away from zero."""

    def test_midpoint_rounds_up(self, calculator):
        # 25 + 2 * 0.0625 = 25.125 exactly
        assert calculator.compute(0, 0.0625, "standard", "day") == 25.13

    def test_round_money_half_away(self):
        assert round_money(0.125) == 0.13
        assert round_money(-0.125) == -0.13
        assert round_money(2.5) == 2.5

    def test_tiny_negative_rounds_to_positive_zero(self):
        result = round_money(-0.001)
        assert result == 0.0
        assert math.copysign(1.0, result) == 1.0

    def test_round_money_differs_from_builtin_round(self):
        assert round_money(25.125) == 25.13
        assert round(25.125, 2) == 25.12

    @pytest.mark.parametrize("category", [c.value for c in CarCategory])
    @pytest.mark.parametrize("band", [b.value for b in TimeBand])
    def test_never_more_than_two_decimals(self, calculator, category, band):
        cost = calculator.compute(7.37, 13.3, category, band)
        assert cost == round(cost, 2)


# ──────────────────────────────────────────────
# Car Comparison
# ──────────────────────────────────────────────

class TestCompareCategories:
    """Comparison lists every category, cheapest coefficient first."""

    def test_lists_all_categories(self, calculator):
        costs = calculator.compare_categories(10, 20, "day")
        assert list(costs) == ["standard", "comfort", "business", "minivan"]

    def test_costs_increase_with_coefficient(self, calculator):
        costs = list(calculator.compare_categories(8, 25, "evening").values())
        assert costs == sorted(costs)
        assert len(set(costs)) == len(costs)

    def test_each_cost_matches_compute(self, calculator):
        costs = calculator.compare_categories(10, 20, "night")
        for category, cost in costs.items():
            assert cost == calculator.compute(10, 20, category, "night")

    def test_unknown_band_compares_as_day(self, calculator):
        assert calculator.compare_categories(10, 20, "dusk") == \
            calculator.compare_categories(10, 20, "day")


# ──────────────────────────────────────────────
# Quote Breakdown
# ──────────────────────────────────────────────

class TestQuote:
    """Quote carries the same cost plus every intermediate value."""

    def test_cost_matches_compute(self, calculator):
        quote = calculator.quote(10, 20, "business", "morning")
        assert quote.cost == calculator.compute(10, 20, "business", "morning")

    def test_components(self, calculator):
        quote = calculator.quote(10, 20, "comfort", "night")
        assert quote.base_rate == 25.0
        assert quote.distance_cost == 80.0
        assert quote.time_cost == 40.0
        assert quote.subtotal == 145.0
        assert quote.category_coefficient == CATEGORY_COEFFICIENTS[CarCategory.COMFORT]
        assert quote.band_coefficient == BAND_COEFFICIENTS[TimeBand.NIGHT]

    def test_matched_lookups_have_no_warnings(self, calculator):
        quote = calculator.quote(10, 20, "comfort", "night")
        assert quote.category_matched and quote.band_matched
        assert quote.warnings == []

    def test_fallback_recorded_as_warning(self, calculator):
        quote = calculator.quote(10, 20, "limo", "noon")
        assert quote.category == "standard"
        assert quote.band == "day"
        assert not quote.category_matched
        assert not quote.band_matched
        assert quote.requested_category == "limo"
        assert quote.requested_band == "noon"
        assert len(quote.warnings) == 2
        assert any("limo" in w for w in quote.warnings)

    def test_fallback_is_logged(self, calculator, caplog):
        with caplog.at_level(logging.INFO, logger="taxi_fare.fare_calculator"):
            calculator.quote(10, 20, "limo", "day")
        assert "limo" in caplog.text

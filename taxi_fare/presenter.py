"""
Console rendering for fare quotes, car comparisons and promo outcomes.

Every function returns a list of lines; printing is left to the caller.
"""

from typing import Dict, List

from taxi_fare.config import CURRENCY, MAX_PROMO_DISCOUNT, PER_KM_RATE, PER_MIN_RATE
from taxi_fare.fare_calculator import FareQuote
from taxi_fare.promo import PromoResult


def money(value: float) -> str:
    return f"{value:.2f} {CURRENCY}"


def format_initial_cost(cost: float) -> List[str]:
    return ["", f"Initial cost: {money(cost)}"]


def format_comparison(costs: Dict[str, float]) -> List[str]:
    """One line per car category, in the order given."""
    lines = ["", "=== CAR TYPE COMPARISON ==="]
    for category, cost in costs.items():
        lines.append(f"{category}: {money(cost)}")
    return lines


def format_promo(result: PromoResult) -> List[str]:
    """Announcement for an applied or rejected promo code."""
    if result.status == "applied":
        percent = round(result.fraction * 100)
        lines = [
            f"Applied {percent}% discount (max {MAX_PROMO_DISCOUNT:.0f} {CURRENCY}): "
            f"-{money(result.discount)}"
        ]
        if result.was_capped:
            lines.append(f"Discount limited to {money(MAX_PROMO_DISCOUNT)}")
        return lines
    if result.status == "invalid":
        return ["Invalid promo code"]
    return []


def format_breakdown(quote: FareQuote, final_cost: float) -> List[str]:
    """
    Detailed breakdown of a quote.

    Unknown car types and times of day are shown as typed, together with the
    coefficient that was actually used.
    """
    lines = [
        "",
        "=== DETAILED CALCULATION BREAKDOWN ===",
        f"Distance: {quote.distance_km:g} km",
        f"Time: {quote.duration_min:g} min",
    ]

    if quote.category_matched:
        lines.append(
            f"Car type: {quote.category} (coefficient {quote.category_coefficient:.2f})"
        )
    else:
        lines.append(
            f"Car type: {quote.requested_category} "
            f"(Invalid - using {quote.category.title()} coeff {quote.category_coefficient:.2f})"
        )

    if quote.band_matched:
        lines.append(
            f"Time of day: {quote.band} (coefficient {quote.band_coefficient:.2f})"
        )
    else:
        lines.append(
            f"Time of day: {quote.requested_band} "
            f"(Invalid - using {quote.band.title()} coeff {quote.band_coefficient:.2f})"
        )

    lines.extend([
        f"Base rate: {money(quote.base_rate)}",
        f"Distance cost: {quote.distance_km:g} km * {PER_KM_RATE:.2f} "
        f"{CURRENCY}/km = {money(quote.distance_cost)}",
        f"Time cost: {quote.duration_min:g} min * {PER_MIN_RATE:.2f} "
        f"{CURRENCY}/min = {money(quote.time_cost)}",
        "--------------------------------",
        f"FINAL COST: {money(final_cost)}",
    ])
    return lines


def format_additional_info() -> List[str]:
    return [
        "",
        "=== ADDITIONAL INFORMATION ===",
        "This calculation is an estimate.",
        "Final cost may vary based on actual route and traffic conditions.",
    ]

"""
Console front end for the Taxi Fare Estimator.

Prompts for the trip details, prints the quote, a comparison across car
types, the promo outcome and a detailed breakdown.
"""

import argparse
import logging
import math
import sys
from typing import Callable, List, Optional

from taxi_fare.config import (
    CarCategory, TimeBand,
    DEFAULT_DISTANCE_KM, DEFAULT_DURATION_MIN,
)
from taxi_fare.fare_calculator import FareCalculator
from taxi_fare.logging_setup import setup_logging
from taxi_fare.presenter import (
    format_initial_cost, format_comparison, format_promo,
    format_breakdown, format_additional_info,
)
from taxi_fare.promo import PromoApplier
from taxi_fare.schemas import TripRequest

logger = logging.getLogger(__name__)


def parse_positive(raw: str) -> Optional[float]:
    """Parse a positive finite number, or None if the text is not one."""
    try:
        value = float(raw.strip())
    except ValueError:
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value


def is_yes(answer: str) -> bool:
    return answer.strip() in ("y", "Y")


class TaxiSession:
    """
    Interactive session over a line reader and a line writer.

    The reader behaves like input(): it takes a prompt and returns one line.
    """

    MAX_RUNS = 2  # first calculation plus one optional repeat

    def __init__(self, calculator: Optional[FareCalculator] = None,
                 promo_applier: Optional[PromoApplier] = None,
                 reader: Optional[Callable[[str], str]] = None,
                 writer: Optional[Callable[[str], None]] = None):
        self.calculator = calculator or FareCalculator()
        self.promo_applier = promo_applier or PromoApplier()
        self.reader = reader or input
        self.writer = writer or print

    def run(self) -> None:
        """Welcome, calculate, then offer one more calculation."""
        self._emit([
            "Welcome to Taxi App!",
            "Please enter your travel details:",
        ])

        runs = 0
        while runs < self.MAX_RUNS:
            self.process_calculation()
            runs += 1
            if runs == self.MAX_RUNS:
                break
            answer = self.reader("\nWould you like to calculate another trip? (y/n): ")
            if not is_yes(answer):
                self.writer("Thank you for using Taxi App!")
                break

    def process_calculation(self) -> float:
        """One full calculation. Returns the final (discounted) cost."""
        self._emit(["", "=== TRIP COST CALCULATION ==="])

        trip = self.collect_trip()
        quote = self.calculator.quote(
            trip.distance_km, trip.duration_min, trip.category, trip.band
        )
        self._emit(format_initial_cost(quote.cost))

        comparison = self.calculator.compare_categories(
            trip.distance_km, trip.duration_min, trip.band
        )
        self._emit(format_comparison(comparison))

        promo = self.promo_applier.evaluate(quote.cost, self.enter_promo_code())
        self._emit(format_promo(promo))

        self._emit(format_breakdown(quote, promo.price))
        self._emit(format_additional_info())

        logger.debug("Calculation finished: %.2f -> %.2f", quote.cost, promo.price)
        return promo.price

    # ── Input collection ──

    def collect_trip(self) -> TripRequest:
        return TripRequest(
            distance_km=self.enter_distance(),
            duration_min=self.enter_time(),
            category=self.select_car_type(),
            band=self.select_time_of_day(),
        )

    def enter_distance(self) -> float:
        value = parse_positive(self.reader("Enter trip distance (km): "))
        if value is None:
            self.writer(f"Invalid distance. Using default value {DEFAULT_DISTANCE_KM:g} km.")
            return DEFAULT_DISTANCE_KM
        return value

    def enter_time(self) -> float:
        value = parse_positive(self.reader("Enter estimated trip time (min): "))
        if value is None:
            self.writer(f"Invalid time. Using default value {DEFAULT_DURATION_MIN:g} min.")
            return DEFAULT_DURATION_MIN
        return value

    def select_car_type(self) -> str:
        options = ", ".join(c.value for c in CarCategory)
        self.writer(f"Available car types: {options}")
        return self.reader("Select car type: ").strip().lower()

    def select_time_of_day(self) -> str:
        options = "/".join(b.value for b in TimeBand)
        return self.reader(f"Select time of day ({options}): ").strip().lower()

    def enter_promo_code(self) -> Optional[str]:
        if not is_yes(self.reader("Do you have a promo code? (y/n): ")):
            return None
        return self.reader("Enter promo code: ")

    def _emit(self, lines: List[str]) -> None:
        for line in lines:
            self.writer(line)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Taxi Fare Estimator")
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging verbosity (logs go to stderr)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    session = TaxiSession()
    try:
        session.run()
    except (EOFError, KeyboardInterrupt):
        logger.info("Input closed, ending session")
        print()
    return 0


# ── Main ──

if __name__ == "__main__":
    sys.exit(main())

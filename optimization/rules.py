"""Per-preference scoring rules."""

from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Dict, Optional, Sequence
import math

from models.pairing import Pairing, sunday_weekday
from models.preference import PreferenceType, TimeWindow


@dataclass(frozen=True)
class ScoreWeights:
    """Score contribution of each preference kind."""
    money_multiplier: float = 2.0
    high_earnings_hours: float = 15.0
    route: int = 30
    time_window: int = 20
    max_duration: int = 15
    max_legs: int = 15
    red_eye: int = -50
    red_eye_last_hour: int = 7
    avoid_airport: int = -100
    weekday_worked: int = -40
    weekday_kept: int = 10
    specific_date: int = -500


@dataclass(frozen=True)
class RuleOutcome:
    """Result of applying one preference to one pairing."""
    score_delta: int = 0
    tag: Optional[str] = None


NO_EFFECT = RuleOutcome()

Rule = Callable[[Pairing, Sequence[date], Any, ScoreWeights], RuleOutcome]


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def money_rule(pairing, days, param, weights) -> RuleOutcome:
    points = round_half_up(pairing.block_hours_decimal * weights.money_multiplier)
    tag = None
    if pairing.block_hours_decimal > weights.high_earnings_hours:
        tag = "High Earnings ($$$)"
    return RuleOutcome(points, tag)


def route_rule(pairing, days, station: str, weights) -> RuleOutcome:
    if station in pairing.details.upper():
        return RuleOutcome(weights.route, f"Route includes {station}")
    return NO_EFFECT


def time_window_rule(pairing, days, window: TimeWindow, weights) -> RuleOutcome:
    if window.contains(pairing.departure_time.hour):
        return RuleOutcome(
            weights.time_window,
            f"Departure between {window.start_hour}:00-{window.end_hour}:00"
        )
    return NO_EFFECT


def max_duration_rule(pairing, days, max_days: int, weights) -> RuleOutcome:
    if pairing.duration <= max_days:
        return RuleOutcome(weights.max_duration, f"Duration under {max_days} days")
    return NO_EFFECT


def max_legs_rule(pairing, days, max_legs: int, weights) -> RuleOutcome:
    # Trip-wide average, not a true per-day leg count
    legs_per_day = pairing.estimated_legs / pairing.duration
    if legs_per_day <= max_legs:
        return RuleOutcome(
            weights.max_legs,
            f"Low workload (~{math.ceil(legs_per_day)} legs/day)"
        )
    return NO_EFFECT


def red_eye_rule(pairing, days, param, weights) -> RuleOutcome:
    hour = pairing.arrival_time.hour
    if 0 <= hour <= weights.red_eye_last_hour:
        return RuleOutcome(
            weights.red_eye,
            f"Red Eye Arrival ({hour:02d}:00) (Violated)"
        )
    return NO_EFFECT


def avoid_airport_rule(pairing, days, station: str, weights) -> RuleOutcome:
    if station in pairing.details.upper():
        return RuleOutcome(weights.avoid_airport, f"Avoided {station} (Violated)")
    return NO_EFFECT


def weekday_off_rule(pairing, days, weekday: int, weights) -> RuleOutcome:
    if any(sunday_weekday(day) == weekday for day in days):
        return RuleOutcome(
            weights.weekday_worked,
            "Works on a requested Day Off (Violated)"
        )
    return RuleOutcome(weights.weekday_kept, "Keeps preferred weekday free")


def specific_date_rule(pairing, days, day_off: date, weights) -> RuleOutcome:
    if day_off in days:
        return RuleOutcome(
            weights.specific_date,
            f"Conflicts with {day_off.strftime('%b %d')} (Violated)"
        )
    return NO_EFFECT


RULES: Dict[PreferenceType, Rule] = {
    PreferenceType.STRATEGY_MONEY: money_rule,
    PreferenceType.ROUTE: route_rule,
    PreferenceType.TIME_WINDOW: time_window_rule,
    PreferenceType.MAX_DURATION: max_duration_rule,
    PreferenceType.MAX_LEGS_PER_DAY: max_legs_rule,
    PreferenceType.AVOID_RED_EYE: red_eye_rule,
    PreferenceType.AVOID_AIRPORT: avoid_airport_rule,
    PreferenceType.DAY_OF_WEEK_OFF: weekday_off_rule,
    PreferenceType.SPECIFIC_DATE_OFF: specific_date_rule,
}

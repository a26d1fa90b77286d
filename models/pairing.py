"""Pairing data model."""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Any, Dict, FrozenSet, List, Tuple


def span_days(start: datetime, end: datetime) -> Tuple[date, ...]:
    """Calendar days touched by [start, end], both ends inclusive."""
    first, last = start.date(), end.date()
    count = (last - first).days + 1
    return tuple(first + timedelta(days=i) for i in range(max(count, 1)))


def sunday_weekday(day: date) -> int:
    """Weekday number with Sunday as 0 and Saturday as 6."""
    return (day.weekday() + 1) % 7


@dataclass(frozen=True)
class Pairing:
    """
    Represents a multi-day trip offered in the monthly bid package.

    Pairings arrive already validated: arrival is after departure and the
    block-hour text has been converted to decimal hours.

    Attributes:
        pairing_number: Identifier from the bid package (may repeat)
        pre_assigned: Free-text flag, empty when not pre-assigned
        duration: Trip length in days
        aircraft_type: Aircraft type code (e.g., "737")
        departure_time: Report/first departure time
        arrival_time: Final arrival time back at base
        details: Route string, stations separated by "-"
        block_hours_decimal: Paid flight hours as a decimal
        block_hours: Block hours as written in the source ("12:30")
        layovers: Distinct stations appearing in the route
    """
    pairing_number: str
    pre_assigned: str
    duration: int
    aircraft_type: str
    departure_time: datetime
    arrival_time: datetime
    details: str
    block_hours_decimal: float
    block_hours: str = ""
    layovers: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def calendar_days(self) -> Tuple[date, ...]:
        """Days the trip spans, departure and arrival day included."""
        return span_days(self.departure_time, self.arrival_time)

    @property
    def duty_hours(self) -> float:
        """Elapsed hours from departure to final arrival."""
        return (self.arrival_time - self.departure_time).total_seconds() / 3600

    @property
    def estimated_legs(self) -> int:
        """Rough leg count: one per distinct station plus the return."""
        return len(self.layovers) + 1

    def to_dict(self) -> Dict[str, Any]:
        """Serialize pairing to dictionary."""
        return {
            "pairing_number": self.pairing_number,
            "pre_assigned": self.pre_assigned,
            "duration": self.duration,
            "aircraft_type": self.aircraft_type,
            "departure_time": self.departure_time.isoformat(),
            "arrival_time": self.arrival_time.isoformat(),
            "details": self.details,
            "block_hours": self.block_hours,
            "block_hours_decimal": self.block_hours_decimal,
            "layovers": sorted(self.layovers),
        }

    def __repr__(self) -> str:
        return (
            f"Pairing({self.pairing_number}: {self.details} "
            f"{self.departure_time.strftime('%m/%d %H:%M')}-"
            f"{self.arrival_time.strftime('%m/%d %H:%M')})"
        )


@dataclass(frozen=True)
class ScoredPairing:
    """
    A pairing annotated with its preference score.

    Recomputed on every ranking call; never mutated.
    """
    pairing: Pairing
    score: int
    matches: Tuple[str, ...] = ()

    @property
    def pairing_number(self) -> str:
        return self.pairing.pairing_number

    @property
    def departure_time(self) -> datetime:
        return self.pairing.departure_time

    @property
    def arrival_time(self) -> datetime:
        return self.pairing.arrival_time

    @property
    def block_hours_decimal(self) -> float:
        return self.pairing.block_hours_decimal

    @property
    def calendar_days(self) -> Tuple[date, ...]:
        return self.pairing.calendar_days

    @property
    def violations(self) -> List[str]:
        """Match tags that record a broken preference."""
        return [m for m in self.matches if m.endswith("(Violated)")]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize scored pairing to dictionary."""
        data = self.pairing.to_dict()
        data["score"] = self.score
        data["matches"] = list(self.matches)
        return data

    def __repr__(self) -> str:
        return f"ScoredPairing({self.pairing_number}, score={self.score})"

"""Generated schedule data model."""

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Iterable, Set, Tuple

from models.legal_rules import ScheduleRules
from models.network import rest_buffered_overlap
from models.pairing import ScoredPairing


@dataclass(frozen=True)
class ScheduleStatistics:
    """Aggregate figures for a generated schedule."""
    total_block_hours: float
    total_days_off: int
    flight_count: int


@dataclass(frozen=True)
class GeneratedSchedule:
    """
    One proposed month of flying produced by a single strategy.

    Pairings are ordered chronologically by departure.
    """
    id: str
    name: str
    description: str
    pairings: Tuple[ScoredPairing, ...]
    statistics: ScheduleStatistics

    @property
    def work_days(self) -> Set[date]:
        """Calendar days touched by any selected pairing."""
        days: Set[date] = set()
        for pairing in self.pairings:
            days.update(pairing.calendar_days)
        return days

    @property
    def is_empty(self) -> bool:
        return not self.pairings

    def verify_constraints(
        self,
        rules: ScheduleRules,
        blocked_dates: Iterable[date] = ()
    ) -> Dict[str, bool]:
        """
        Verify the hard constraints hold for this schedule.

        Returns dict of constraint_name -> satisfied
        """
        blocked = set(blocked_dates)
        selected = list(self.pairings)
        no_overlap = all(
            not rest_buffered_overlap(
                a.departure_time, a.arrival_time,
                b.departure_time, b.arrival_time,
                rules.min_rest_period
            )
            for i, a in enumerate(selected)
            for b in selected[i + 1:]
        )
        total = sum(p.block_hours_decimal for p in selected)

        return {
            "rest_between_trips": no_overlap,
            "block_hour_limit": total <= rules.max_monthly_block_hours + 1e-9,
            "blocked_dates_free": not (self.work_days & blocked),
            "score_floor": all(
                p.score >= rules.min_candidate_score for p in selected
            ),
            "chronological": all(
                a.departure_time <= b.departure_time
                for a, b in zip(selected, selected[1:])
            ),
        }

    def to_dict(self) -> Dict[str, Any]:
        """Serialize schedule to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "pairings": [p.to_dict() for p in self.pairings],
            "statistics": {
                "total_block_hours": self.statistics.total_block_hours,
                "total_days_off": self.statistics.total_days_off,
                "flight_count": self.statistics.flight_count,
            },
        }

    def print_summary(self) -> None:
        """Print a formatted summary of the schedule."""
        print("\n" + "=" * 60)
        print(f"  {self.name}")
        print("=" * 60)
        print(self.description)
        print(
            f"Block Hours: {self.statistics.total_block_hours:.2f}  "
            f"Days Off: {self.statistics.total_days_off}  "
            f"Trips: {self.statistics.flight_count}"
        )
        print()

        if not self.pairings:
            print("  No pairings fit the constraints for this plan.")
        for pairing in self.pairings:
            print(
                f"  {pairing.pairing_number:<8} "
                f"{pairing.departure_time.strftime('%m/%d %H:%M')}-"
                f"{pairing.arrival_time.strftime('%m/%d %H:%M')}  "
                f"{pairing.block_hours_decimal:>5.2f}h  "
                f"score {pairing.score:>5}  {pairing.pairing.details}"
            )

        print("=" * 60)

    def __repr__(self) -> str:
        return (
            f"GeneratedSchedule({self.id}, "
            f"trips={self.statistics.flight_count}, "
            f"block={self.statistics.total_block_hours:.2f}h)"
        )


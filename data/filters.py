"""Hard filters that narrow the pairing list before ranking."""

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Sequence

from models import Pairing


@dataclass
class PairingFilter:
    """
    Sidebar-style filters over the bid package.

    Empty aircraft_types and search_query mean "no restriction".
    Date bounds compare against the departure day, both ends inclusive.
    """
    min_duration: int = 1
    max_duration: int = 10
    aircraft_types: List[str] = field(default_factory=list)
    search_query: str = ""
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    min_block_hours: float = 0.0

    def matches(self, pairing: Pairing) -> bool:
        """Check a single pairing against every filter."""
        if not self.min_duration <= pairing.duration <= self.max_duration:
            return False

        if self.aircraft_types and pairing.aircraft_type not in self.aircraft_types:
            return False

        if self.search_query:
            target = (
                f"{pairing.pairing_number} {pairing.details} "
                f"{pairing.aircraft_type}"
            ).lower()
            if self.search_query.lower() not in target:
                return False

        departure_day = pairing.departure_time.date()
        if self.start_date and departure_day < self.start_date:
            return False
        if self.end_date and departure_day > self.end_date:
            return False

        if pairing.block_hours_decimal < self.min_block_hours:
            return False

        return True

    def apply(self, pairings: Sequence[Pairing]) -> List[Pairing]:
        """Pairings passing all filters, in input order."""
        return [p for p in pairings if self.matches(p)]


def aircraft_types(pairings: Sequence[Pairing]) -> List[str]:
    """Sorted distinct aircraft types in the package."""
    return sorted({p.aircraft_type for p in pairings})

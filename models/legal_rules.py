"""Monthly scheduling rules and limits model."""

from dataclasses import dataclass
from datetime import timedelta


@dataclass
class ScheduleRules:
    """
    Operational limits applied when building a monthly schedule.

    These rules decide which ranked pairings may be placed together.
    """
    # Monthly limits
    max_monthly_block_hours: float = 88.0
    days_in_month: int = 30

    # Rest between consecutive trips
    min_rest_period: timedelta = timedelta(hours=10)

    # Candidates scoring below this are never selected
    min_candidate_score: int = -100

    @property
    def min_rest_hours(self) -> float:
        """Minimum rest period in hours."""
        return self.min_rest_period.total_seconds() / 3600

    @classmethod
    def with_overrides(
        cls,
        max_monthly_block_hours: float = None,
        rest_hours: float = None
    ) -> 'ScheduleRules':
        """Build rules from optional command-line style overrides."""
        rules = cls()
        if max_monthly_block_hours is not None:
            rules.max_monthly_block_hours = max_monthly_block_hours
        if rest_hours is not None:
            rules.min_rest_period = timedelta(hours=rest_hours)
        return rules

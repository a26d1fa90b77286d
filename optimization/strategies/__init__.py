"""Named schedule-building strategies."""

from optimization.strategies.base import ScheduleStrategy
from optimization.strategies.plans import (
    MaxEarningsStrategy,
    LifestyleStrategy,
    WeekendsFreeStrategy,
    DEFAULT_STRATEGIES,
)

__all__ = [
    "ScheduleStrategy",
    "MaxEarningsStrategy",
    "LifestyleStrategy",
    "WeekendsFreeStrategy",
    "DEFAULT_STRATEGIES",
]

"""The three fixed planning strategies."""

from typing import List, Sequence

from models import Preference, PreferenceType
from optimization.strategies.base import ScheduleStrategy


class MaxEarningsStrategy(ScheduleStrategy):
    """Plan A: favour high block-hour trips."""

    name = "Plan A: Max Earnings"
    description = (
        "Prioritizes high block-hour trips to maximize pay, "
        "filling the schedule up to legal limits."
    )

    def augment(self, preferences: Sequence[Preference]) -> List[Preference]:
        effective = list(preferences)
        if not self.has_kind(effective, PreferenceType.STRATEGY_MONEY):
            effective.append(Preference(
                id="temp-money",
                type=PreferenceType.STRATEGY_MONEY,
                value="true",
                label="Temp Money"
            ))
        return effective


class LifestyleStrategy(ScheduleStrategy):
    """Plan B: favour short trips unless the pilot set a duration limit."""

    name = "Plan B: Lifestyle & Comfort"
    description = (
        "Prioritizes shorter trips and user preferences like "
        "specific routes or time windows."
    )
    default_max_days = 3

    def augment(self, preferences: Sequence[Preference]) -> List[Preference]:
        effective = list(preferences)
        if not self.has_kind(effective, PreferenceType.MAX_DURATION):
            effective.append(Preference(
                id="temp-dur",
                type=PreferenceType.MAX_DURATION,
                value=str(self.default_max_days),
                label="Temp Short Trips"
            ))
        return effective


class WeekendsFreeStrategy(ScheduleStrategy):
    """Plan C: always steer away from Saturdays and Sundays."""

    name = "Plan C: Weekends Free"
    description = "Attempts to keep Saturdays and Sundays free where possible."

    def augment(self, preferences: Sequence[Preference]) -> List[Preference]:
        return list(preferences) + [
            Preference(
                id="temp-weekend",
                type=PreferenceType.DAY_OF_WEEK_OFF,
                value="0",
                label="Sunday"
            ),
            Preference(
                id="temp-sat",
                type=PreferenceType.DAY_OF_WEEK_OFF,
                value="6",
                label="Saturday"
            ),
        ]


DEFAULT_STRATEGIES = (
    MaxEarningsStrategy(),
    LifestyleStrategy(),
    WeekendsFreeStrategy(),
)

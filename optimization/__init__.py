"""Ranking and schedule-construction engines."""

from optimization.rules import ScoreWeights, RuleOutcome, RULES
from optimization.ranking import RankingEngine, rank_pairings
from optimization.schedule_builder import ScheduleBuilder, generate_schedules
from optimization.strategies import (
    ScheduleStrategy,
    MaxEarningsStrategy,
    LifestyleStrategy,
    WeekendsFreeStrategy,
    DEFAULT_STRATEGIES,
)

__all__ = [
    "ScoreWeights",
    "RuleOutcome",
    "RULES",
    "RankingEngine",
    "rank_pairings",
    "ScheduleBuilder",
    "generate_schedules",
    "ScheduleStrategy",
    "MaxEarningsStrategy",
    "LifestyleStrategy",
    "WeekendsFreeStrategy",
    "DEFAULT_STRATEGIES",
]

"""Core data models for the pairing bid planner."""

from models.pairing import Pairing, ScoredPairing, span_days
from models.preference import (
    Preference,
    PreferenceType,
    TimeWindow,
    blocked_dates,
)
from models.legal_rules import ScheduleRules
from models.network import ConflictNetwork, rest_buffered_overlap
from models.schedule import GeneratedSchedule, ScheduleStatistics

__all__ = [
    "Pairing",
    "ScoredPairing",
    "span_days",
    "Preference",
    "PreferenceType",
    "TimeWindow",
    "blocked_dates",
    "ScheduleRules",
    "ConflictNetwork",
    "rest_buffered_overlap",
    "GeneratedSchedule",
    "ScheduleStatistics",
]

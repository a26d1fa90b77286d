"""Preference data model."""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Iterable, List, Optional, Union
import hashlib


class PreferenceType(str, Enum):
    """Kinds of pilot preference understood by the ranking engine."""
    STRATEGY_MONEY = "STRATEGY_MONEY"
    ROUTE = "ROUTE"
    TIME_WINDOW = "TIME_WINDOW"
    MAX_DURATION = "MAX_DURATION"
    MAX_LEGS_PER_DAY = "MAX_LEGS_PER_DAY"
    AVOID_RED_EYE = "AVOID_RED_EYE"
    AVOID_AIRPORT = "AVOID_AIRPORT"
    DAY_OF_WEEK_OFF = "DAY_OF_WEEK_OFF"
    SPECIFIC_DATE_OFF = "SPECIFIC_DATE_OFF"


WEEKDAY_NAMES = (
    "Sunday", "Monday", "Tuesday", "Wednesday",
    "Thursday", "Friday", "Saturday",
)


@dataclass(frozen=True)
class TimeWindow:
    """Inclusive departure-hour window decoded from "start-end"."""
    start_hour: int
    end_hour: int

    def contains(self, hour: int) -> bool:
        return self.start_hour <= hour <= self.end_hour


def _parse_int(text: str) -> Optional[int]:
    try:
        return int(text.strip())
    except (AttributeError, ValueError):
        return None


@dataclass(frozen=True)
class Preference:
    """
    A single ranking rule chosen by the pilot.

    Attributes:
        id: Unique preference identifier
        type: Preference kind (PreferenceType or its string value)
        value: Kind-specific parameter, stored as text
        label: Display name, not used for scoring
    """
    id: str
    type: Union[PreferenceType, str]
    value: str = ""
    label: str = ""

    @classmethod
    def create(
        cls,
        pref_type: Union[PreferenceType, str],
        value: str = "",
        label: Optional[str] = None
    ) -> 'Preference':
        """Factory method to create a preference with auto-generated ID."""
        kind = str(getattr(pref_type, "value", pref_type))
        digest = hashlib.md5(f"{kind}:{value}".encode()).hexdigest()[:8]
        try:
            pref_type = PreferenceType(kind)
        except ValueError:
            pass
        return cls(
            id=f"PREF_{digest}",
            type=pref_type,
            value=value,
            label=label if label is not None else default_label(kind, value)
        )

    @property
    def kind(self) -> Optional[PreferenceType]:
        """Known preference kind, or None for an unrecognised type."""
        try:
            return PreferenceType(self.type)
        except ValueError:
            return None

    def decode(self) -> Any:
        """
        Decode the text value into the parameter its kind expects.

        Returns None when the value is malformed or the kind is unknown;
        such a preference has no effect on ranking.
        """
        kind = self.kind
        if kind in (PreferenceType.STRATEGY_MONEY, PreferenceType.AVOID_RED_EYE):
            return True

        if kind in (PreferenceType.ROUTE, PreferenceType.AVOID_AIRPORT):
            station = (self.value or "").strip().upper()
            return station or None

        if kind == PreferenceType.TIME_WINDOW:
            parts = (self.value or "").split("-")
            if len(parts) != 2:
                return None
            start, end = _parse_int(parts[0]), _parse_int(parts[1])
            if start is None or end is None:
                return None
            return TimeWindow(start, end)

        if kind in (
            PreferenceType.MAX_DURATION,
            PreferenceType.MAX_LEGS_PER_DAY,
            PreferenceType.DAY_OF_WEEK_OFF,
        ):
            return _parse_int(self.value)

        if kind == PreferenceType.SPECIFIC_DATE_OFF:
            try:
                return date.fromisoformat((self.value or "").strip())
            except ValueError:
                return None

        return None

    def __repr__(self) -> str:
        kind = getattr(self.type, "value", self.type)
        return f"Preference({kind}={self.value!r})"


def default_label(kind: str, value: str) -> str:
    """Human-readable label for a preference."""
    if kind == PreferenceType.DAY_OF_WEEK_OFF.value:
        weekday = _parse_int(value)
        if weekday is not None and 0 <= weekday <= 6:
            return f"{WEEKDAY_NAMES[weekday]} off"
    if kind == PreferenceType.STRATEGY_MONEY.value:
        return "Maximize block hours"
    if kind == PreferenceType.AVOID_RED_EYE.value:
        return "Avoid red-eye arrivals"
    pretty = kind.replace("_", " ").title()
    return f"{pretty}: {value}" if value else pretty


def blocked_dates(preferences: Iterable[Preference]) -> List[date]:
    """Dates named by SPECIFIC_DATE_OFF preferences that decode cleanly."""
    dates = []
    for pref in preferences:
        if pref.kind == PreferenceType.SPECIFIC_DATE_OFF:
            decoded = pref.decode()
            if decoded is not None:
                dates.append(decoded)
    return dates

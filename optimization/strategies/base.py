"""Base class for schedule-building strategies."""

from abc import ABC, abstractmethod
from typing import List, Sequence
import re

from models import Preference, PreferenceType


class ScheduleStrategy(ABC):
    """
    Abstract base class for the named plans.

    A strategy only shapes the ranking by adding synthetic preferences;
    the greedy selection itself is shared.
    """

    name: str = ""
    description: str = ""

    @property
    def schedule_id(self) -> str:
        """Identifier derived from the plan name."""
        return re.sub(r"\s", "-", self.name.lower())

    @abstractmethod
    def augment(self, preferences: Sequence[Preference]) -> List[Preference]:
        """
        Build the effective preference list for this plan.

        Args:
            preferences: The pilot's own preferences

        Returns:
            A new list; the input is left untouched
        """
        pass

    @staticmethod
    def has_kind(
        preferences: Sequence[Preference],
        kind: PreferenceType
    ) -> bool:
        """Check if any preference is of the given kind."""
        return any(p.kind == kind for p in preferences)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

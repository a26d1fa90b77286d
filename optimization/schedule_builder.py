"""Greedy monthly schedule construction."""

from collections import Counter
from typing import Dict, List, Optional, Sequence
import logging

from models import (
    ConflictNetwork,
    GeneratedSchedule,
    Pairing,
    Preference,
    ScheduleRules,
    ScheduleStatistics,
    ScoredPairing,
    blocked_dates,
)
from optimization.ranking import RankingEngine
from optimization.rules import ScoreWeights
from optimization.strategies import DEFAULT_STRATEGIES, ScheduleStrategy

logger = logging.getLogger(__name__)


class ScheduleBuilder:
    """
    Builds one proposed schedule per strategy.

    Each plan ranks the pairings with its own effective preferences, then
    walks them best first and keeps every candidate that still fits the
    hard constraints. This is a first-fit greedy pass, not an optimizer.
    """

    def __init__(
        self,
        rules: Optional[ScheduleRules] = None,
        weights: Optional[ScoreWeights] = None,
        strategies: Sequence[ScheduleStrategy] = DEFAULT_STRATEGIES
    ):
        self.rules = rules or ScheduleRules()
        self.ranking = RankingEngine(weights)
        self.strategies = list(strategies)

    def build(
        self,
        pairings: Sequence[Pairing],
        strategy: ScheduleStrategy,
        preferences: Sequence[Preference]
    ) -> GeneratedSchedule:
        """
        Build a single schedule for one strategy.

        Args:
            pairings: Candidate pairings
            strategy: Plan supplying the effective preferences
            preferences: The pilot's original preferences; only these
                can hard-block a date

        Returns:
            GeneratedSchedule, possibly with no pairings
        """
        effective = strategy.augment(preferences)
        candidates = self.ranking.rank(pairings, effective)

        # Synthetic day-off rules only shape the score, never block
        blocked = set(blocked_dates(preferences))
        network = ConflictNetwork(candidates, self.rules.min_rest_period)

        selected: List[int] = []
        block_hours = 0.0
        rejections: Counter = Counter()

        for node, candidate in enumerate(candidates):
            reason = self._rejection_reason(
                node, candidate, block_hours, blocked, network, selected
            )
            if reason:
                rejections[reason] += 1
                logger.debug(
                    f"{strategy.schedule_id}: skip {candidate.pairing_number} "
                    f"(score {candidate.score}): {reason}"
                )
                continue

            selected.append(node)
            block_hours += candidate.block_hours_decimal

        chosen = sorted(
            (candidates[node] for node in selected),
            key=lambda p: p.departure_time
        )
        statistics = self._compute_statistics(chosen, block_hours)

        logger.info(
            f"{strategy.name}: {statistics.flight_count} trips, "
            f"{statistics.total_block_hours:.2f} block hours, "
            f"{statistics.total_days_off} days off"
        )
        if rejections:
            logger.debug(f"{strategy.schedule_id} rejections: {dict(rejections)}")

        return GeneratedSchedule(
            id=strategy.schedule_id,
            name=strategy.name,
            description=strategy.description,
            pairings=tuple(chosen),
            statistics=statistics
        )

    def _rejection_reason(
        self,
        node: int,
        candidate: ScoredPairing,
        block_hours: float,
        blocked: set,
        network: ConflictNetwork,
        selected: List[int]
    ) -> Optional[str]:
        """Name the first hard constraint the candidate breaks, if any."""
        if block_hours + candidate.block_hours_decimal > self.rules.max_monthly_block_hours:
            return "block_hour_limit"

        if blocked.intersection(candidate.calendar_days):
            return "blocked_date"

        if network.has_conflict(node, selected):
            return "rest_overlap"

        if candidate.score < self.rules.min_candidate_score:
            return "score_floor"

        return None

    def _compute_statistics(
        self,
        chosen: Sequence[ScoredPairing],
        block_hours: float
    ) -> ScheduleStatistics:
        """Aggregate block hours, days off and trip count."""
        work_days = set()
        for pairing in chosen:
            work_days.update(pairing.calendar_days)

        return ScheduleStatistics(
            total_block_hours=round(block_hours, 2),
            total_days_off=max(self.rules.days_in_month - len(work_days), 0),
            flight_count=len(chosen)
        )

    def generate(
        self,
        pairings: Sequence[Pairing],
        preferences: Sequence[Preference]
    ) -> List[GeneratedSchedule]:
        """
        Build one schedule per configured strategy.

        Returns an empty list when there are no pairings.
        """
        if not pairings:
            logger.info("No pairings supplied; no schedules generated")
            return []

        return [
            self.build(pairings, strategy, preferences)
            for strategy in self.strategies
        ]

    def compare(self, schedules: Sequence[GeneratedSchedule]) -> Dict[str, Dict[str, float]]:
        """Side-by-side statistics keyed by schedule id."""
        return {
            s.id: {
                "total_block_hours": s.statistics.total_block_hours,
                "total_days_off": s.statistics.total_days_off,
                "flight_count": s.statistics.flight_count,
            }
            for s in schedules
        }


def generate_schedules(
    pairings: Sequence[Pairing],
    preferences: Sequence[Preference],
    rules: Optional[ScheduleRules] = None,
    weights: Optional[ScoreWeights] = None
) -> List[GeneratedSchedule]:
    """Generate the three standard plans."""
    return ScheduleBuilder(rules, weights).generate(pairings, preferences)

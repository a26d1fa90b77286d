"""Preference-based ranking of pairings."""

from typing import Any, List, Optional, Sequence, Tuple
import logging

from models import Pairing, Preference, ScoredPairing
from optimization.rules import RULES, Rule, ScoreWeights

logger = logging.getLogger(__name__)


class RankingEngine:
    """
    Scores pairings against a list of preferences.

    Every preference is applied independently and additively; two copies
    of the same preference count twice. Preferences with unknown kinds or
    malformed values contribute nothing.
    """

    def __init__(self, weights: Optional[ScoreWeights] = None):
        self.weights = weights or ScoreWeights()

    def compile(
        self,
        preferences: Sequence[Preference]
    ) -> List[Tuple[Preference, Rule, Any]]:
        """Decode each preference once and pair it with its rule."""
        compiled = []
        for pref in preferences:
            kind = pref.kind
            if kind is None:
                logger.debug(f"Ignoring preference with unknown type: {pref}")
                continue
            param = pref.decode()
            if param is None:
                logger.debug(f"Ignoring malformed preference value: {pref}")
                continue
            compiled.append((pref, RULES[kind], param))
        return compiled

    def score(
        self,
        pairing: Pairing,
        compiled: Sequence[Tuple[Preference, Rule, Any]]
    ) -> ScoredPairing:
        """Score a single pairing against compiled preferences."""
        days = pairing.calendar_days
        total = 0
        matches: List[str] = []

        for _, rule, param in compiled:
            outcome = rule(pairing, days, param, self.weights)
            total += outcome.score_delta
            if outcome.tag and outcome.tag not in matches:
                matches.append(outcome.tag)

        return ScoredPairing(pairing=pairing, score=total, matches=tuple(matches))

    def rank(
        self,
        pairings: Sequence[Pairing],
        preferences: Sequence[Preference]
    ) -> List[ScoredPairing]:
        """
        Score all pairings and sort them best first.

        Args:
            pairings: Candidate pairings
            preferences: Pilot preferences to apply

        Returns:
            Scored pairings by descending score; ties keep input order
        """
        compiled = self.compile(preferences)
        scored = [self.score(p, compiled) for p in pairings]
        scored.sort(key=lambda s: -s.score)

        logger.debug(
            f"Ranked {len(scored)} pairings with "
            f"{len(compiled)}/{len(preferences)} active preferences"
        )
        return scored


def rank_pairings(
    pairings: Sequence[Pairing],
    preferences: Sequence[Preference],
    weights: Optional[ScoreWeights] = None
) -> List[ScoredPairing]:
    """Rank pairings with a fresh engine."""
    return RankingEngine(weights).rank(pairings, preferences)

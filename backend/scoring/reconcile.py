"""
Inter-club score cross-checking.

When both clubs record statistics for the same game, each side's goals-for must
equal the other side's goals-against. Mismatches are reported, and a single
scoreline can be reconciled from the two recordings with a chosen strategy.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Dict, List, Optional

from scoring.quarters import QUARTERS, Quarter, QuarterScores


@dataclass(frozen=True)
class TeamTotals:
    team_id: int
    goals_for: int
    goals_against: int


@dataclass(frozen=True)
class ScoreMismatch:
    home: TeamTotals
    away: TeamTotals
    home_discrepancy: int
    away_discrepancy: int

    @property
    def is_valid(self) -> bool:
        return self.home_discrepancy == 0 and self.away_discrepancy == 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "home_team_id": self.home.team_id,
            "away_team_id": self.away.team_id,
            "home_discrepancy": self.home_discrepancy,
            "away_discrepancy": self.away_discrepancy,
            "is_valid": self.is_valid,
        }


class ReconcileStrategy(StrEnum):
    HOME_PRIORITY = "home-priority"
    AWAY_PRIORITY = "away-priority"
    HIGHER = "higher"
    LOWER = "lower"
    AVERAGE = "average"


@dataclass(frozen=True)
class ReconciledScore:
    home_score: int
    away_score: int
    method: str


def validate_inter_club_scores(home: TeamTotals, away: TeamTotals) -> ScoreMismatch:
    return ScoreMismatch(
        home=home,
        away=away,
        home_discrepancy=home.goals_for - away.goals_against,
        away_discrepancy=away.goals_for - home.goals_against,
    )


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def reconcile_scores(
    home: TeamTotals,
    away: TeamTotals,
    strategy: ReconcileStrategy = ReconcileStrategy.HOME_PRIORITY,
) -> ReconciledScore:
    """Pick one scoreline from two recordings. Consistent recordings always return 'exact-match'."""
    if validate_inter_club_scores(home, away).is_valid:
        return ReconciledScore(home.goals_for, away.goals_for, "exact-match")

    strategy = ReconcileStrategy(strategy)
    if strategy is ReconcileStrategy.HOME_PRIORITY:
        return ReconciledScore(home.goals_for, home.goals_against, "home-team-priority")
    if strategy is ReconcileStrategy.AWAY_PRIORITY:
        return ReconciledScore(away.goals_against, away.goals_for, "away-team-priority")
    if strategy is ReconcileStrategy.HIGHER:
        return ReconciledScore(
            max(home.goals_for, away.goals_against),
            max(away.goals_for, home.goals_against),
            "higher-value",
        )
    if strategy is ReconcileStrategy.LOWER:
        return ReconciledScore(
            min(home.goals_for, away.goals_against),
            min(away.goals_for, home.goals_against),
            "lower-value",
        )
    return ReconciledScore(
        _round_half_up((home.goals_for + away.goals_against) / 2),
        _round_half_up((away.goals_for + home.goals_against) / 2),
        "averaged",
    )


def discrepancy_warning(mismatch: ScoreMismatch) -> Optional[str]:
    if mismatch.is_valid:
        return None
    return (
        f"Score mismatch detected: Home team discrepancy: {mismatch.home_discrepancy}, "
        f"Away team discrepancy: {mismatch.away_discrepancy}"
    )


def quarter_mismatches(home_scores: QuarterScores, away_scores: QuarterScores) -> List[Quarter]:
    """Quarters where the home recording does not mirror the away recording."""
    mismatched: List[Quarter] = []
    for quarter in QUARTERS:
        h = home_scores[quarter]
        a = away_scores[quarter]
        if h.goals_for != a.goals_against or a.goals_for != h.goals_against:
            mismatched.append(quarter)
    return mismatched

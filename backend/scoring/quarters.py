"""
Per-quarter score aggregation. Pure; no I/O.
Every aggregation yields all four quarters, zero-filled when a quarter has no records.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterable, Optional, Protocol


class Quarter(IntEnum):
    Q1 = 1
    Q2 = 2
    Q3 = 3
    Q4 = 4


QUARTERS = tuple(Quarter)


class StatLike(Protocol):
    """Anything carrying a quarter and goal counts (StatRecord, GameStat rows)."""

    quarter: int
    goals_for: Optional[int]
    goals_against: Optional[int]


@dataclass(frozen=True)
class StatRecord:
    """One recorded statistics entry for a player/position within a quarter."""

    quarter: int
    goals_for: Optional[int] = 0
    goals_against: Optional[int] = 0


@dataclass(frozen=True)
class QuarterScore:
    goals_for: int = 0
    goals_against: int = 0

    def __add__(self, other: "QuarterScore") -> "QuarterScore":
        return QuarterScore(
            goals_for=self.goals_for + other.goals_for,
            goals_against=self.goals_against + other.goals_against,
        )

    def to_dict(self) -> Dict[str, int]:
        return {"for": self.goals_for, "against": self.goals_against}


QuarterScores = Dict[Quarter, QuarterScore]


def aggregate_quarter_scores(records: Iterable[StatLike]) -> QuarterScores:
    """
    Sum goals for/against per quarter.
    Records with quarter outside 1-4 are dropped; None goal counts count as 0.
    """
    records = list(records)
    scores: QuarterScores = {}
    for quarter in QUARTERS:
        in_quarter = [r for r in records if r.quarter == quarter]
        scores[quarter] = QuarterScore(
            goals_for=sum(r.goals_for or 0 for r in in_quarter),
            goals_against=sum(r.goals_against or 0 for r in in_quarter),
        )
    return scores


def quarter_scores_to_dict(scores: QuarterScores) -> Dict[str, Dict[str, int]]:
    """JSON shape keyed by quarter number as string: {"1": {"for": .., "against": ..}, ...}."""
    return {str(int(q)): scores[q].to_dict() for q in QUARTERS}


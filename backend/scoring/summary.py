"""Final score and the composed stats -> scores -> result pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable

from scoring.quarters import (
    QUARTERS,
    QuarterScore,
    QuarterScores,
    StatLike,
    aggregate_quarter_scores,
    quarter_scores_to_dict,
)
from scoring.result import GameResult, classify_result


def summarize_final_score(quarter_scores: QuarterScores) -> QuarterScore:
    total = QuarterScore()
    for quarter in QUARTERS:
        total = total + quarter_scores[quarter]
    return total


@dataclass(frozen=True)
class GameScores:
    quarter_scores: QuarterScores
    final_score: QuarterScore

    @property
    def result(self) -> GameResult:
        return classify_result(self.final_score)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "quarter_scores": quarter_scores_to_dict(self.quarter_scores),
            "final_score": self.final_score.to_dict(),
            "result": self.result.value,
        }


def compute_game_scores(records: Iterable[StatLike]) -> GameScores:
    """Aggregate records into quarter scores and their final score."""
    quarter_scores = aggregate_quarter_scores(records)
    return GameScores(
        quarter_scores=quarter_scores,
        final_score=summarize_final_score(quarter_scores),
    )

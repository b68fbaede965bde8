"""
Scoring core: stat records -> per-quarter scores -> final score -> result.
Pure and synchronous; safe to call from any number of concurrent requests.
"""

from __future__ import annotations

from scoring.quarters import (
    QUARTERS,
    Quarter,
    QuarterScore,
    QuarterScores,
    StatRecord,
    aggregate_quarter_scores,
    quarter_scores_to_dict,
)
from scoring.result import GameResult, classify_result, classify_scoreline
from scoring.summary import GameScores, compute_game_scores, summarize_final_score

__all__ = [
    "QUARTERS",
    "Quarter",
    "QuarterScore",
    "QuarterScores",
    "StatRecord",
    "aggregate_quarter_scores",
    "quarter_scores_to_dict",
    "GameResult",
    "classify_result",
    "classify_scoreline",
    "GameScores",
    "compute_game_scores",
    "summarize_final_score",
]

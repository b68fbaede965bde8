"""Win/Loss/Draw classification of a final score."""

from __future__ import annotations

from enum import StrEnum

from scoring.quarters import QuarterScore


class GameResult(StrEnum):
    WIN = "Win"
    LOSS = "Loss"
    DRAW = "Draw"


def classify_result(final_score: QuarterScore) -> GameResult:
    # Negative counts are not rejected here; input validation happens upstream.
    if final_score.goals_for > final_score.goals_against:
        return GameResult.WIN
    if final_score.goals_for < final_score.goals_against:
        return GameResult.LOSS
    return GameResult.DRAW


def classify_scoreline(team_score: int, opponent_score: int) -> GameResult:
    return classify_result(QuarterScore(goals_for=team_score, goals_against=opponent_score))

"""
Team win rate over completed games. Pure; the caller supplies games and their scores.

Score sources, first available wins: official quarter scores, the team's recorded stats,
the status' fixed score (forfeits). Byes, games not involving the team, incomplete games
and games with no score from any source are not counted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional, Sequence

from scoring.quarters import StatLike
from scoring.result import GameResult, classify_scoreline
from scoring.summary import compute_game_scores


@dataclass(frozen=True)
class GameOutcome:
    """A game as seen by the win-rate calculation. Goal pairs are home/away."""

    game_id: int
    home_team_id: int
    away_team_id: Optional[int]
    is_completed: bool
    is_bye: bool = False
    official_home_goals: Optional[int] = None
    official_away_goals: Optional[int] = None
    status_home_goals: Optional[int] = None
    status_away_goals: Optional[int] = None
    # Stat records recorded by the team whose win rate is being computed.
    team_stats: Sequence[StatLike] = field(default_factory=tuple)

    @property
    def is_bye_fixture(self) -> bool:
        return self.is_bye or self.away_team_id is None


@dataclass
class WinRateResult:
    wins: int = 0
    losses: int = 0
    draws: int = 0

    @property
    def total_games(self) -> int:
        return self.wins + self.losses + self.draws

    @property
    def win_rate(self) -> float:
        if self.total_games == 0:
            return 0.0
        return self.wins / self.total_games * 100

    def to_dict(self) -> Dict[str, Any]:
        return {
            "wins": self.wins,
            "losses": self.losses,
            "draws": self.draws,
            "total_games": self.total_games,
            "win_rate": round(self.win_rate, 2),
        }


def _oriented(home_goals: int, away_goals: int, is_home: bool) -> GameResult:
    if is_home:
        return classify_scoreline(home_goals, away_goals)
    return classify_scoreline(away_goals, home_goals)


def game_result_for_team(game: GameOutcome, team_id: int) -> Optional[GameResult]:
    """Result from the first available score source, or None when the game has no valid score."""
    is_home = game.home_team_id == team_id
    if game.official_home_goals is not None and game.official_away_goals is not None:
        return _oriented(game.official_home_goals, game.official_away_goals, is_home)
    if game.team_stats:
        return compute_game_scores(game.team_stats).result
    if game.status_home_goals is not None and game.status_away_goals is not None:
        return _oriented(game.status_home_goals, game.status_away_goals, is_home)
    return None


def calculate_team_win_rate(games: Iterable[GameOutcome], team_id: int) -> WinRateResult:
    result = WinRateResult()
    for game in games:
        if not game.is_completed or game.is_bye_fixture:
            continue
        if team_id not in (game.home_team_id, game.away_team_id):
            continue
        outcome = game_result_for_team(game, team_id)
        if outcome is None:
            continue
        if outcome is GameResult.WIN:
            result.wins += 1
        elif outcome is GameResult.LOSS:
            result.losses += 1
        else:
            result.draws += 1
    return result

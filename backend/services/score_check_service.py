"""
Data-quality checks over recorded scores.

check_missing_scores: which of a team's completed games lack official quarter scores.
check_stat_consistency: whether both teams' recorded stats for a game cross-check.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from repositories.game_repo import GameRepository
from repositories.game_score_repo import GameScoreRepository
from repositories.game_stat_repo import GameStatRepository
from repositories.team_repo import TeamRepository
from scoring import QUARTERS, compute_game_scores
from scoring.reconcile import (
    ReconcileStrategy,
    TeamTotals,
    discrepancy_warning,
    quarter_mismatches,
    reconcile_scores,
    validate_inter_club_scores,
)
from services.game_score_service import FULL_SCORE_ENTRIES

logger = logging.getLogger(__name__)


@dataclass
class ScoreCoverage:
    """Official score coverage of one completed game."""

    game_id: int
    date: str
    round: Optional[str]
    opponent_name: Optional[str]
    status_name: str
    score_count: int
    missing_quarters: List[int] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "game_id": self.game_id,
            "date": self.date,
            "round": self.round,
            "opponent_name": self.opponent_name,
            "status_name": self.status_name,
            "score_count": self.score_count,
            "missing_quarters": self.missing_quarters,
        }


@dataclass
class ScoreCheckReport:
    team_id: int
    without_scores: List[ScoreCoverage] = field(default_factory=list)
    incomplete: List[ScoreCoverage] = field(default_factory=list)
    complete: List[ScoreCoverage] = field(default_factory=list)

    @property
    def total_games(self) -> int:
        return len(self.without_scores) + len(self.incomplete) + len(self.complete)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "team_id": self.team_id,
            "total_completed_games": self.total_games,
            "without_scores": [c.to_dict() for c in self.without_scores],
            "incomplete": [c.to_dict() for c in self.incomplete],
            "complete": [c.to_dict() for c in self.complete],
        }


async def check_missing_scores(session: AsyncSession, team_id: int) -> ScoreCheckReport:
    """
    Classify the team's completed games by official score coverage:
    none entered, fewer than 8 entries (quarter x team), or complete.
    A quarter is missing unless both teams have an entry for it. Byes are skipped.
    """
    team_repo = TeamRepository(session)
    team = await team_repo.get_by_id(team_id)
    if team is None:
        raise ValueError(f"team {team_id} not found")

    games = await GameRepository(session).list_for_team(team_id, completed_only=True)
    score_repo = GameScoreRepository(session)
    counts = await score_repo.count_by_game(g.id for g, _ in games)
    names = await team_repo.names_by_id(g.opponent_of(team_id) for g, _ in games)

    report = ScoreCheckReport(team_id=team_id)
    for game, status in games:
        if game.is_bye_fixture(status.name):
            continue
        opponent_id = game.opponent_of(team_id)
        coverage = ScoreCoverage(
            game_id=game.id,
            date=game.date,
            round=game.round,
            opponent_name=names.get(opponent_id) if opponent_id is not None else None,
            status_name=status.name,
            score_count=counts.get(game.id, 0),
        )
        if coverage.score_count == 0:
            coverage.missing_quarters = [int(q) for q in QUARTERS]
            report.without_scores.append(coverage)
        elif coverage.score_count < FULL_SCORE_ENTRIES:
            rows = await score_repo.list_for_game(game.id)
            entered: Dict[int, set] = {}
            for row in rows:
                entered.setdefault(row.quarter, set()).add(row.team_id)
            expected = {game.home_team_id, game.away_team_id} - {None}
            coverage.missing_quarters = [
                int(q) for q in QUARTERS if not expected <= entered.get(int(q), set())
            ]
            report.incomplete.append(coverage)
        else:
            report.complete.append(coverage)

    logger.info(
        "Score check team=%s completed=%d missing=%d incomplete=%d",
        team_id, report.total_games, len(report.without_scores), len(report.incomplete),
    )
    return report


async def check_stat_consistency(
    session: AsyncSession,
    game_id: int,
    strategy: ReconcileStrategy = ReconcileStrategy.HOME_PRIORITY,
) -> Dict[str, Any]:
    """Cross-check the home and away teams' recorded stats for one game."""
    game = await GameRepository(session).get_by_id(game_id)
    if game is None:
        raise ValueError(f"game {game_id} not found")

    stat_repo = GameStatRepository(session)
    home_stats = await stat_repo.list_for_game(game_id, team_id=game.home_team_id)
    # a bye has no opponent, so there is nothing to cross-check
    is_bye = game.is_bye_fixture()
    away_stats = [] if is_bye else await stat_repo.list_for_game(game_id, team_id=game.away_team_id)
    if not home_stats or not away_stats:
        return {
            "game_id": game_id,
            "is_bye": is_bye,
            "has_both_recordings": False,
            "home_stat_count": len(home_stats),
            "away_stat_count": len(away_stats),
        }

    home_scores = compute_game_scores(home_stats)
    away_scores = compute_game_scores(away_stats)
    home = TeamTotals(game.home_team_id, home_scores.final_score.goals_for, home_scores.final_score.goals_against)
    away = TeamTotals(game.away_team_id, away_scores.final_score.goals_for, away_scores.final_score.goals_against)
    mismatch = validate_inter_club_scores(home, away)
    reconciled = reconcile_scores(home, away, strategy)
    warning = discrepancy_warning(mismatch)
    if warning:
        logger.warning("game=%s %s", game_id, warning)

    return {
        "game_id": game_id,
        "is_bye": False,
        "has_both_recordings": True,
        **mismatch.to_dict(),
        "mismatched_quarters": [int(q) for q in quarter_mismatches(home_scores.quarter_scores, away_scores.quarter_scores)],
        "warning": warning,
        "reconciled": {
            "home_score": reconciled.home_score,
            "away_score": reconciled.away_score,
            "method": reconciled.method,
        },
    }

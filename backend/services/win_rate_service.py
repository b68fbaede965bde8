"""Team win rate from completed games: official scores, then recorded stats, then the status score."""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from repositories.game_repo import GameRepository
from repositories.game_score_repo import GameScoreRepository
from repositories.game_stat_repo import GameStatRepository
from repositories.team_repo import TeamRepository
from scoring import compute_game_scores
from scoring.win_rate import GameOutcome, calculate_team_win_rate
from services.game_score_service import official_records_for_home


async def get_team_win_rate(session: AsyncSession, team_id: int) -> Dict[str, Any]:
    team = await TeamRepository(session).get_by_id(team_id)
    if team is None:
        raise ValueError(f"team {team_id} not found")

    games = await GameRepository(session).list_for_team(team_id, completed_only=True)
    game_ids = [g.id for g, _ in games]
    stats_by_game = await GameStatRepository(session).list_for_games(game_ids, team_id)
    official_by_game = await GameScoreRepository(session).list_for_games(game_ids)

    outcomes = []
    for game, status in games:
        official: Tuple[Optional[int], Optional[int]] = (None, None)
        rows = official_by_game.get(game.id)
        if rows:
            final = compute_game_scores(official_records_for_home(game, rows)).final_score
            official = (final.goals_for, final.goals_against)
        outcomes.append(GameOutcome(
            game_id=game.id,
            home_team_id=game.home_team_id,
            away_team_id=game.away_team_id,
            is_completed=status.is_completed,
            is_bye=game.is_bye_fixture(status.name),
            official_home_goals=official[0],
            official_away_goals=official[1],
            status_home_goals=status.home_team_goals,
            status_away_goals=status.away_team_goals,
            team_stats=tuple(stats_by_game.get(game.id, ())),
        ))
    return {"team_id": team_id, **calculate_team_win_rate(outcomes, team_id).to_dict()}

"""
Game scores: derived from recorded stats (per team) and official quarter scores (per game).
Raises ValueError for unknown games/teams; routes map that to 404.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from models.game import Game
from models.game_score import GameScore
from models.game_stat import GameStat
from repositories.game_repo import GameRepository
from repositories.game_score_repo import GameScoreRepository
from repositories.game_stat_repo import GameStatRepository
from scoring import StatRecord, compute_game_scores

logger = logging.getLogger(__name__)

FULL_SCORE_ENTRIES = 8  # 4 quarters x 2 teams

STAT_COUNTERS = (
    "goals_for",
    "goals_against",
    "missed_goals",
    "rebounds",
    "intercepts",
    "bad_pass",
    "handling_error",
    "pick_up",
    "infringement",
)


async def _load_game(session: AsyncSession, game_id: int) -> Game:
    game = await GameRepository(session).get_by_id(game_id)
    if game is None:
        raise ValueError(f"game {game_id} not found")
    return game


def _require_participant(game: Game, team_id: int) -> None:
    if not game.involves(team_id):
        raise ValueError(f"team {team_id} did not play in game {game.id}")


async def get_team_game_scores(session: AsyncSession, game_id: int, team_id: int) -> Dict[str, Any]:
    """Quarter scores, final score and result from the stats one team recorded for a game."""
    game = await _load_game(session, game_id)
    _require_participant(game, team_id)

    stats = await GameStatRepository(session).list_for_game(game_id, team_id=team_id)
    scores = compute_game_scores(stats)
    logger.debug("game=%s team=%s stats=%d final=%s", game_id, team_id, len(stats), scores.final_score)
    return {
        "game_id": game_id,
        "team_id": team_id,
        "stat_count": len(stats),
        **scores.to_dict(),
    }


def official_records_for_home(game: Game, rows: Iterable[GameScore]) -> List[StatRecord]:
    """Official rows as home-perspective records: home score is 'for', away score is 'against'."""
    records: List[StatRecord] = []
    for row in rows:
        if row.team_id == game.home_team_id:
            records.append(StatRecord(quarter=row.quarter, goals_for=row.score, goals_against=0))
        elif row.team_id == game.away_team_id:
            records.append(StatRecord(quarter=row.quarter, goals_for=0, goals_against=row.score))
    return records


async def get_official_scores(session: AsyncSession, game_id: int) -> Dict[str, Any]:
    game = await _load_game(session, game_id)
    rows = await GameScoreRepository(session).list_for_game(game_id)
    scores = compute_game_scores(official_records_for_home(game, rows))
    return {
        "game_id": game_id,
        "home_team_id": game.home_team_id,
        "away_team_id": game.away_team_id,
        "entries": len(rows),
        "is_complete": len(rows) >= FULL_SCORE_ENTRIES,
        "quarter_scores": {
            q: {"home": s["for"], "away": s["against"]}
            for q, s in scores.to_dict()["quarter_scores"].items()
        },
        "home_total": scores.final_score.goals_for,
        "away_total": scores.final_score.goals_against,
        "home_result": scores.result.value,
    }


async def record_official_scores(
    session: AsyncSession,
    game_id: int,
    entries: Iterable[Tuple[int, int, int]],
    notes: Optional[str] = None,
) -> int:
    """Upsert official (team_id, quarter, score) entries. Returns the number written."""
    game = await _load_game(session, game_id)
    repo = GameScoreRepository(session)
    now = datetime.now(timezone.utc)
    written = 0
    for team_id, quarter, score in entries:
        _require_participant(game, team_id)
        row = await repo.get_entry(game_id, team_id, quarter)
        if row is None:
            await repo.add(GameScore(
                game_id=game_id,
                team_id=team_id,
                quarter=quarter,
                score=score,
                notes=notes,
                entered_at_utc=now,
            ))
        else:
            row.score = score
            row.notes = notes
            row.entered_at_utc = now
        written += 1
    await session.flush()
    logger.info("Recorded %d official score entries for game %s", written, game_id)
    return written


async def record_stat(
    session: AsyncSession,
    game_id: int,
    team_id: int,
    position: str,
    quarter: int,
    counters: Dict[str, int],
    rating: Optional[int] = None,
) -> GameStat:
    """Create or replace the stat row for (game, team, position, quarter)."""
    game = await _load_game(session, game_id)
    _require_participant(game, team_id)

    repo = GameStatRepository(session)
    stat = await repo.get_slot(game_id, team_id, position, quarter)
    is_new = stat is None
    if is_new:
        stat = GameStat(game_id=game_id, team_id=team_id, position=position, quarter=quarter)
    for name in STAT_COUNTERS:
        setattr(stat, name, counters.get(name) or 0)
    stat.rating = rating
    if is_new:
        await repo.add(stat)
    else:
        await session.flush()
    return stat

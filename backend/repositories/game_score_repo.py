from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from sqlalchemy import func, select

from models.game_score import GameScore
from .base import BaseRepository


class GameScoreRepository(BaseRepository[GameScore]):
    """Repository for official GameScore rows."""

    model = GameScore

    async def list_for_game(self, game_id: int) -> List[GameScore]:
        stmt = (
            select(GameScore)
            .where(GameScore.game_id == game_id)
            .order_by(GameScore.quarter, GameScore.team_id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_entry(self, game_id: int, team_id: int, quarter: int) -> Optional[GameScore]:
        stmt = (
            select(GameScore)
            .where(GameScore.game_id == game_id)
            .where(GameScore.team_id == team_id)
            .where(GameScore.quarter == quarter)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def count_by_game(self, game_ids: Iterable[int]) -> Dict[int, int]:
        """Number of official score rows per game (games without rows map to 0)."""
        ids = list(game_ids)
        counts: Dict[int, int] = {i: 0 for i in ids}
        if not ids:
            return counts
        stmt = (
            select(GameScore.game_id, func.count(GameScore.id))
            .where(GameScore.game_id.in_(ids))
            .group_by(GameScore.game_id)
        )
        result = await self.session.execute(stmt)
        for game_id, count in result.all():
            counts[game_id] = count
        return counts

    async def list_for_games(self, game_ids: Iterable[int]) -> Dict[int, List[GameScore]]:
        """Official score rows grouped by game id (games without rows map to [])."""
        ids = list(game_ids)
        grouped: Dict[int, List[GameScore]] = {i: [] for i in ids}
        if not ids:
            return grouped
        stmt = (
            select(GameScore)
            .where(GameScore.game_id.in_(ids))
            .order_by(GameScore.game_id, GameScore.quarter, GameScore.team_id)
        )
        result = await self.session.execute(stmt)
        for row in result.scalars().all():
            grouped[row.game_id].append(row)
        return grouped

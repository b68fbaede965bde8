from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from sqlalchemy import select

from models.game_stat import GameStat
from .base import BaseRepository


class GameStatRepository(BaseRepository[GameStat]):
    """Repository for GameStat entities."""

    model = GameStat

    async def list_for_game(self, game_id: int, team_id: Optional[int] = None) -> List[GameStat]:
        stmt = select(GameStat).where(GameStat.game_id == game_id)
        if team_id is not None:
            stmt = stmt.where(GameStat.team_id == team_id)
        stmt = stmt.order_by(GameStat.quarter, GameStat.position)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_for_games(self, game_ids: Iterable[int], team_id: int) -> Dict[int, List[GameStat]]:
        """Stats recorded by one team, grouped by game id."""
        ids = list(game_ids)
        grouped: Dict[int, List[GameStat]] = {i: [] for i in ids}
        if not ids:
            return grouped
        stmt = (
            select(GameStat)
            .where(GameStat.game_id.in_(ids))
            .where(GameStat.team_id == team_id)
        )
        result = await self.session.execute(stmt)
        for stat in result.scalars().all():
            grouped[stat.game_id].append(stat)
        return grouped

    async def get_slot(
        self, game_id: int, team_id: int, position: str, quarter: int
    ) -> Optional[GameStat]:
        stmt = (
            select(GameStat)
            .where(GameStat.game_id == game_id)
            .where(GameStat.team_id == team_id)
            .where(GameStat.position == position)
            .where(GameStat.quarter == quarter)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

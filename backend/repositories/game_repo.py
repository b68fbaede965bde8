from __future__ import annotations

from typing import List, Tuple

from sqlalchemy import or_, select

from models.game import Game
from models.game_status import GameStatus
from .base import BaseRepository


class GameRepository(BaseRepository[Game]):
    """Repository for Game entities."""

    model = Game

    async def list_for_team(
        self, team_id: int, completed_only: bool = False
    ) -> List[Tuple[Game, GameStatus]]:
        """Games the team plays in (home or away) with their status, most recent first."""
        stmt = (
            select(Game, GameStatus)
            .join(GameStatus, Game.status_id == GameStatus.id)
            .where(or_(Game.home_team_id == team_id, Game.away_team_id == team_id))
        )
        if completed_only:
            stmt = stmt.where(GameStatus.is_completed == True)  # noqa: E712
        stmt = stmt.order_by(Game.date.desc(), Game.round.desc(), Game.id.desc())
        result = await self.session.execute(stmt)
        return [(g, s) for g, s in result.all()]

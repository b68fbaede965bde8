from __future__ import annotations

from typing import Optional

from sqlalchemy import select

from models.game_status import GameStatus
from .base import BaseRepository


class GameStatusRepository(BaseRepository[GameStatus]):
    """Repository for GameStatus entities."""

    model = GameStatus

    async def get_by_name(self, name: str) -> Optional[GameStatus]:
        stmt = select(GameStatus).where(GameStatus.name == name)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

from __future__ import annotations

from typing import List

from sqlalchemy import select

from models.player import Player
from .base import BaseRepository


class PlayerRepository(BaseRepository[Player]):
    """Repository for Player entities."""

    model = Player

    async def list_players(self, active_only: bool = True) -> List[Player]:
        stmt = select(Player)
        if active_only:
            stmt = stmt.where(Player.active == True)  # noqa: E712
        result = await self.session.execute(stmt.order_by(Player.display_name, Player.id))
        return list(result.scalars().all())

from __future__ import annotations

from typing import Dict, Iterable, List

from sqlalchemy import select

from models.team import Team
from .base import BaseRepository


class TeamRepository(BaseRepository[Team]):
    """Repository for Team entities."""

    model = Team

    async def list_by_club(self, club_id: int, active_only: bool = True) -> List[Team]:
        stmt = select(Team).where(Team.club_id == club_id)
        if active_only:
            stmt = stmt.where(Team.is_active == True)  # noqa: E712
        result = await self.session.execute(stmt.order_by(Team.name))
        return list(result.scalars().all())

    async def names_by_id(self, team_ids: Iterable[int]) -> Dict[int, str]:
        """Map team id -> name for the given ids (unknown ids are omitted)."""
        ids = sorted({i for i in team_ids if i is not None})
        if not ids:
            return {}
        stmt = select(Team.id, Team.name).where(Team.id.in_(ids))
        result = await self.session.execute(stmt)
        return {row.id: row.name for row in result}

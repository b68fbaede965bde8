from __future__ import annotations

from typing import Optional

from sqlalchemy import select

from models.club import Club
from .base import BaseRepository


class ClubRepository(BaseRepository[Club]):
    """Repository for Club entities."""

    model = Club

    async def get_by_code(self, code: str) -> Optional[Club]:
        stmt = select(Club).where(Club.code == code)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

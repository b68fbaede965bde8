from __future__ import annotations

from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from models.base import Base

T = TypeVar("T", bound=Base)


class BaseRepository(Generic[T]):
    """Common CRUD helpers bound to one model.

    Repositories never commit; the session owner (request dependency or CLI)
    does.
    """

    model: Type[T]

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def add(self, entity: T) -> T:
        """Add an entity to the session and flush so generated ids are populated."""
        self.session.add(entity)
        await self.session.flush()
        return entity

    async def get_by_id(self, id_value: int) -> Optional[T]:
        return await self.session.get(self.model, id_value)

    async def list(self, limit: int = 100, offset: int = 0) -> List[T]:
        stmt = select(self.model).order_by(self.model.id).limit(limit).offset(offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def delete(self, entity: T) -> None:
        await self.session.delete(entity)

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from .database import get_database_manager


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency yielding a session that commits when the request succeeds."""
    manager = get_database_manager()
    async with manager.session() as session:
        yield session

"""Create all tables and seed the game status catalogue for DATABASE_URL."""

import asyncio
import sys

from core.config import get_settings
from core.database import dispose_database, get_database_manager, init_database
from core.logging import setup_logging
from services.seed import seed_game_statuses


async def main() -> int:
    settings = get_settings()
    setup_logging(settings)
    await init_database(settings.database_url)
    manager = get_database_manager()
    try:
        await manager.create_all()
        async with manager.session() as session:
            created = await seed_game_statuses(session)
    finally:
        await dispose_database()
    print(f"schema ok ({len(created)} statuses seeded)")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))

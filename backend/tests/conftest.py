# Ensure backend is at sys.path[0] when pytest runs (from repo root or from backend dir)
import sys
from pathlib import Path

_tests_dir = Path(__file__).resolve().parent
_backend = _tests_dir.parent
_str_backend = str(_backend)
if sys.path[0:1] != [_str_backend]:
    sys.path.insert(0, _str_backend)

import pytest_asyncio

from core.database import dispose_database, get_database_manager, init_database
from models import Club, Game, Team
from repositories.game_status_repo import GameStatusRepository
from services.seed import seed_game_statuses


@pytest_asyncio.fixture
async def test_db():
    """In-memory SQLite with all tables and the default game statuses."""
    await init_database("sqlite+aiosqlite:///:memory:")
    manager = get_database_manager()
    await manager.create_all()
    async with manager.session() as session:
        await seed_game_statuses(session)
    yield manager
    await dispose_database()


@pytest_asyncio.fixture
async def league(test_db):
    """Two clubs with one team each, and a completed, an upcoming and a forfeit game between them."""
    async with test_db.session() as session:
        statuses = GameStatusRepository(session)
        completed = await statuses.get_by_name("completed")
        upcoming = await statuses.get_by_name("upcoming")
        forfeit_win = await statuses.get_by_name("forfeit-win")

        kangaroos_club = Club(name="Kangaroos Netball Club", code="KNC", is_active=True)
        emus_club = Club(name="Emus Netball Club", code="ENC", is_active=True)
        session.add_all([kangaroos_club, emus_club])
        await session.flush()

        kangaroos = Team(club_id=kangaroos_club.id, name="Kangaroos", division="15U/1", is_active=True)
        emus = Team(club_id=emus_club.id, name="Emus", division="15U/1", is_active=True)
        session.add_all([kangaroos, emus])
        await session.flush()

        played = Game(date="2025-05-03", time="09:00", round="1", home_team_id=kangaroos.id,
                      away_team_id=emus.id, status_id=completed.id)
        future = Game(date="2025-05-17", time="09:00", round="3", home_team_id=emus.id,
                      away_team_id=kangaroos.id, status_id=upcoming.id)
        forfeit = Game(date="2025-05-10", time="10:00", round="2", home_team_id=kangaroos.id,
                       away_team_id=emus.id, status_id=forfeit_win.id)
        session.add_all([played, future, forfeit])
        await session.flush()

        ids = {
            "kangaroos": kangaroos.id,
            "emus": emus.id,
            "played": played.id,
            "future": future.id,
            "forfeit": forfeit.id,
        }
    return ids

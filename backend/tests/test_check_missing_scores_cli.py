"""tools/check_missing_scores.py: report text and exit codes against a temporary SQLite file."""

from __future__ import annotations

import sys
from pathlib import Path

_backend = Path(__file__).resolve().parent.parent
_tools = _backend.parent / "tools"
for _p in (_backend, _tools):
    if str(_p) not in sys.path:
        sys.path.insert(0, str(_p))

import pytest

from check_missing_scores import _run, format_report
from core.database import dispose_database, get_database_manager, init_database
from models import Club, Game, Team
from repositories.game_status_repo import GameStatusRepository
from services.game_score_service import record_official_scores
from services.score_check_service import ScoreCheckReport, ScoreCoverage
from services.seed import seed_game_statuses


async def _build_db(url: str, with_scores: bool) -> int:
    await init_database(url)
    manager = get_database_manager()
    await manager.create_all()
    async with manager.session() as session:
        await seed_game_statuses(session)
        completed = await GameStatusRepository(session).get_by_name("completed")
        club = Club(name="Kangaroos Netball Club", code="KNC")
        session.add(club)
        await session.flush()
        home = Team(club_id=club.id, name="Kangaroos")
        away = Team(club_id=club.id, name="Wallabies")
        session.add_all([home, away])
        await session.flush()
        game = Game(date="2025-06-01", time="11:00", round="7", home_team_id=home.id,
                    away_team_id=away.id, status_id=completed.id)
        session.add(game)
        await session.flush()
        if with_scores:
            await record_official_scores(session, game.id, [(home.id, 1, 9), (away.id, 1, 3)])
        team_id = home.id
    await dispose_database()
    return team_id


def test_format_report_sections() -> None:
    report = ScoreCheckReport(team_id=127)
    report.incomplete.append(ScoreCoverage(
        game_id=5, date="2025-05-03", round="4", opponent_name="Emus",
        status_name="completed", score_count=6, missing_quarters=[4],
    ))
    text = format_report(report)
    assert "Found 1 completed games for team 127" in text
    assert "All completed games have at least some official scores entered" in text
    assert "Game 5: Round 4 vs Emus (2025-05-03) - 6/8 entries, missing Q4" in text
    assert "Games with incomplete scores: 1" in text


@pytest.mark.asyncio
async def test_run_exits_1_when_scores_missing(tmp_path, capsys) -> None:
    url = f"sqlite+aiosqlite:///{(tmp_path / 'missing.db').as_posix()}"
    team_id = await _build_db(url, with_scores=False)
    assert await _run(team_id, url) == 1
    out = capsys.readouterr().out
    assert "Round 7 vs Wallabies (2025-06-01) - Status: completed" in out


@pytest.mark.asyncio
async def test_run_exits_0_when_scores_entered(tmp_path, capsys) -> None:
    url = f"sqlite+aiosqlite:///{(tmp_path / 'partial.db').as_posix()}"
    team_id = await _build_db(url, with_scores=True)
    assert await _run(team_id, url) == 0
    assert "2/8 entries, missing Q2, Q3, Q4" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_run_unknown_team_exits_2(tmp_path, capsys) -> None:
    url = f"sqlite+aiosqlite:///{(tmp_path / 'empty.db').as_posix()}"
    await _build_db(url, with_scores=False)
    assert await _run(4242, url) == 2
    assert "team 4242 not found" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_run_ignores_byes(tmp_path, capsys) -> None:
    url = f"sqlite+aiosqlite:///{(tmp_path / 'bye.db').as_posix()}"
    team_id = await _build_db(url, with_scores=True)
    await init_database(url)
    async with get_database_manager().session() as session:
        bye = await GameStatusRepository(session).get_by_name("bye")
        session.add(Game(date="2025-06-08", time="11:00", round="8", home_team_id=team_id,
                         away_team_id=None, status_id=bye.id, is_bye=True))
    await dispose_database()
    assert await _run(team_id, url) == 0
    out = capsys.readouterr().out
    assert "Found 1 completed games" in out
    assert "Round 8" not in out

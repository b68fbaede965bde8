"""Games/teams/clubs API over ASGITransport with an in-memory database."""

from __future__ import annotations

import sys
from pathlib import Path

_backend = Path(__file__).resolve().parent.parent
if str(_backend) not in sys.path:
    sys.path.insert(0, str(_backend))

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from core.dependencies import get_db_session
from main import app
from models import Game
from repositories.game_status_repo import GameStatusRepository


@pytest_asyncio.fixture
async def client(test_db):
    async def override_session():
        async with test_db.session() as s:
            yield s

    app.dependency_overrides[get_db_session] = override_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.pop(get_db_session, None)


@pytest.mark.asyncio
async def test_health_and_version(client) -> None:
    r = await client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}
    r = await client.get("/api/v1/meta/version")
    assert r.status_code == 200
    assert r.json()["version"]


@pytest.mark.asyncio
async def test_record_stats_then_read_scores(client, league) -> None:
    game, team = league["played"], league["kangaroos"]
    rows = [
        {"team_id": team, "position": "GS", "quarter": 1, "goals_for": 3, "goals_against": 0},
        {"team_id": team, "position": "GK", "quarter": 1, "goals_for": 0, "goals_against": 2},
        {"team_id": team, "position": "gs", "quarter": 2, "goals_for": 2, "goals_against": 2},
        {"team_id": team, "position": "GA", "quarter": 3, "goals_for": 1},
        {"team_id": team, "position": "GD", "quarter": 4, "goals_against": 1},
    ]
    for row in rows:
        r = await client.post(f"/api/v1/games/{game}/stats", json=row)
        assert r.status_code == 201, r.text

    r = await client.get(f"/api/v1/games/{game}/teams/{team}/scores")
    assert r.status_code == 200
    data = r.json()
    assert data["quarter_scores"] == {
        "1": {"for": 3, "against": 2},
        "2": {"for": 2, "against": 2},
        "3": {"for": 1, "against": 0},
        "4": {"for": 0, "against": 1},
    }
    assert data["final_score"] == {"for": 6, "against": 5}
    assert data["result"] == "Win"


@pytest.mark.asyncio
async def test_scores_for_game_without_stats_is_zero_draw(client, league) -> None:
    r = await client.get(f"/api/v1/games/{league['future']}/teams/{league['emus']}/scores")
    assert r.status_code == 200
    data = r.json()
    assert data["stat_count"] == 0
    assert data["final_score"] == {"for": 0, "against": 0}
    assert data["result"] == "Draw"


@pytest.mark.asyncio
async def test_scores_404_for_unknown_game_or_team(client, league) -> None:
    r = await client.get(f"/api/v1/games/9999/teams/{league['emus']}/scores")
    assert r.status_code == 404
    r = await client.get(f"/api/v1/games/{league['played']}/teams/9999/scores")
    assert r.status_code == 404


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "patch",
    [
        {"quarter": 5},
        {"quarter": 0},
        {"goals_for": -1},
        {"position": "XX"},
        {"rating": 11},
    ],
)
async def test_invalid_stat_body_is_422(client, league, patch) -> None:
    body = {"team_id": league["kangaroos"], "position": "GS", "quarter": 1, "goals_for": 1}
    body.update(patch)
    r = await client.post(f"/api/v1/games/{league['played']}/stats", json=body)
    assert r.status_code == 422


@pytest.mark.asyncio
async def test_official_scores_put_and_get(client, league) -> None:
    game, home, away = league["played"], league["kangaroos"], league["emus"]
    body = {"scores": [{"team_id": t, "quarter": q, "score": 4} for q in (1, 2, 3, 4) for t in (home, away)]}
    body["scores"][0]["score"] = 6
    r = await client.put(f"/api/v1/games/{game}/official-scores", json=body)
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["is_complete"] is True
    assert (data["home_total"], data["away_total"]) == (18, 16)
    assert data["home_result"] == "Win"

    r = await client.get(f"/api/v1/games/{game}/official-scores")
    assert r.status_code == 200
    assert r.json()["quarter_scores"]["1"] == {"home": 6, "away": 4}


@pytest.mark.asyncio
async def test_official_scores_reject_foreign_team_and_empty_body(client, league) -> None:
    game = league["played"]
    r = await client.put(f"/api/v1/games/{game}/official-scores",
                         json={"scores": [{"team_id": 9999, "quarter": 1, "score": 3}]})
    assert r.status_code == 404
    r = await client.put(f"/api/v1/games/{game}/official-scores", json={"scores": []})
    assert r.status_code == 422


@pytest.mark.asyncio
async def test_score_validation_endpoint(client, league) -> None:
    game, home, away = league["played"], league["kangaroos"], league["emus"]
    await client.post(f"/api/v1/games/{game}/stats",
                      json={"team_id": home, "position": "GS", "quarter": 1, "goals_for": 10, "goals_against": 7})
    await client.post(f"/api/v1/games/{game}/stats",
                      json={"team_id": away, "position": "GS", "quarter": 1, "goals_for": 8, "goals_against": 9})
    r = await client.get(f"/api/v1/games/{game}/score-validation", params={"strategy": "average"})
    assert r.status_code == 200
    data = r.json()
    assert data["is_valid"] is False
    assert data["mismatched_quarters"] == [1]
    assert data["reconciled"] == {"home_score": 10, "away_score": 8, "method": "averaged"}

    r = await client.get(f"/api/v1/games/{game}/score-validation", params={"strategy": "coin-toss"})
    assert r.status_code == 422


@pytest.mark.asyncio
async def test_team_score_check_and_win_rate(client, league) -> None:
    team = league["kangaroos"]
    r = await client.get(f"/api/v1/teams/{team}/score-check")
    assert r.status_code == 200
    data = r.json()
    assert data["total_completed_games"] == 2
    assert len(data["without_scores"]) == 2

    r = await client.get(f"/api/v1/teams/{team}/win-rate")
    assert r.status_code == 200
    # the played game has no score yet; the forfeit win counts
    assert r.json()["total_games"] == 1
    assert r.json()["wins"] == 1

    assert (await client.get("/api/v1/teams/9999/score-check")).status_code == 404
    assert (await client.get("/api/v1/teams/9999/win-rate")).status_code == 404


@pytest.mark.asyncio
async def test_club_teams(client, league) -> None:
    r = await client.get("/api/v1/clubs/knc/teams")
    assert r.status_code == 200
    data = r.json()
    assert data["club_name"] == "Kangaroos Netball Club"
    assert [t["name"] for t in data["teams"]] == ["Kangaroos"]
    assert (await client.get("/api/v1/clubs/nope/teams")).status_code == 404


@pytest.mark.asyncio
async def test_score_validation_on_bye_is_200(client, test_db, league) -> None:
    async with test_db.session() as session:
        bye = await GameStatusRepository(session).get_by_name("bye")
        game = Game(date="2025-05-24", time="09:00", round="4", home_team_id=league["kangaroos"],
                    away_team_id=None, status_id=bye.id, is_bye=True)
        session.add(game)
        await session.flush()
        game_id = game.id
    r = await client.get(f"/api/v1/games/{game_id}/score-validation")
    assert r.status_code == 200
    assert r.json()["is_bye"] is True
    assert r.json()["has_both_recordings"] is False


@pytest.mark.asyncio
async def test_players_create_and_list(client) -> None:
    r = await client.post("/api/v1/players", json={"first_name": "Ava", "last_name": "Nguyen"})
    assert r.status_code == 201, r.text
    assert r.json()["display_name"] == "Ava Nguyen"
    r = await client.post(
        "/api/v1/players",
        json={"first_name": "Zoe", "last_name": "Hart", "display_name": "Zed", "active": False},
    )
    assert r.status_code == 201

    r = await client.get("/api/v1/players")
    assert [p["display_name"] for p in r.json()["players"]] == ["Ava Nguyen"]
    r = await client.get("/api/v1/players", params={"active_only": "false"})
    assert [p["display_name"] for p in r.json()["players"]] == ["Ava Nguyen", "Zed"]

    r = await client.post("/api/v1/players", json={"first_name": "", "last_name": "X"})
    assert r.status_code == 422
    r = await client.post("/api/v1/players", json={"first_name": "A", "last_name": "B", "date_of_birth": "12/01/2012"})
    assert r.status_code == 422

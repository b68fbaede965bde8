"""GET /api/v1/clubs/{code}/teams — active teams of a club."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from core.dependencies import get_db_session
from repositories.club_repo import ClubRepository
from repositories.team_repo import TeamRepository

router = APIRouter(prefix="/clubs", tags=["clubs"])


@router.get("/{code}/teams")
async def get_club_teams(code: str, session: AsyncSession = Depends(get_db_session)) -> dict:
    club = await ClubRepository(session).get_by_code(code.upper())
    if club is None:
        raise HTTPException(status_code=404, detail=f"club {code} not found")
    teams = await TeamRepository(session).list_by_club(club.id)
    return {
        "club_id": club.id,
        "club_name": club.name,
        "teams": [{"id": t.id, "name": t.name, "division": t.division} for t in teams],
    }

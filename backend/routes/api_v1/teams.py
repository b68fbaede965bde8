"""Team endpoints: official score coverage and win rate."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from core.dependencies import get_db_session
from services.score_check_service import check_missing_scores
from services.win_rate_service import get_team_win_rate

router = APIRouter(prefix="/teams", tags=["teams"])


@router.get("/{team_id}/score-check", summary="Completed games missing official scores")
async def get_team_score_check(
    team_id: int,
    session: AsyncSession = Depends(get_db_session),
) -> dict:
    try:
        report = await check_missing_scores(session, team_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return report.to_dict()


@router.get("/{team_id}/win-rate", summary="Wins, losses, draws and win percentage")
async def get_team_win_rate_route(
    team_id: int,
    session: AsyncSession = Depends(get_db_session),
) -> dict:
    try:
        return await get_team_win_rate(session, team_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e

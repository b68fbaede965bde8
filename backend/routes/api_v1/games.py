"""Game endpoints: stat recording, derived scores, official scores and score validation."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, ConfigDict, Field, field_validator
from sqlalchemy.ext.asyncio import AsyncSession

from core.dependencies import get_db_session
from models.game_stat import POSITIONS
from scoring.reconcile import ReconcileStrategy
from services.game_score_service import (
    get_official_scores,
    get_team_game_scores,
    record_official_scores,
    record_stat,
)
from services.score_check_service import check_stat_consistency

router = APIRouter(prefix="/games", tags=["games"])


class StatBody(BaseModel):
    """One position's statistics for one quarter, recorded by one team."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "team_id": 1,
                "position": "GS",
                "quarter": 1,
                "goals_for": 5,
                "goals_against": 0,
                "missed_goals": 2,
            }
        }
    )

    team_id: int
    position: str
    quarter: int = Field(..., ge=1, le=4)
    goals_for: int = Field(0, ge=0)
    goals_against: int = Field(0, ge=0)
    missed_goals: int = Field(0, ge=0)
    rebounds: int = Field(0, ge=0)
    intercepts: int = Field(0, ge=0)
    bad_pass: int = Field(0, ge=0)
    handling_error: int = Field(0, ge=0)
    pick_up: int = Field(0, ge=0)
    infringement: int = Field(0, ge=0)
    rating: Optional[int] = Field(None, ge=0, le=10)

    @field_validator("position")
    @classmethod
    def _known_position(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in POSITIONS:
            raise ValueError(f"position must be one of: {', '.join(POSITIONS)}")
        return v


class OfficialScoreEntry(BaseModel):
    team_id: int
    quarter: int = Field(..., ge=1, le=4)
    score: int = Field(..., ge=0)


class OfficialScoresBody(BaseModel):
    scores: List[OfficialScoreEntry] = Field(..., min_length=1)
    notes: Optional[str] = None


@router.post("/{game_id}/stats", status_code=201, summary="Record or replace a stat row")
async def post_game_stat(
    game_id: int,
    body: StatBody,
    session: AsyncSession = Depends(get_db_session),
) -> dict:
    counters = body.model_dump(exclude={"team_id", "position", "quarter", "rating"})
    try:
        stat = await record_stat(
            session,
            game_id=game_id,
            team_id=body.team_id,
            position=body.position,
            quarter=body.quarter,
            counters=counters,
            rating=body.rating,
        )
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return {"id": stat.id, "game_id": game_id, **body.model_dump()}


@router.get("/{game_id}/teams/{team_id}/scores", summary="Scores derived from a team's recorded stats")
async def get_game_team_scores(
    game_id: int,
    team_id: int,
    session: AsyncSession = Depends(get_db_session),
) -> dict:
    """Per-quarter goals for/against, final score and Win/Loss/Draw from the team's perspective."""
    try:
        return await get_team_game_scores(session, game_id, team_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e


@router.get("/{game_id}/official-scores", summary="Official quarter scores")
async def get_game_official_scores(
    game_id: int,
    session: AsyncSession = Depends(get_db_session),
) -> dict:
    try:
        return await get_official_scores(session, game_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e


@router.put("/{game_id}/official-scores", summary="Enter official quarter scores")
async def put_game_official_scores(
    game_id: int,
    body: OfficialScoresBody,
    session: AsyncSession = Depends(get_db_session),
) -> dict:
    try:
        await record_official_scores(
            session,
            game_id,
            [(e.team_id, e.quarter, e.score) for e in body.scores],
            notes=body.notes,
        )
        return await get_official_scores(session, game_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e


@router.get("/{game_id}/score-validation", summary="Cross-check both teams' recorded stats")
async def get_game_score_validation(
    game_id: int,
    strategy: ReconcileStrategy = Query(ReconcileStrategy.HOME_PRIORITY),
    session: AsyncSession = Depends(get_db_session),
) -> dict:
    try:
        return await check_stat_consistency(session, game_id, strategy)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e

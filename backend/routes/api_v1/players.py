"""Players: list and register."""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from core.dependencies import get_db_session
from models.player import Player
from repositories.player_repo import PlayerRepository

router = APIRouter(prefix="/players", tags=["players"])


class PlayerBody(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)
    display_name: Optional[str] = Field(None, max_length=255)
    date_of_birth: Optional[str] = Field(None, pattern=r"^\d{4}-\d{2}-\d{2}$")
    avatar_color: Optional[str] = Field(None, max_length=32)
    active: bool = True


def _player_dict(p: Player) -> dict:
    return {
        "id": p.id,
        "display_name": p.display_name,
        "first_name": p.first_name,
        "last_name": p.last_name,
        "date_of_birth": p.date_of_birth,
        "avatar_color": p.avatar_color,
        "active": p.active,
    }


@router.get("", summary="List players")
async def list_players(
    active_only: bool = Query(True),
    session: AsyncSession = Depends(get_db_session),
) -> dict:
    players = await PlayerRepository(session).list_players(active_only=active_only)
    return {"players": [_player_dict(p) for p in players]}


@router.post("", status_code=201, summary="Register a player")
async def create_player(body: PlayerBody, session: AsyncSession = Depends(get_db_session)) -> dict:
    first, last = body.first_name.strip(), body.last_name.strip()
    player = Player(
        first_name=first,
        last_name=last,
        # display name defaults to "First Last"
        display_name=(body.display_name or "").strip() or f"{first} {last}",
        date_of_birth=body.date_of_birth,
        avatar_color=body.avatar_color,
        active=body.active,
    )
    await PlayerRepository(session).add(player)
    return _player_dict(player)

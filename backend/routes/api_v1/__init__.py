"""API v1: games, teams, clubs, players and meta endpoints."""

from fastapi import APIRouter

from .clubs import router as clubs_router
from .games import router as games_router
from .meta import router as meta_router
from .players import router as players_router
from .teams import router as teams_router

router = APIRouter(prefix="/api/v1", tags=["api_v1"])
router.include_router(clubs_router)
router.include_router(games_router)
router.include_router(meta_router)
router.include_router(players_router)
router.include_router(teams_router)

api_v1_router = router

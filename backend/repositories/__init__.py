"""Repository layer: DB access only (CRUD + simple queries), no business logic.

All repositories take an AsyncSession explicitly and never commit.
"""

from .base import BaseRepository
from .club_repo import ClubRepository
from .game_repo import GameRepository
from .game_score_repo import GameScoreRepository
from .game_stat_repo import GameStatRepository
from .game_status_repo import GameStatusRepository
from .player_repo import PlayerRepository
from .team_repo import TeamRepository

__all__ = [
    "BaseRepository",
    "ClubRepository",
    "GameRepository",
    "GameScoreRepository",
    "GameStatRepository",
    "GameStatusRepository",
    "PlayerRepository",
    "TeamRepository",
]

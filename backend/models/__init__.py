"""SQLAlchemy models for clubs, teams, players, games, stats and official scores."""

from .base import Base
from .club import Club
from .game import Game
from .game_score import GameScore
from .game_stat import POSITIONS, GameStat
from .game_status import GameStatus
from .player import Player
from .team import Team

__all__ = [
    "Base",
    "Club",
    "Game",
    "GameScore",
    "GameStat",
    "GameStatus",
    "Player",
    "POSITIONS",
    "Team",
]

from __future__ import annotations

from typing import Optional

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class GameStatus(Base):
    """
    Lifecycle state of a game.
    Forfeit statuses carry a fixed home/away score used when no stats are recorded.
    """

    __tablename__ = "game_statuses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(32), nullable=False, unique=True)
    display_name: Mapped[str] = mapped_column(String(64), nullable=False)
    is_completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    allows_statistics: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    home_team_goals: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    away_team_goals: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

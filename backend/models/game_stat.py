from __future__ import annotations

from typing import Optional

from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base

POSITIONS = ("GS", "GA", "WA", "C", "WD", "GD", "GK")


class GameStat(Base):
    """Statistics one team recorded for one position in one quarter of a game."""

    __tablename__ = "game_stats"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    game_id: Mapped[int] = mapped_column(
        ForeignKey("games.id", ondelete="CASCADE"), nullable=False, index=True
    )
    team_id: Mapped[int] = mapped_column(ForeignKey("teams.id"), nullable=False, index=True)
    position: Mapped[str] = mapped_column(String(2), nullable=False)
    quarter: Mapped[int] = mapped_column(Integer, nullable=False)  # 1-4

    goals_for: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    goals_against: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    missed_goals: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    rebounds: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    intercepts: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    bad_pass: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    handling_error: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    pick_up: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    infringement: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    rating: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)  # 0-10

    __table_args__ = (
        UniqueConstraint("game_id", "team_id", "position", "quarter", name="uq_game_stat_slot"),
    )

from __future__ import annotations

from typing import Optional

from sqlalchemy import Boolean, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class Game(Base):
    """A fixture between a home team and an away team (no away team for a BYE)."""

    __tablename__ = "games"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    date: Mapped[str] = mapped_column(String(10), nullable=False)  # YYYY-MM-DD
    time: Mapped[str] = mapped_column(String(5), nullable=False)  # HH:MM
    round: Mapped[Optional[str]] = mapped_column(String(16), nullable=True)  # "1".."18", "SF", "GF"
    home_team_id: Mapped[int] = mapped_column(ForeignKey("teams.id"), nullable=False)
    away_team_id: Mapped[Optional[int]] = mapped_column(ForeignKey("teams.id"), nullable=True)
    status_id: Mapped[int] = mapped_column(ForeignKey("game_statuses.id"), nullable=False)
    is_bye: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    __table_args__ = (
        Index("ix_games_home_team_date", "home_team_id", "date"),
        Index("ix_games_away_team_date", "away_team_id", "date"),
    )

    def involves(self, team_id: int) -> bool:
        return team_id in (self.home_team_id, self.away_team_id)

    def opponent_of(self, team_id: int) -> Optional[int]:
        if team_id == self.home_team_id:
            return self.away_team_id
        if team_id == self.away_team_id:
            return self.home_team_id
        return None

    def is_bye_fixture(self, status_name: Optional[str] = None) -> bool:
        """True for a BYE: flagged, no away team, or carrying the 'bye' status."""
        return bool(self.is_bye) or self.away_team_id is None or status_name == "bye"

"""Reference data every database needs: the game status catalogue."""

from __future__ import annotations

import logging
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from models.game_status import GameStatus
from repositories.game_status_repo import GameStatusRepository

logger = logging.getLogger(__name__)

# name, display name, completed, allows statistics, fixed home goals, fixed away goals.
# Forfeit scores are from the home team's point of view.
DEFAULT_GAME_STATUSES = (
    ("upcoming", "Upcoming", False, True, None, None),
    ("in-progress", "In Progress", False, True, None, None),
    ("completed", "Completed", True, True, None, None),
    ("forfeit-win", "Forfeit Win", True, False, 10, 0),
    ("forfeit-loss", "Forfeit Loss", True, False, 0, 10),
    ("bye", "BYE", True, False, None, None),
    ("abandoned", "Abandoned", True, False, None, None),
)


async def seed_game_statuses(session: AsyncSession) -> List[GameStatus]:
    """Insert any missing default statuses; existing rows are left untouched."""
    repo = GameStatusRepository(session)
    created: List[GameStatus] = []
    for name, display_name, completed, allows_stats, home_goals, away_goals in DEFAULT_GAME_STATUSES:
        if await repo.get_by_name(name) is not None:
            continue
        created.append(await repo.add(GameStatus(
            name=name,
            display_name=display_name,
            is_completed=completed,
            allows_statistics=allows_stats,
            home_team_goals=home_goals,
            away_team_goals=away_goals,
        )))
    if created:
        logger.info("Seeded %d game statuses", len(created))
    return created

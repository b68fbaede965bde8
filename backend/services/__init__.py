"""Services: composition of repositories and the scoring core."""

from .game_score_service import get_official_scores, get_team_game_scores
from .score_check_service import check_missing_scores, check_stat_consistency
from .win_rate_service import get_team_win_rate

__all__ = [
    "get_official_scores",
    "get_team_game_scores",
    "check_missing_scores",
    "check_stat_consistency",
    "get_team_win_rate",
]

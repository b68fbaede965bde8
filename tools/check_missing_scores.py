"""
Report a team's completed games that are missing official quarter scores.
Usage: python tools/check_missing_scores.py --team-id 127 [--database-url sqlite+aiosqlite:///./netball_stats.db]
Exit code: 0 when every completed game has at least one official score entry, 1 otherwise, 2 on lookup error.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

_backend = Path(__file__).resolve().parent.parent / "backend"
if str(_backend) not in sys.path:
    sys.path.insert(0, str(_backend))

from core.config import get_settings
from core.database import dispose_database, get_database_manager, init_database
from core.logging import setup_logging
from services.game_score_service import FULL_SCORE_ENTRIES
from services.score_check_service import ScoreCheckReport, check_missing_scores


def format_report(report: ScoreCheckReport) -> str:
    lines = [f"Found {report.total_games} completed games for team {report.team_id}", ""]

    lines.append("=== GAMES WITHOUT ANY OFFICIAL SCORES ===")
    if not report.without_scores:
        lines.append("All completed games have at least some official scores entered")
    for c in report.without_scores:
        lines.append(f"Game {c.game_id}: Round {c.round} vs {c.opponent_name} ({c.date}) - Status: {c.status_name}")

    lines.extend(["", "=== GAMES WITH INCOMPLETE OFFICIAL SCORES ==="])
    if not report.incomplete:
        lines.append("No games have incomplete score entries")
    for c in report.incomplete:
        missing = ", ".join(f"Q{q}" for q in c.missing_quarters) or "none"
        lines.append(
            f"Game {c.game_id}: Round {c.round} vs {c.opponent_name} ({c.date}) - "
            f"{c.score_count}/{FULL_SCORE_ENTRIES} entries, missing {missing}"
        )

    lines.extend([
        "",
        "=== SUMMARY ===",
        f"Games with no official scores: {len(report.without_scores)}",
        f"Games with incomplete scores: {len(report.incomplete)}",
        f"Games with complete scores: {len(report.complete)}",
    ])
    return "\n".join(lines)


async def _run(team_id: int, database_url: str) -> int:
    await init_database(database_url)
    try:
        async with get_database_manager().session() as session:
            report = await check_missing_scores(session, team_id)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    finally:
        await dispose_database()
    print(format_report(report))
    return 1 if report.without_scores else 0


def main() -> int:
    parser = argparse.ArgumentParser(description="List completed games missing official quarter scores")
    parser.add_argument("--team-id", type=int, required=True, help="Team to check")
    parser.add_argument("--database-url", default=None, help="Override DATABASE_URL")
    args = parser.parse_args()

    settings = get_settings()
    setup_logging(settings)
    return asyncio.run(_run(args.team_id, args.database_url or settings.database_url))


if __name__ == "__main__":
    sys.exit(main())

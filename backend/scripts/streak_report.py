"""
Print a user's exercise totals and current streak from live data.

Recomputes with the same engine the profile endpoint uses, so it can be
used to check what a user should be seeing.

Usage (after `pip install -e .` from the repo root):
    cd backend
    SUPABASE_URL=... SUPABASE_SERVICE_KEY=... python scripts/streak_report.py <user_id>

Or with a .env file, optionally pinning the reference date:
    python scripts/streak_report.py <user_id> --today 2026-03-01
"""
import sys
from datetime import date

from dotenv import load_dotenv

from app.db import get_client, get_profile, get_exercise_logs
from app.engine.streak import compute, to_exercise_day, utc_today

USAGE = "Usage: python scripts/streak_report.py <user_id> [--today YYYY-MM-DD]"


def run(user_id: str, today: date) -> None:
    db = get_client()

    profile = get_profile(db, user_id)
    if not profile:
        print(f"User not found: {user_id}")
        sys.exit(1)
    print(f"\n  User: {profile.get('name', '')} ({user_id[:8]}...)")

    logs = get_exercise_logs(db, user_id)
    print(f"  Exercise logs: {len(logs)}")
    if logs:
        print(f"  First: {to_exercise_day(logs[0])}  Last: {to_exercise_day(logs[-1])}")

    result = compute(logs, today)
    print(f"\n  As of {today.isoformat()}:")
    print(f"    total_exercise_day_count: {result.total_day_count}")
    print(f"    current_exercise_day_streak: {result.current_streak}\n")


def parse_args(argv: list[str]) -> tuple[str | None, date]:
    """Raises ValueError when --today is missing its value or is not an ISO date."""
    today = utc_today()
    user_id = None
    args = iter(argv)
    for arg in args:
        if arg == "--today":
            today = date.fromisoformat(next(args, ""))
        else:
            user_id = arg
    return user_id, today


def main(argv: list[str]) -> None:
    try:
        user_id, today = parse_args(argv)
    except ValueError as e:
        print(f"Invalid --today: {e}")
        user_id = None

    if not user_id:
        print(USAGE)
        sys.exit(1)

    run(user_id, today)


if __name__ == "__main__":
    load_dotenv()
    main(sys.argv[1:])

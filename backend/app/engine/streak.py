"""
Exercise streak tracking — pure functions, no DB access.
"""
from datetime import date, datetime, timedelta, timezone
from typing import Any, Iterable, NamedTuple


class StreakResult(NamedTuple):
    total_day_count: int
    current_streak: int


def to_exercise_day(value: Any) -> date:
    """
    Reduce a record, timestamp or ISO string to its calendar date.
    Time-of-day is dropped without any timezone conversion.
    """
    if isinstance(value, dict):
        value = value["exercise_date"]
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def next_day(day: date) -> date:
    return day + timedelta(days=1)


def utc_today() -> date:
    """Today in the same UTC calendar frame exercise_date rows are stored in."""
    return datetime.now(timezone.utc).date()


def compute(records: Iterable[Any], today: date) -> StreakResult:
    """
    Returns (total_day_count, current_streak).

    Precondition: records are sorted ascending by exercise_date. They are
    not re-sorted here; unsorted input gives an undefined result.

    Whether the streak is live is decided once, from the FIRST record
    (today or yesterday). After that the streak only counts while each
    record lands exactly one day after the previous one; the first break
    ends counting for the rest of the walk. Every record adds to the
    total, including same-day duplicates.
    """
    days = [to_exercise_day(r) for r in records]

    if not days:
        return StreakResult(0, 0)
    if len(days) == 1:
        return StreakResult(1, 1)

    yesterday = today - timedelta(days=1)
    is_streak_active = days[0] in (today, yesterday)

    last_date: date | None = None
    total_day_count = 0
    current_streak = 0

    for day in days:
        total_day_count += 1

        if is_streak_active and (last_date is None or day == next_day(last_date)):
            current_streak += 1
        else:
            is_streak_active = False

        last_date = day

    return StreakResult(total_day_count, current_streak)

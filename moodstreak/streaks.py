"""Current and best consecutive-day streaks."""
from __future__ import annotations

from datetime import datetime

from moodstreak.dates import days_ago_key, parse_date_key, today_key

STREAK_CAP = 365


def current_streak(history: dict[str, dict], now: datetime) -> int:
    """Consecutive logged days ending today, or ending yesterday if today
    has not been logged yet."""
    start = 0 if today_key(now) in history else 1
    streak = 0
    for offset in range(start, STREAK_CAP):
        if days_ago_key(now, offset) not in history:
            break
        streak += 1
    return streak


def best_streak(history: dict[str, dict], now: datetime) -> int:
    """Longest run of consecutive days anywhere in history.

    Malformed keys are ignored. The ongoing streak is folded in so a run
    that is still open (today not logged yet) is never under-reported.
    """
    days = sorted(d for d in map(parse_date_key, history) if d is not None)
    if not days:
        return 0

    best = current = 1
    for prev, curr in zip(days, days[1:]):
        if (curr - prev).days == 1:
            current += 1
            best = max(best, current)
        else:
            current = 1
    return max(best, current_streak(history, now))

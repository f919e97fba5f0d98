"""Week-over-week comparison and trend verdicts."""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from datetime import datetime

from moodstreak.catalog import positivity
from moodstreak.dates import days_ago_key

WEEK_DAYS = 7
TREND_THRESHOLD = 0.5

NO_DATA = "no-data"
WEEK_EMPTY_CURRENT = "week-empty-current"
WEEK_EMPTY_PREVIOUS = "week-empty-previous"
UPWARD = "upward"
DOWNWARD = "downward"
STEADY = "steady"

TREND_DISPLAY = {
    NO_DATA:             ("🌈", "Start logging your moods to see weekly insights!"),
    WEEK_EMPTY_CURRENT:  ("📝", "No entries yet this week. How are you feeling?"),
    WEEK_EMPTY_PREVIOUS: ("✨", "Keep logging to unlock week-over-week comparisons!"),
    UPWARD:              ("📈", "You're on an upward trend! Keep shining!"),
    DOWNWARD:            ("📉", "Rough patch? It's okay, better days are coming."),
    STEADY:              ("➡️", "Steady vibes this week. Balance is beautiful!"),
}


@dataclass(frozen=True)
class WeeklyInsight:
    current: list[dict]
    previous: list[dict]
    current_top: str | None
    previous_top: str | None
    current_avg: float
    previous_avg: float
    verdict: str

    @property
    def icon(self) -> str:
        return TREND_DISPLAY[self.verdict][0]

    @property
    def message(self) -> str:
        return TREND_DISPLAY[self.verdict][1]


def week_entries(history: dict[str, dict], now: datetime, start_days_ago: int) -> list[dict]:
    """Records for the 7 days starting ``start_days_ago`` back, newest first."""
    entries = []
    for offset in range(start_days_ago, start_days_ago + WEEK_DAYS):
        entry = history.get(days_ago_key(now, offset))
        if entry is not None:
            entries.append(entry)
    return entries


def average_positivity(entries: list[dict]) -> float:
    if not entries:
        return 0
    return sum(positivity(e.get("label", "")) for e in entries) / len(entries)


def most_frequent_label(entries: list[dict]) -> str | None:
    """Most common label. Ties go to whichever label appears first in
    ``entries`` (Counter keeps first-seen order and most_common is stable)."""
    counts = Counter(e.get("label") for e in entries if e.get("label"))
    if not counts:
        return None
    return counts.most_common(1)[0][0]


def classify_trend(
    current: list[dict],
    previous: list[dict],
    current_avg: float,
    previous_avg: float,
) -> str:
    if not current and not previous:
        return NO_DATA
    if not current:
        return WEEK_EMPTY_CURRENT
    if not previous:
        return WEEK_EMPTY_PREVIOUS
    if current_avg > previous_avg + TREND_THRESHOLD:
        return UPWARD
    if current_avg < previous_avg - TREND_THRESHOLD:
        return DOWNWARD
    return STEADY


def weekly_insight(history: dict[str, dict], now: datetime) -> WeeklyInsight:
    current = week_entries(history, now, 0)
    previous = week_entries(history, now, WEEK_DAYS)
    current_avg = average_positivity(current)
    previous_avg = average_positivity(previous)
    return WeeklyInsight(
        current=current,
        previous=previous,
        current_top=most_frequent_label(current),
        previous_top=most_frequent_label(previous),
        current_avg=current_avg,
        previous_avg=previous_avg,
        verdict=classify_trend(current, previous, current_avg, previous_avg),
    )

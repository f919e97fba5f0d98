"""Every derived view for one captured instant.

The UI renders from a single Dashboard per refresh so the streak counters,
the heatmap and the weekly trend all agree on what "today" is, even when a
refresh straddles midnight.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from moodstreak.catalog import MoodDefinition, get_mood_by_label
from moodstreak.dates import today_key
from moodstreak.frequency import FrequencyEntry, bar_widths, frequency_30
from moodstreak.heatmap import GridCell, MonthLabel, build_grid, month_labels
from moodstreak.insights import WeeklyInsight, weekly_insight
from moodstreak.streaks import best_streak, current_streak


@dataclass(frozen=True)
class Dashboard:
    now: datetime
    today_key: str
    today_record: dict | None
    today_mood: MoodDefinition | None
    has_any_data: bool
    current_streak: int
    best_streak: int
    grid: list[list[GridCell | None]]
    month_labels: list[MonthLabel]
    insight: WeeklyInsight
    frequency: list[tuple[FrequencyEntry, float]]


def build_dashboard(history: dict[str, dict], now: datetime) -> Dashboard:
    key = today_key(now)
    today_record = history.get(key)
    grid = build_grid(now)
    freq = frequency_30(history, now)
    return Dashboard(
        now=now,
        today_key=key,
        today_record=today_record,
        today_mood=get_mood_by_label(today_record.get("label", "")) if today_record is not None else None,
        has_any_data=bool(history),
        current_streak=current_streak(history, now),
        best_streak=best_streak(history, now),
        grid=grid,
        month_labels=month_labels(now, grid),
        insight=weekly_insight(history, now),
        frequency=list(zip(freq, bar_widths(freq))),
    )

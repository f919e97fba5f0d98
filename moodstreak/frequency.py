"""30-day mood frequency ranking."""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from datetime import datetime

from moodstreak.catalog import MOODS, MoodDefinition
from moodstreak.dates import days_ago_key

FREQUENCY_DAYS = 30
MIN_BAR_PCT = 10


@dataclass(frozen=True)
class FrequencyEntry:
    mood: MoodDefinition
    count: int


def frequency_30(history: dict[str, dict], now: datetime) -> list[FrequencyEntry]:
    """Catalog moods seen in the last 30 days (today included), most
    frequent first. Equal counts keep catalog order; unseen moods are
    left out."""
    counts: Counter[str] = Counter()
    for offset in range(FREQUENCY_DAYS):
        entry = history.get(days_ago_key(now, offset))
        if entry is not None:
            counts[entry.get("label")] += 1

    ranked = [FrequencyEntry(mood, counts[mood.label]) for mood in MOODS if counts[mood.label] > 0]
    ranked.sort(key=lambda f: f.count, reverse=True)
    return ranked


def bar_widths(entries: list[FrequencyEntry]) -> list[float]:
    """Bar width per entry as a percentage of the top count, floored at 10%."""
    max_count = max((e.count for e in entries), default=1)
    max_count = max(max_count, 1)
    return [max(e.count / max_count * 100, MIN_BAR_PCT) for e in entries]

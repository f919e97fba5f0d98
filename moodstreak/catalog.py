"""The fixed mood catalog. Order matters: it breaks frequency ties."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class MoodDefinition:
    emoji: str
    label: str
    color: str
    score: int


MOODS: tuple[MoodDefinition, ...] = (
    MoodDefinition("😄", "Joyful", "#FFD700", 8),
    MoodDefinition("😊", "Good", "#86EFAC", 7),
    MoodDefinition("😐", "Neutral", "#9CA3AF", 5),
    MoodDefinition("😔", "Low", "#93C5FD", 4),
    MoodDefinition("😢", "Sad", "#60A5FA", 2),
    MoodDefinition("😡", "Angry", "#EF4444", 1),
    MoodDefinition("😰", "Anxious", "#FB923C", 3),
    MoodDefinition("😴", "Tired", "#A78BFA", 4),
)

POSITIVITY: dict[str, int] = {m.label: m.score for m in MOODS}
DEFAULT_POSITIVITY = 5

_BY_LABEL = {m.label: m for m in MOODS}


def get_mood_by_label(label: str) -> MoodDefinition | None:
    return _BY_LABEL.get(label)


def positivity(label: str) -> int:
    """Score for a label; labels outside the catalog count as neutral."""
    return POSITIVITY.get(label, DEFAULT_POSITIVITY)


def make_record(mood: MoodDefinition, now: datetime) -> dict:
    """Build a history record. Emoji and color are copied so later catalog
    edits never rewrite old days."""
    return {
        "emoji": mood.emoji,
        "label": mood.label,
        "color": mood.color,
        "timestamp": now.isoformat(timespec="seconds"),
    }

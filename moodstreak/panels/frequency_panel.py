"""Frequency panel widget — how often each mood showed up in 30 days."""
from __future__ import annotations

from textual.widgets import Static
from textual.containers import VerticalScroll
from textual.reactive import reactive

from moodstreak.dashboard import Dashboard
from moodstreak.data import DataManager
from moodstreak.frequency import FREQUENCY_DAYS, FrequencyEntry


def _bar(pct: float, color: str, width: int = 16) -> str:
    filled = int(pct / 100 * width)
    empty = width - filled
    return f"[{color}]{'█' * filled}[/][dim]{'░' * empty}[/]"


class FrequencyPanel(VerticalScroll):
    """Ranked mood counts over the last 30 days."""

    selected_index: reactive[int] = reactive(0)

    def __init__(self, data_manager: DataManager, dashboard: Dashboard, **kwargs):
        super().__init__(**kwargs)
        self.data_manager = data_manager
        self.dashboard = dashboard
        self.border_title = "[4]─Frequency"

    def compose(self):
        yield from self._build_items()

    def _build_items(self):
        rows = self.dashboard.frequency
        if not rows:
            yield Static(
                "  No data yet.\n  Start logging your moods!",
                classes="empty-message",
            )
            return

        for i, (entry, pct) in enumerate(rows):
            mood = entry.mood
            classes = "list-item"
            if i == self.selected_index:
                classes += " list-item-selected"
            yield Static(
                f"  {mood.emoji} {mood.label:<8} {_bar(pct, mood.color)} [bold]{entry.count}[/]",
                classes=classes,
                markup=True,
            )

    def refresh_list(self):
        self.remove_children()
        self.mount(*list(self._build_items()))
        count = len(self.dashboard.frequency)
        if count > 0:
            self.selected_index = min(self.selected_index, count - 1)

    def get_selected(self) -> FrequencyEntry | None:
        rows = self.dashboard.frequency
        if rows and 0 <= self.selected_index < len(rows):
            return rows[self.selected_index][0]
        return None

    def move_up(self):
        if self.selected_index > 0:
            self.selected_index -= 1
            self.refresh_list()

    def move_down(self):
        if self.selected_index < len(self.dashboard.frequency) - 1:
            self.selected_index += 1
            self.refresh_list()

    def get_detail_text(self) -> str:
        rows = self.dashboard.frequency
        parts = [
            f"[bold cyan]{FREQUENCY_DAYS}-Day Mood Frequency[/]",
            "[dim]─────────────────────────────────[/]\n",
        ]
        if not rows:
            parts.append("No data yet. Start logging your moods!")
            return "\n".join(parts)

        total = sum(entry.count for entry, _ in rows)
        for entry, pct in rows:
            mood = entry.mood
            share = int(entry.count / total * 100)
            parts.append(
                f"  {mood.emoji} [{mood.color}]{mood.label:<8}[/] {_bar(pct, mood.color, width=24)} "
                f"[bold]{entry.count}[/] [dim]({share}%)[/]"
            )
        parts.append(f"\n  [dim]{total} of the last {FREQUENCY_DAYS} days logged[/]")
        return "\n".join(parts)

    def get_counter_text(self) -> str:
        rows = self.dashboard.frequency
        if not rows:
            return "0 moods"
        return f"{self.selected_index + 1} of {len(rows)}"

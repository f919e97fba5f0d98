"""Weekly insights panel widget — this week vs last week."""
from __future__ import annotations

from textual.widgets import Static
from textual.containers import VerticalScroll

from moodstreak.catalog import get_mood_by_label
from moodstreak.dashboard import Dashboard
from moodstreak.data import DataManager
from moodstreak.insights import NO_DATA
from moodstreak.panels import record_text


def _week_line(title: str, top: str | None, count: int, empty_text: str) -> str:
    if not top:
        return f"  [bold]{title:<10}[/] [dim]{empty_text}[/]"
    mood = get_mood_by_label(top)
    emoji = mood.emoji if mood else "❓"
    color = mood.color if mood else "#f8f8f2"
    return f"  [bold]{title:<10}[/] {emoji} [{color}]{record_text(top)}[/]  [dim]{count} logged[/]"


class InsightsPanel(VerticalScroll):
    """Shows the most frequent mood of each week and the trend verdict.
    Read-only: there is nothing to select, so navigation is a no-op."""

    def __init__(self, data_manager: DataManager, dashboard: Dashboard, **kwargs):
        super().__init__(**kwargs)
        self.data_manager = data_manager
        self.dashboard = dashboard
        self.border_title = "[3]─Insights"

    def compose(self):
        yield from self._build_items()

    def _build_items(self):
        insight = self.dashboard.insight
        if insight.verdict == NO_DATA:
            yield Static(f"  {insight.icon} [dim]{insight.message}[/]", classes="empty-message", markup=True)
            return

        yield Static(
            _week_line("This week", insight.current_top, len(insight.current), "No entries yet"),
            markup=True,
        )
        yield Static(
            _week_line("Last week", insight.previous_top, len(insight.previous), "No entries"),
            markup=True,
        )
        yield Static(f"  {insight.icon} {insight.message}", markup=True)

    def refresh_list(self):
        self.remove_children()
        self.mount(*list(self._build_items()))

    def get_selected(self) -> dict | None:
        return None

    def move_up(self):
        pass

    def move_down(self):
        pass

    def get_detail_text(self) -> str:
        insight = self.dashboard.insight
        parts = [
            "[bold cyan]📊 Weekly Insights[/]",
            "[dim]─────────────────────────────────[/]\n",
        ]
        if insight.verdict == NO_DATA:
            parts.append(f"  {insight.icon} {insight.message}")
            return "\n".join(parts)

        parts.append(_week_line("This week", insight.current_top, len(insight.current), "No entries yet"))
        if insight.current:
            parts.append(f"  [dim]{'':<10} avg positivity {insight.current_avg:.1f}/8[/]")
        parts.append(_week_line("Last week", insight.previous_top, len(insight.previous), "No entries"))
        if insight.previous:
            parts.append(f"  [dim]{'':<10} avg positivity {insight.previous_avg:.1f}/8[/]")
        parts.append("")
        parts.append(f"  {insight.icon}  [bold]{insight.message}[/]")
        return "\n".join(parts)

    def get_counter_text(self) -> str:
        return self.dashboard.insight.verdict

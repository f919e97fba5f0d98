"""Daily check-in panel widget — pick today's mood, see streaks."""
from __future__ import annotations

from textual.widgets import Static
from textual.containers import VerticalScroll
from textual.reactive import reactive

from moodstreak.catalog import MOODS, MoodDefinition
from moodstreak.dashboard import Dashboard
from moodstreak.data import DataManager
from moodstreak.panels import record_color, record_text


def _fire_str(streak: int) -> str:
    """Return fire emojis for a streak count."""
    if streak == 0:
        return "[dim]no streak[/]"
    fires = min(streak, 7)  # cap emoji count
    return "🔥" * fires + (f"  [bold yellow]{streak}d[/]" if streak > 1 else "")


class CheckinPanel(VerticalScroll):
    """Lists the mood catalog. Enter logs the selected mood for today."""

    selected_index: reactive[int] = reactive(0)

    def __init__(self, data_manager: DataManager, dashboard: Dashboard, **kwargs):
        super().__init__(**kwargs)
        self.data_manager = data_manager
        self.dashboard = dashboard
        self.border_title = "[1]─Check-in"

    # ── Sidebar ──────────────────────────────────────────

    def compose(self):
        yield from self._build_items()

    def _build_items(self):
        dash = self.dashboard
        if not dash.has_any_data:
            title = "✨ How are you feeling today?"
        elif dash.today_record is not None:
            title = "Update today's mood"
        else:
            title = "How are you feeling today?"
        yield Static(f"  [bold]{title}[/]", markup=True)
        yield Static(f"  [dim]{self._subtitle()}[/]", markup=True)

        today_label = dash.today_record.get("label") if dash.today_record is not None else None
        for i, mood in enumerate(MOODS):
            marker = "[green]●[/]" if mood.label == today_label else "[dim]○[/]"
            classes = "list-item"
            if i == self.selected_index:
                classes += " list-item-selected"
            yield Static(
                f"  {marker} [bold yellow]{i + 1}[/] {mood.emoji} [{mood.color}]{mood.label}[/]",
                classes=classes,
                markup=True,
            )

    def _subtitle(self) -> str:
        dash = self.dashboard
        if not dash.has_any_data:
            return "Log your first mood to start a streak"
        if dash.today_record is not None:
            emoji = record_text(dash.today_record.get("emoji", "❓"))
            label = record_text(dash.today_record.get("label", "?"))
            return f"Today: {emoji} {label}"
        return "You haven't logged today yet"

    def refresh_list(self):
        self.remove_children()
        self.mount(*list(self._build_items()))

    def get_selected(self) -> MoodDefinition | None:
        if 0 <= self.selected_index < len(MOODS):
            return MOODS[self.selected_index]
        return None

    def move_up(self):
        if self.selected_index > 0:
            self.selected_index -= 1
            self.refresh_list()

    def move_down(self):
        if self.selected_index < len(MOODS) - 1:
            self.selected_index += 1
            self.refresh_list()

    # ── Detail (centre pane) ─────────────────────────────

    def get_detail_text(self) -> str:
        dash = self.dashboard
        parts = [
            "[bold cyan]Daily Check-in[/]",
            "[dim]─────────────────────────────────[/]\n",
            f"  [bold]Current streak:[/]  🔥 {dash.current_streak}   {_fire_str(dash.current_streak)}",
            f"  [bold]Best streak:[/]     ⭐ {dash.best_streak}\n",
        ]

        if dash.today_record is not None:
            emoji = record_text(dash.today_record.get("emoji", "❓"))
            color = record_color(dash.today_record, "#f8f8f2")
            label = record_text(dash.today_record.get("label", "?"))
            parts.append(f"  [bold]Today:[/]   {emoji} [{color}]{label}[/]")
            parts.append("  [dim]Logging again replaces today's mood.[/]")
        else:
            parts.append("  [bold]Today:[/]   [yellow]○ Not yet[/]")
            if dash.current_streak:
                parts.append(f"  [dim]Log today to keep your {dash.current_streak}-day streak going.[/]")

        mood = self.get_selected()
        if mood:
            parts.append(
                f"\n  Press [bold cyan]enter[/] to log {mood.emoji} [{mood.color}]{mood.label}[/]"
                f", or [bold cyan]a[/] to pick by number."
            )
        return "\n".join(parts)

    def get_counter_text(self) -> str:
        dash = self.dashboard
        return f"🔥 {dash.current_streak}  ⭐ {dash.best_streak}"

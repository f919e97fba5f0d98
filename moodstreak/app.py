"""Mood Streak — Main application with Lazygit-style TUI layout."""
from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.screen import ModalScreen
from textual.widgets import Static
from textual.containers import Vertical, Horizontal, VerticalScroll, Container
from textual.reactive import reactive

from moodstreak.catalog import MOODS
from moodstreak.dashboard import Dashboard, build_dashboard
from moodstreak.data import DataManager
from moodstreak.panels.checkin_panel import CheckinPanel
from moodstreak.panels.heatmap_panel import HeatmapPanel
from moodstreak.panels.insights_panel import InsightsPanel
from moodstreak.panels.frequency_panel import FrequencyPanel

logger = logging.getLogger(__name__)

MODAL_CSS = """
{name} {{
    align: center middle;
    background: rgba(0, 0, 0, 0.85);
}}
"""


# ── Mood picker modal ────────────────────────────────────

class MoodPickerModal(ModalScreen[str]):
    """A modal for picking a mood with number keys."""

    BINDINGS = [Binding("escape", "cancel", "Cancel")] + [
        Binding(str(i + 1), f"pick({i})", mood.label, show=False)
        for i, mood in enumerate(MOODS)
    ]

    CSS = MODAL_CSS.format(name="MoodPickerModal") + """
    #mood-box {
        width: 40;
        height: auto;
        background: #282a36;
        border: solid #50fa7b;
        padding: 1 2;
    }
    #mood-title {
        color: #ff79c6;
        text-style: bold;
        margin-bottom: 1;
        text-align: center;
    }
    .mood-option {
        height: 1;
        padding: 0 1;
        color: #f8f8f2;
    }
    """

    def __init__(self, current: str | None = None, **kwargs):
        super().__init__(**kwargs)
        self._current = current

    def compose(self) -> ComposeResult:
        with Container(id="mood-box"):
            yield Static("How are you feeling?", id="mood-title")
            for i, mood in enumerate(MOODS):
                marker = "  [green]✓[/]" if mood.label == self._current else ""
                yield Static(
                    f"  [bold yellow]{i + 1}[/]  {mood.emoji} [{mood.color}]{mood.label}[/]{marker}",
                    classes="mood-option",
                    markup=True,
                )

    def action_pick(self, index: int) -> None:
        self.dismiss(MOODS[index].label)

    def action_cancel(self) -> None:
        self.dismiss("")


# ── Confirm modal ────────────────────────────────────────

class ConfirmModal(ModalScreen[bool]):
    """A Y/N confirmation modal."""

    BINDINGS = [
        Binding("y", "yes", "Yes"),
        Binding("n", "no", "No"),
        Binding("escape", "no", "No"),
    ]

    CSS = MODAL_CSS.format(name="ConfirmModal") + """
    #confirm-box {
        width: 50;
        height: auto;
        background: #282a36;
        border: solid #ff5555;
        padding: 1 2;
    }
    #confirm-title {
        color: #ff79c6;
        text-style: bold;
        margin-bottom: 1;
    }
    #confirm-hint {
        color: #6272a4;
    }
    """

    def __init__(self, message: str, **kwargs):
        super().__init__(**kwargs)
        self._message = message

    def compose(self) -> ComposeResult:
        with Container(id="confirm-box"):
            yield Static(self._message, id="confirm-title")
            yield Static(
                "  [bold #f1fa8c]y[/] Yes  |  [bold #f1fa8c]n[/] No",
                id="confirm-hint",
                markup=True,
            )

    def action_yes(self) -> None: self.dismiss(True)
    def action_no(self) -> None: self.dismiss(False)


# ── Help overlay ─────────────────────────────────────────

HELP_TEXT = (
    "[bold cyan]Keyboard Shortcuts[/]\n"
    "[dim]─────────────────────────────────────────[/]\n\n"
    "[bold cyan]Navigation[/]\n"
    "  [bold #f1fa8c]1 - 4[/]      Switch panels\n"
    "  [bold #f1fa8c]↑ / k[/]      Move up (History: a day back)\n"
    "  [bold #f1fa8c]↓ / j[/]      Move down (History: a day forward)\n\n"
    "[bold cyan]Check-in[/]\n"
    "  [bold #f1fa8c]enter[/]      Log the selected mood for today\n"
    "  [bold #f1fa8c]a[/]          Pick today's mood by number (1 - 8)\n\n"
    "[bold cyan]General[/]\n"
    "  [bold #f1fa8c]R[/]          Reset all data\n"
    "  [bold #f1fa8c]?[/]          Show this help\n"
    "  [bold #f1fa8c]q[/]          Quit\n"
)


class HelpScreen(ModalScreen):
    """Shows all keyboard shortcuts."""

    BINDINGS = [
        Binding("escape", "close", "Close"),
        Binding("question_mark", "close", "Close", show=False),
    ]

    CSS = MODAL_CSS.format(name="HelpScreen") + """
    #help-container {
        width: 64;
        max-height: 85%;
        background: #282a36;
        border: solid #50fa7b;
        padding: 1 2;
        overflow-y: auto;
    }
    """

    def compose(self) -> ComposeResult:
        with VerticalScroll(id="help-container"):
            yield Static(
                "[bold #ff79c6]Mood Streak[/]\n"
                "[dim]Your emotional wellness companion 💜[/]\n\n"
                + HELP_TEXT
                + "\n[dim]Press Escape or ? to close[/]",
                markup=True,
            )

    def action_close(self) -> None:
        self.dismiss()


# ── Main application ─────────────────────────────────────

class MoodStreakApp(App):
    """A Lazygit-style terminal mood tracker."""

    TITLE = "Mood Streak"
    # Keep focus off the scroll panels so navigation keys reach the app.
    AUTO_FOCUS = None

    PANEL_NAMES = ["Check-in", "History", "Insights", "Frequency"]

    @classmethod
    def _get_css_path(cls) -> Path:
        return Path(__file__).parent / "app.tcss"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("question_mark", "show_help", "Help"),
        Binding("1", "panel(0)", "Check-in", show=False),
        Binding("2", "panel(1)", "History", show=False),
        Binding("3", "panel(2)", "Insights", show=False),
        Binding("4", "panel(3)", "Frequency", show=False),
        Binding("k", "move_up", "Up", show=False),
        Binding("j", "move_down", "Down", show=False),
        Binding("up", "move_up", "Up", show=False),
        Binding("down", "move_down", "Down", show=False),
        Binding("a", "pick_mood", "Log mood", show=False),
        Binding("enter", "log_selected", "Log", show=False),
        Binding("space", "log_selected", "Log", show=False),
        Binding("R", "reset_data", "Reset", show=False),
    ]

    active_panel: reactive[int] = reactive(-1)

    def __init__(self, data_manager: DataManager | None = None):
        super().__init__(css_path=self._get_css_path())
        self.dm = data_manager or DataManager()
        self.dashboard: Dashboard = build_dashboard(self.dm.history, datetime.now())
        self._panels: list = []

    def compose(self) -> ComposeResult:
        yield Static(self._title_text(), id="title-bar", markup=True)

        with Horizontal(id="main-container"):
            with Vertical(id="left-panels"):
                yield CheckinPanel(self.dm, self.dashboard, id="panel-checkin", classes="panel")
                yield InsightsPanel(self.dm, self.dashboard, id="panel-insights", classes="panel")

            with VerticalScroll(id="centre-pane"):
                yield Static("", id="centre-detail", markup=True)

            with Vertical(id="right-panels"):
                yield HeatmapPanel(self.dm, self.dashboard, id="panel-heatmap", classes="panel")
                yield FrequencyPanel(self.dm, self.dashboard, id="panel-frequency", classes="panel")

        yield Static("", id="status-bar", markup=True)

    def on_mount(self) -> None:
        # Index order matches the number keys, not the on-screen position.
        self._panels = [
            self.query_one("#panel-checkin", CheckinPanel),
            self.query_one("#panel-heatmap", HeatmapPanel),
            self.query_one("#panel-insights", InsightsPanel),
            self.query_one("#panel-frequency", FrequencyPanel),
        ]
        self._update_active_panel()

    def _title_text(self) -> str:
        dash = self.dashboard
        return (
            f"  [bold #8be9fd]Mood Streak[/]  "
            f"🔥 [bold]{dash.current_streak}[/] [dim]current[/]  "
            f"⭐ [bold]{dash.best_streak}[/] [dim]best[/]"
        )

    def _get_welcome_text(self) -> str:
        return (
            "[bold #ff79c6]Mood Streak[/]\n"
            "[dim]─────────────────────────────────────────[/]\n"
            "[bold #8be9fd]Open a panel to display content[/]\n\n"
            + HELP_TEXT
        )

    # ── Refresh ──────────────────────────────────────────

    def _refresh_all(self) -> None:
        """Recompute every view from one fresh instant and redraw."""
        self.dashboard = build_dashboard(self.dm.history, datetime.now())
        for panel in self._panels:
            panel.dashboard = self.dashboard
            panel.refresh_list()
        self.query_one("#title-bar", Static).update(self._title_text())
        self._update_detail()

    def _update_active_panel(self) -> None:
        """Highlight the active panel and show its detail."""
        # Clear focus so the App, not a scroll container, receives navigation keys.
        if self.screen is not None:
            self.screen.set_focus(None)

        for i, panel in enumerate(self._panels):
            if i == self.active_panel:
                panel.add_class("panel-active")
                panel.remove_class("panel")
                panel.styles.border = ("solid", "#50fa7b")
            else:
                panel.remove_class("panel-active")
                panel.add_class("panel")
                panel.styles.border = ("solid", "#44475a")

        self._update_detail()
        self._update_status_bar()

    def _is_panel_active(self) -> bool:
        return 0 <= self.active_panel < len(self._panels)

    def _update_detail(self) -> None:
        detail = self.query_one("#centre-detail", Static)

        if not self._is_panel_active():
            detail.update(self._get_welcome_text())
            return

        panel = self._panels[self.active_panel]
        panel_name = self.PANEL_NAMES[self.active_panel]
        counter = panel.get_counter_text()

        header = f"[bold #8be9fd][{self.active_panel + 1}]─{panel_name}[/]  [dim]{counter}[/]\n[dim]{'─' * 40}[/]\n\n"
        detail.update(header + panel.get_detail_text())

    def _update_status_bar(self) -> None:
        parts = []
        for i, name in enumerate(self.PANEL_NAMES):
            label = f"[{i + 1}]{name}"
            if i == self.active_panel:
                parts.append(f"[bold #50fa7b]{label}[/]")
            else:
                parts.append(f"[dim]{label}[/]")
        panel_bar = " │ ".join(parts)

        actions = {
            0: "[bold #f1fa8c]enter[/]:log [bold #f1fa8c]a[/]:pick",
            1: "[bold #f1fa8c]k[/]:←day [bold #f1fa8c]j[/]:day→",
        }
        action_text = actions.get(self.active_panel, "[bold #f1fa8c]a[/]:log mood")
        bar = (
            f" {panel_bar}  [dim]│[/]  {action_text}  [dim]│[/]  "
            f"[bold #f1fa8c]R[/]:reset [bold #f1fa8c]?[/]:help [bold #f1fa8c]q[/]:quit"
        )
        self.query_one("#status-bar", Static).update(bar)

    # ── Panel switching (number keys) ────────────────────

    def action_panel(self, index: int) -> None:
        self.active_panel = index
        self._update_active_panel()

    # ── Navigation ───────────────────────────────────────

    def action_move_up(self) -> None:
        if not self._is_panel_active():
            return
        self._panels[self.active_panel].move_up()
        self._update_detail()

    def action_move_down(self) -> None:
        if not self._is_panel_active():
            return
        self._panels[self.active_panel].move_down()
        self._update_detail()

    # ── Logging a mood ───────────────────────────────────

    def action_pick_mood(self) -> None:
        record = self.dashboard.today_record
        current = record.get("label") if record is not None else None
        self.push_screen(MoodPickerModal(current), callback=self._on_mood_picked)

    def action_log_selected(self) -> None:
        if self.active_panel != 0:
            return
        mood = self._panels[0].get_selected()
        if mood:
            self._log_mood(mood.label)

    def _on_mood_picked(self, label: str) -> None:
        if label:
            self._log_mood(label)

    def _log_mood(self, label: str) -> None:
        self.dm.log_mood(label)
        logger.info("Logged %s for today", label)
        if not self.dm.last_save_ok:
            self.notify(
                "Could not save to disk. Today's mood is kept for this session only.",
                severity="warning",
            )
        self._refresh_all()

    # ── Reset ────────────────────────────────────────────

    def action_reset_data(self) -> None:
        self.push_screen(
            ConfirmModal("Reset all data? Every logged mood will be permanently deleted."),
            callback=self._on_reset_confirmed,
        )

    def _on_reset_confirmed(self, confirmed: bool) -> None:
        if not confirmed:
            return
        self.dm.reset()
        logger.info("Mood history reset")
        for panel in self._panels:
            if hasattr(panel, "selected_index"):
                panel.selected_index = 0
        self._refresh_all()

    # ── Help ─────────────────────────────────────────────

    def action_show_help(self) -> None:
        self.push_screen(HelpScreen())

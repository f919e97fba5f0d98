"""Heatmap panel widget — 12 weeks of moods on a calendar grid."""
from __future__ import annotations

from textual.widgets import Static
from textual.containers import VerticalScroll
from textual.reactive import reactive

from moodstreak.catalog import MOODS
from moodstreak.dashboard import Dashboard
from moodstreak.data import DataManager
from moodstreak.panels import record_color, record_text
from moodstreak.dates import format_date_label, format_time
from moodstreak.heatmap import COLS, DAY_LABELS, GridCell, grid_cells

EMPTY_CELL_COLOR = "#E5E7EB"
CURSOR_COLOR = "#ff79c6"


class HeatmapPanel(VerticalScroll):
    """Renders the 7x12 grid. The cursor walks one day at a time;
    ``selected_index`` is how many days ago the cursor sits."""

    selected_index: reactive[int] = reactive(0)

    def __init__(self, data_manager: DataManager, dashboard: Dashboard, **kwargs):
        super().__init__(**kwargs)
        self.data_manager = data_manager
        self.dashboard = dashboard
        self.border_title = "[2]─History"

    def compose(self):
        yield from self._build_items()

    def _build_items(self):
        yield Static(self.render_grid(), markup=True)

    def render_grid(self) -> str:
        dash = self.dashboard
        history = self.data_manager.history

        header = "    "
        by_col = {m.col: m.label for m in dash.month_labels}
        for col in range(COLS):
            header += f"{by_col.get(col, ''):<4}"
        lines = [f"[dim]{header.rstrip()}[/]"]

        for row_idx, row in enumerate(dash.grid):
            day = DAY_LABELS[row_idx] if row_idx % 2 == 1 else ""
            line = f"[dim]{day:<4}[/]"
            for cell in row:
                line += self._cell_markup(cell, history) + " "
            lines.append(line.rstrip())
        return "\n".join(lines)

    def _cell_markup(self, cell: GridCell | None, history: dict) -> str:
        if cell is None:
            return "   "
        entry = history.get(cell.date_key)
        color = record_color(entry, EMPTY_CELL_COLOR)
        glyph = "███" if entry is not None else "░░░"
        if cell.days_ago == self.selected_index:
            return f"[bold {CURSOR_COLOR}]▐{glyph[1]}▌[/]"
        if cell.days_ago == 0:
            return f"[bold {color}]{glyph[0]}◆{glyph[2]}[/]"
        return f"[{color}]{glyph}[/]"

    def refresh_list(self):
        self.remove_children()
        self.mount(*list(self._build_items()))
        self.selected_index = min(self.selected_index, self._max_offset())

    def _max_offset(self) -> int:
        cells = grid_cells(self.dashboard.grid)
        return max((c.days_ago for c in cells), default=0)

    def get_selected(self) -> GridCell | None:
        for cell in grid_cells(self.dashboard.grid):
            if cell.days_ago == self.selected_index:
                return cell
        return None

    def move_up(self):
        # Up the grid is back in time.
        if self.selected_index < self._max_offset():
            self.selected_index += 1
            self.refresh_list()

    def move_down(self):
        if self.selected_index > 0:
            self.selected_index -= 1
            self.refresh_list()

    # ── Detail (centre pane) ─────────────────────────────

    def get_detail_text(self) -> str:
        cell = self.get_selected()
        parts = ["[bold cyan]12-Week Mood History[/]", "[dim]─────────────────────────────────[/]\n"]
        if cell is None:
            parts.append("  [dim]Nothing selected.[/]")
            return "\n".join(parts)

        parts.append(f"  [bold]{format_date_label(cell.date_key)}[/]")
        entry = self.data_manager.get_record(cell.date_key)
        if entry is not None:
            color = record_color(entry, "#f8f8f2")
            label = record_text(entry.get("label", "?"))
            parts.append(f"  {record_text(entry.get('emoji', '❓'))} [{color}][bold]{label}[/bold][/]")
            logged = format_time(entry.get("timestamp", ""))
            if logged:
                parts.append(f"  [dim]Logged at {logged}[/]")
        else:
            parts.append("  [dim]No mood logged[/]")

        parts.append("\n[bold]Legend[/]")
        for mood in MOODS:
            parts.append(f"  [{mood.color}]███[/] {mood.emoji} {mood.label}")
        parts.append(f"  [{EMPTY_CELL_COLOR}]░░░[/] not logged")
        parts.append(
            "\n[dim]Press [/][bold #f1fa8c]k[/][dim] / [/][bold #f1fa8c]j[/]"
            "[dim] to move a day back / forward[/]"
        )
        return "\n".join(parts)

    def get_counter_text(self) -> str:
        cell = self.get_selected()
        if cell is None:
            return ""
        return "today" if cell.days_ago == 0 else f"{cell.days_ago}d ago"

"""12-week heatmap layout anchored on today.

Rows are days of the week (0 = Sunday), columns are weeks (11 = the week
containing today). Column boundaries fall on Sundays.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from moodstreak.dates import date_key, days_ago, parse_date_key

ROWS = 7
COLS = 12
DAYS_IN_HEATMAP = 84
DAY_LABELS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
MONTH_LABELS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


@dataclass(frozen=True)
class GridCell:
    date_key: str
    row: int
    col: int
    days_ago: int


@dataclass(frozen=True)
class MonthLabel:
    label: str
    col: int


def day_of_week(now: datetime) -> int:
    """0 = Sunday .. 6 = Saturday."""
    return (days_ago(now, 0).weekday() + 1) % 7


def build_grid(now: datetime) -> list[list[GridCell | None]]:
    """Place the last 84 days on a 7x12 grid, today in column 11."""
    today_dow = day_of_week(now)
    grid: list[list[GridCell | None]] = [[None] * COLS for _ in range(ROWS)]
    for i in range(DAYS_IN_HEATMAP):
        pos = today_dow + (COLS - 1) * ROWS - i
        if pos < 0:
            continue
        col, row = divmod(pos, ROWS)
        if 0 <= col < COLS and 0 <= row < ROWS:
            grid[row][col] = GridCell(date_key(days_ago(now, i)), row, col, i)
    return grid


def grid_cells(grid: list[list[GridCell | None]]) -> list[GridCell]:
    return [cell for row in grid for cell in row if cell is not None]


def month_labels(now: datetime, grid: list[list[GridCell | None]] | None = None) -> list[MonthLabel]:
    """One label per month change, at the first column the month shows up in."""
    if grid is None:
        grid = build_grid(now)
    labels: list[MonthLabel] = []
    last_month = None
    for col in range(COLS):
        cell = next((grid[row][col] for row in range(ROWS) if grid[row][col] is not None), None)
        if cell is None:
            continue
        d = parse_date_key(cell.date_key)
        if d.month != last_month:
            labels.append(MonthLabel(MONTH_LABELS[d.month - 1], col))
            last_month = d.month
    return labels

"""Tests for moodstreak.heatmap — grid layout and month labels."""
from datetime import date, datetime, timedelta

import pytest

from moodstreak.dates import date_key, parse_date_key
from moodstreak.heatmap import (
    COLS,
    MONTH_LABELS,
    ROWS,
    MonthLabel,
    build_grid,
    day_of_week,
    grid_cells,
    month_labels,
)

NOW = datetime(2026, 3, 18, 9, 30)  # Wednesday


class TestDayOfWeek:
    def test_sunday_is_zero(self):
        assert day_of_week(datetime(2026, 3, 15)) == 0

    def test_wednesday(self):
        assert day_of_week(NOW) == 3

    def test_saturday(self):
        assert day_of_week(datetime(2026, 3, 21)) == 6


class TestBuildGrid:
    def test_dimensions(self):
        grid = build_grid(NOW)
        assert len(grid) == ROWS
        assert all(len(row) == COLS for row in grid)

    def test_today_in_last_column(self):
        cell = build_grid(NOW)[3][11]
        assert cell.date_key == "2026-03-18"
        assert cell.days_ago == 0
        assert (cell.row, cell.col) == (3, 11)

    def test_days_after_today_empty(self):
        grid = build_grid(NOW)
        assert grid[4][11] is None
        assert grid[5][11] is None
        assert grid[6][11] is None

    def test_first_cell(self):
        cell = build_grid(NOW)[0][0]
        assert cell.date_key == "2025-12-28"
        assert cell.days_ago == 80

    def test_cell_count(self):
        assert len(grid_cells(build_grid(NOW))) == 81

    def test_full_grid_on_saturday(self):
        grid = build_grid(datetime(2026, 3, 21, 12))
        assert len(grid_cells(grid)) == 84
        assert grid[6][11].days_ago == 0
        assert grid[0][0].days_ago == 83

    def test_sunday_starts_new_column(self):
        grid = build_grid(datetime(2026, 3, 22, 12))
        assert grid[0][11].date_key == "2026-03-22"
        assert all(grid[row][11] is None for row in range(1, ROWS))
        assert len(grid_cells(grid)) == 78

    def test_cells_unique(self):
        cells = grid_cells(build_grid(NOW))
        assert len({(c.row, c.col) for c in cells}) == len(cells)
        assert len({c.date_key for c in cells}) == len(cells)

    def test_rows_match_weekday(self):
        for cell in grid_cells(build_grid(NOW)):
            d = parse_date_key(cell.date_key)
            assert (d.weekday() + 1) % 7 == cell.row

    def test_consecutive_days_walk_down_then_right(self):
        cells = sorted(grid_cells(build_grid(NOW)), key=lambda c: c.days_ago, reverse=True)
        for older, newer in zip(cells, cells[1:]):
            assert older.col * ROWS + older.row + 1 == newer.col * ROWS + newer.row

    @pytest.mark.parametrize("offset", range(7))
    def test_today_always_in_column_eleven(self, offset):
        now = NOW + timedelta(days=offset)
        grid = build_grid(now)
        row = day_of_week(now)
        assert grid[row][11].date_key == date_key(now)

    def test_stable_for_fixed_now(self):
        assert build_grid(NOW) == build_grid(NOW)

    def test_accepts_date(self):
        assert build_grid(date(2026, 3, 18)) == build_grid(NOW)


class TestMonthLabels:
    def test_labels(self):
        assert month_labels(NOW) == [
            MonthLabel("Dec", 0),
            MonthLabel("Jan", 1),
            MonthLabel("Feb", 5),
            MonthLabel("Mar", 9),
        ]

    @pytest.mark.parametrize("month, name", [
        (1, "Jan"), (2, "Feb"), (3, "Mar"), (4, "Apr"), (5, "May"), (6, "Jun"),
        (7, "Jul"), (8, "Aug"), (9, "Sep"), (10, "Oct"), (11, "Nov"), (12, "Dec"),
    ])
    def test_fixed_english_month_names(self, month, name):
        # Late in the month, the current month always labels a column.
        assert month_labels(datetime(2026, month, 25))[-1].label == name
        assert MONTH_LABELS[month - 1] == name

    def test_reuses_given_grid(self):
        grid = build_grid(NOW)
        assert month_labels(NOW, grid) == month_labels(NOW)

    def test_one_label_per_month_change(self):
        labels = month_labels(datetime(2026, 7, 4))
        names = [m.label for m in labels]
        assert len(names) == len(set(names))
        cols = [m.col for m in labels]
        assert cols == sorted(cols)
        assert labels[0].col == 0

    def test_month_starting_mid_week(self):
        # 2026-06-01 is a Monday, so its column opens with Sunday May 31 and
        # the June label moves to the following column.
        grid = build_grid(datetime(2026, 6, 20))
        june = next(m for m in month_labels(datetime(2026, 6, 20), grid) if m.label == "Jun")
        first = next(grid[row][june.col] for row in range(ROWS) if grid[row][june.col] is not None)
        assert first.date_key == "2026-06-07"

"""Tests for moodstreak.catalog and moodstreak.dashboard."""
from datetime import datetime

from moodstreak.catalog import (
    DEFAULT_POSITIVITY,
    MOODS,
    POSITIVITY,
    get_mood_by_label,
    make_record,
    positivity,
)
from moodstreak.dashboard import build_dashboard
from moodstreak.dates import days_ago_key
from moodstreak.heatmap import grid_cells
from moodstreak.insights import NO_DATA

NOW = datetime(2026, 3, 18, 9, 30)


# ═══════════════════════════════════════════════════════════
# CATALOG
# ═══════════════════════════════════════════════════════════

class TestCatalog:
    def test_eight_moods_in_order(self):
        assert [m.label for m in MOODS] == [
            "Joyful", "Good", "Neutral", "Low", "Sad", "Angry", "Anxious", "Tired",
        ]

    def test_scores_in_range(self):
        assert all(1 <= m.score <= 8 for m in MOODS)
        assert POSITIVITY["Joyful"] == 8
        assert POSITIVITY["Angry"] == 1

    def test_lookup(self):
        assert get_mood_by_label("Good").emoji == "😊"
        assert get_mood_by_label("Meh") is None

    def test_unknown_positivity_is_neutral(self):
        assert positivity("Meh") == DEFAULT_POSITIVITY == 5

    def test_make_record_copies_catalog_fields(self):
        record = make_record(get_mood_by_label("Tired"), NOW)
        assert record == {
            "emoji": "😴",
            "label": "Tired",
            "color": "#A78BFA",
            "timestamp": "2026-03-18T09:30:00",
        }


# ═══════════════════════════════════════════════════════════
# DASHBOARD
# ═══════════════════════════════════════════════════════════

class TestDashboard:
    def test_empty_history(self):
        dash = build_dashboard({}, NOW)
        assert dash.has_any_data is False
        assert dash.today_record is None
        assert dash.today_mood is None
        assert dash.current_streak == 0
        assert dash.best_streak == 0
        assert dash.frequency == []
        assert dash.insight.verdict == NO_DATA
        assert len(grid_cells(dash.grid)) == 81

    def test_logged_today(self):
        history = {days_ago_key(NOW, i): make_record(MOODS[1], NOW) for i in range(3)}
        dash = build_dashboard(history, NOW)
        assert dash.today_key == "2026-03-18"
        assert dash.today_mood == MOODS[1]
        assert dash.current_streak == 3
        assert dash.best_streak == 3
        entry, width = dash.frequency[0]
        assert (entry.mood, entry.count, width) == (MOODS[1], 3, 100)

    def test_views_agree_on_today(self):
        dash = build_dashboard({}, NOW)
        today_cells = [c for c in grid_cells(dash.grid) if c.days_ago == 0]
        assert today_cells[0].date_key == dash.today_key
        assert today_cells[0].col == 11

    def test_unknown_label_today(self):
        history = {"2026-03-18": {"emoji": "🫥", "label": "Meh", "color": "#000000", "timestamp": ""}}
        dash = build_dashboard(history, NOW)
        assert dash.today_record["label"] == "Meh"
        assert dash.today_mood is None
        assert dash.current_streak == 1
        assert dash.insight.current_avg == 5

"""Tests for moodstreak.insights — weekly windows and trend verdicts."""
from datetime import datetime

import pytest

from moodstreak.catalog import get_mood_by_label, make_record
from moodstreak.dates import days_ago_key
from moodstreak.insights import (
    DOWNWARD,
    NO_DATA,
    STEADY,
    TREND_DISPLAY,
    UPWARD,
    WEEK_EMPTY_CURRENT,
    WEEK_EMPTY_PREVIOUS,
    average_positivity,
    classify_trend,
    most_frequent_label,
    week_entries,
    weekly_insight,
)

NOW = datetime(2026, 3, 18, 9, 30)


def _rec(label):
    mood = get_mood_by_label(label)
    if mood is None:
        return {"emoji": "🫥", "label": label, "color": "#123456", "timestamp": NOW.isoformat()}
    return make_record(mood, NOW)


def _history(by_offset):
    """{days_ago: label} -> history."""
    return {days_ago_key(NOW, i): _rec(label) for i, label in by_offset.items()}


class TestWeekEntries:
    def test_current_week_covers_today_through_six_days_ago(self):
        history = _history({0: "Good", 6: "Sad", 7: "Angry"})
        labels = [e["label"] for e in week_entries(history, NOW, 0)]
        assert labels == ["Good", "Sad"]

    def test_previous_week(self):
        history = _history({6: "Sad", 7: "Angry", 13: "Low", 14: "Joyful"})
        labels = [e["label"] for e in week_entries(history, NOW, 7)]
        assert labels == ["Angry", "Low"]

    def test_skips_missing_days(self):
        assert week_entries(_history({3: "Good"}), NOW, 0) == [_rec("Good")]

    def test_empty(self):
        assert week_entries({}, NOW, 0) == []

    def test_empty_record_still_counts_as_logged(self):
        history = {days_ago_key(NOW, 0): {}}
        assert week_entries(history, NOW, 0) == [{}]
        assert weekly_insight(history, NOW).verdict == WEEK_EMPTY_PREVIOUS


class TestAveragePositivity:
    def test_empty_is_zero(self):
        assert average_positivity([]) == 0

    def test_mean(self):
        assert average_positivity([_rec("Joyful"), _rec("Sad")]) == 5.0

    def test_unknown_label_is_neutral(self):
        assert average_positivity([_rec("Meh")]) == 5
        assert average_positivity([_rec("Meh"), _rec("Joyful")]) == 6.5


class TestMostFrequentLabel:
    def test_empty(self):
        assert most_frequent_label([]) is None

    def test_highest_count(self):
        entries = [_rec("Sad"), _rec("Good"), _rec("Good")]
        assert most_frequent_label(entries) == "Good"

    def test_tie_goes_to_first_seen(self):
        entries = [_rec("Sad"), _rec("Joyful"), _rec("Joyful"), _rec("Sad")]
        assert most_frequent_label(entries) == "Sad"
        assert most_frequent_label(list(reversed(entries))) == "Sad"
        entries = [_rec("Joyful"), _rec("Sad"), _rec("Sad"), _rec("Joyful")]
        assert most_frequent_label(entries) == "Joyful"


class TestClassifyTrend:
    A = [_rec("Good")]

    def test_both_empty(self):
        assert classify_trend([], [], 0, 0) == NO_DATA

    def test_current_empty(self):
        assert classify_trend([], self.A, 0, 7) == WEEK_EMPTY_CURRENT

    def test_previous_empty(self):
        assert classify_trend(self.A, [], 7, 0) == WEEK_EMPTY_PREVIOUS

    @pytest.mark.parametrize("cur, prev, verdict", [
        (6.0, 5.0, UPWARD),
        (5.5, 5.0, STEADY),
        (5.0, 5.0, STEADY),
        (4.5, 5.0, STEADY),
        (4.0, 5.0, DOWNWARD),
    ])
    def test_threshold(self, cur, prev, verdict):
        assert classify_trend(self.A, self.A, cur, prev) == verdict

    def test_every_verdict_has_icon_and_message(self):
        for verdict in (NO_DATA, WEEK_EMPTY_CURRENT, WEEK_EMPTY_PREVIOUS, UPWARD, DOWNWARD, STEADY):
            icon, message = TREND_DISPLAY[verdict]
            assert icon and message


class TestWeeklyInsight:
    def test_downward_week(self):
        """Five Joyful days last week, five Sad days this week."""
        by_offset = {i: "Joyful" for i in range(7, 12)}
        by_offset.update({i: "Sad" for i in range(0, 5)})
        insight = weekly_insight(_history(by_offset), NOW)
        assert insight.verdict == DOWNWARD
        assert insight.current_top == "Sad"
        assert insight.previous_top == "Joyful"
        assert insight.current_avg == 2
        assert insight.previous_avg == 8
        assert insight.icon == "📉"

    def test_upward_week(self):
        by_offset = {8: "Angry", 9: "Anxious", 1: "Good", 2: "Joyful"}
        insight = weekly_insight(_history(by_offset), NOW)
        assert insight.verdict == UPWARD

    def test_no_data(self):
        insight = weekly_insight({}, NOW)
        assert insight.verdict == NO_DATA
        assert insight.current_top is None
        assert insight.message == TREND_DISPLAY[NO_DATA][1]

    def test_only_this_week(self):
        insight = weekly_insight(_history({0: "Good"}), NOW)
        assert insight.verdict == WEEK_EMPTY_PREVIOUS

    def test_only_last_week(self):
        insight = weekly_insight(_history({9: "Good"}), NOW)
        assert insight.verdict == WEEK_EMPTY_CURRENT

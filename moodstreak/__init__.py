"""Mood Streak — a terminal mood tracker with streaks, trends and a 12-week heatmap."""

__version__ = "1.0.0"

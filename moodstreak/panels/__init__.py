"""Panel widgets for the Mood Streak TUI."""
from __future__ import annotations

import re

from rich.markup import escape

HEX_COLOR = re.compile(r"#[0-9A-Fa-f]{6}")
_BARE_BRACKET = re.compile(r"(?<!\\)\[")


def record_text(value) -> str:
    """Escape a stored record field for markup.

    Textual opens a tag at any unescaped ``[``, so brackets that rich's
    ``escape`` leaves alone (``"[bold"``) are escaped too.
    """
    text = _BARE_BRACKET.sub(r"\\[", escape(str(value)))
    if text.endswith("\\"):
        text += " "
    return text


def record_color(record: dict | None, default: str) -> str:
    """The record's ``#RRGGBB`` color, or ``default`` if it has none."""
    color = record.get("color") if record else None
    if isinstance(color, str) and HEX_COLOR.fullmatch(color):
        return color
    return default

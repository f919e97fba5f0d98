"""Data persistence layer for Mood Streak — stores history in ~/.moodstreak/data.json

The file holds one JSON object keyed by date-key (YYYY-MM-DD), one mood
record per day. Storage failures are logged and never raised: the in-memory
history stays authoritative for the session.
"""
from __future__ import annotations

import json
import logging
import os
import time
from datetime import datetime
from pathlib import Path

from moodstreak.catalog import get_mood_by_label, make_record
from moodstreak.dates import today_key

logger = logging.getLogger(__name__)

DATA_DIR = Path.home() / ".moodstreak"
DATA_FILE = DATA_DIR / "data.json"
LOG_FILE = DATA_DIR / "moodstreak.log"

DATA_ENV = "MOODSTREAK_DATA"
LOG_LEVEL_ENV = "MOODSTREAK_LOG_LEVEL"


def resolve_data_file() -> Path:
    env = os.environ.get(DATA_ENV)
    if env:
        return Path(env).expanduser()
    return DATA_FILE


class DataManager:
    def __init__(self, path: Path | str | None = None):
        self.path = Path(path) if path else resolve_data_file()
        self.last_save_ok = True
        self._history = self.load()

    # ── Storage ───────────────────────────────────────────
    def load(self) -> dict[str, dict]:
        """Read history from disk. Missing, empty, corrupt or unreadable
        files all come back as an empty history."""
        if not self.path.exists():
            return {}
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Failed to read mood data from %s: %s", self.path, exc)
            return {}
        if not text.strip():
            return {}

        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            logger.warning("Mood data in %s is not valid JSON: %s", self.path, exc)
            self._backup_corrupt(text)
            return {}

        if not isinstance(data, dict):
            logger.warning("Mood data in %s is not a JSON object, ignoring it", self.path)
            return {}

        history = {}
        for key, record in data.items():
            if not isinstance(record, dict):
                logger.warning("Skipping malformed mood record for %r", key)
                continue
            history[key] = record
        return history

    def _backup_corrupt(self, text: str) -> None:
        backup = self.path.with_name(f"{self.path.stem}.corrupt-{int(time.time())}.json")
        try:
            backup.write_text(text, encoding="utf-8")
            logger.info("Backed up unreadable mood data to %s", backup)
        except OSError as exc:
            logger.warning("Could not back up unreadable mood data: %s", exc)

    def save(self) -> bool:
        """Write history atomically. Returns False (and logs) on failure."""
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(self._history, f, indent=2, ensure_ascii=False)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self.path)
        except OSError as exc:
            logger.error("Failed to save mood data to %s: %s", self.path, exc)
            try:
                tmp.unlink(missing_ok=True)
            except OSError:
                logger.debug("Could not remove %s", tmp)
            self.last_save_ok = False
            return False
        self.last_save_ok = True
        return True

    def clear(self) -> None:
        """Remove all persisted history."""
        try:
            self.path.unlink(missing_ok=True)
        except OSError as exc:
            logger.error("Failed to remove mood data at %s: %s", self.path, exc)

    def has_stored_data(self) -> bool:
        return self.path.exists()

    # ── History ───────────────────────────────────────────
    @property
    def history(self) -> dict[str, dict]:
        return self._history

    def get_record(self, key: str) -> dict | None:
        return self._history.get(key)

    def log_mood(self, label: str, now: datetime | None = None) -> dict:
        """Record ``label`` for today, replacing any earlier entry for today."""
        mood = get_mood_by_label(label)
        if mood is None:
            raise ValueError(f"Unknown mood: {label!r}")
        now = now or datetime.now()
        record = make_record(mood, now)
        self._history[today_key(now)] = record
        self.save()
        return record

    def seed(self, records: dict[str, dict]) -> int:
        """Bulk-merge records keyed by date-key. Returns how many were merged."""
        merged = 0
        for key, record in records.items():
            if not isinstance(record, dict):
                logger.warning("Skipping malformed seed record for %r", key)
                continue
            self._history[key] = dict(record)
            merged += 1
        if merged:
            self.save()
        return merged

    def reset(self) -> None:
        """Forget every record, in memory and on disk."""
        self._history = {}
        self.clear()

"""Entry point for Mood Streak — run with `python -m moodstreak` or `moodstreak`."""
import logging
import os
import sys
import traceback


def setup_logging() -> None:
    """Log to a file (the terminal belongs to the TUI) and to the textual
    devtools console."""
    from textual.logging import TextualHandler

    from moodstreak.data import LOG_FILE, LOG_LEVEL_ENV

    level = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    handlers: list[logging.Handler] = [TextualHandler()]
    try:
        LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(LOG_FILE, encoding="utf-8"))
    except OSError as exc:
        print(f"Logging to file disabled: {exc}", file=sys.stderr)

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=handlers,
    )


def main():
    try:
        setup_logging()

        from moodstreak.app import MoodStreakApp
        app = MoodStreakApp()
        app.run()
    except Exception:
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()

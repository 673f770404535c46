"""Wellness Bot entry point: collect, calculate, report."""

from __future__ import annotations

import logging
import sys

from wellness.assessment.calculator import calculate_metrics
from wellness.assessment.collector import Prompter, collect_profile
from wellness.assessment.presenter import render_report
from wellness.config import settings

logger = logging.getLogger(__name__)

WELCOME_BANNER = "Welcome to the Wellness Bot!\n============================\n"
FAREWELL = "\nThank you for using Wellness Bot! Stay healthy!"


def configure_logging() -> None:
    """Raises ValueError when the configured level is not a logging level name."""
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {settings.log_level!r}")
    logging.basicConfig(format=settings.log_format, level=level)


def main(prompter: Prompter | None = None) -> int:
    """Run one assessment. Returns the process exit code."""
    prompter = prompter or Prompter()
    prompter.say(WELCOME_BANNER)
    try:
        profile = collect_profile(prompter)
        calculate_metrics(profile)
        report = render_report(profile)
    except Exception as e:
        logger.debug("Assessment failed", exc_info=True)
        print(f"An error occurred: {e}", file=sys.stderr)
        return 1

    prompter.say(report)
    prompter.say(FAREWELL)
    return 0


def run() -> None:
    try:
        configure_logging()
    except ValueError as e:
        print(f"An error occurred: {e}", file=sys.stderr)
        sys.exit(1)
    sys.exit(main())


if __name__ == "__main__":
    run()

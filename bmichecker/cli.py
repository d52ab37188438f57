#!/usr/bin/env python3
"""
Command-line entry point for BMI Checker.

Usage:
    bmichecker
    python -m bmichecker

Command-line arguments are accepted but ignored.
"""

import logging
import sys

from bmichecker.checker import BmiChecker
from bmichecker.core.config import Settings, get_settings
from bmichecker.core.exceptions import BmiCheckerError
from bmichecker.prompts.console import Console

logger = logging.getLogger(__name__)


def setup_logging(settings: Settings) -> None:
    """Configure logging to stderr."""
    logging.basicConfig(
        level=settings.log_level_number,
        format=settings.log_format,
        datefmt=settings.log_datefmt,
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point.

    Args:
        argv: Ignored

    Returns:
        Process exit status: 0 on success, 1 on any fatal error
    """
    try:
        setup_logging(get_settings())
    except BmiCheckerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    with Console.from_streams() as console:
        try:
            BmiChecker(console).run()
        except BmiCheckerError as e:
            logger.error(f"BMI check failed: {e}")
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Logging configuration for the command-line entry point.

Library code only calls ``logging.getLogger(__name__)``; handlers are
attached here, once, by the CLI.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def configure_logging(level: str = "WARNING") -> None:
    """Attach a stderr handler to the root logger at *level*."""
    root = logging.getLogger()
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    root.setLevel(numeric_level)

    # Only configure if no handlers exist
    if root.handlers:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

"""Structured logging setup.

Provides consistent logging across the codebase.
"""

from __future__ import annotations

import logging
import sys


def setup_logging(level: str = "WARNING", format_string: str | None = None) -> None:
    """Configure the root logger once for CLI entry-points.

    Library code never calls this; it only asks for module loggers.
    Records go to stderr so they never mix with command output.
    """

    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=format_string,
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def get_logger(name: str) -> logging.Logger:
    """Get logger for a module (typically `__name__`)."""

    return logging.getLogger(name)

"""Logging configuration for date-reaper."""

from __future__ import annotations

import logging
import sys


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Attach a stderr handler to the package logger.

    Calling it again adjusts the level and rebinds the handler to the
    current sys.stderr, so the CLI callback can run more than once in a
    process (e.g. under test runners).
    """
    logger = logging.getLogger("date_reaper")
    numeric = getattr(logging, level.upper(), logging.WARNING)
    logger.setLevel(numeric)

    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(numeric)
            if isinstance(handler, logging.StreamHandler):
                handler.setStream(sys.stderr)
        return logger

    # stdout carries the report; diagnostics go to stderr
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric)
    handler.setFormatter(
        logging.Formatter("[%(asctime)s] %(levelname)s - %(name)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )
    logger.addHandler(handler)
    return logger

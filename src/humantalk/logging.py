"""Centralized logging configuration using loguru."""

import sys

from loguru import logger


def init_logger(level: str = "WARNING") -> None:
    """Send humantalk's own diagnostics to stderr at the given level."""
    # stdout is reserved for the user-facing lines written by Config
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), colorize=True)
    logger.enable("humantalk")


__all__ = ["init_logger", "logger"]

"""Designed to make talking with the user easier."""

from humantalk.fatal import FATAL_EXIT_CODE, REPORT_FAILED_EXIT_CODE, CrashReportError
from humantalk.logging import init_logger, logger
from humantalk.models import (
    DEFAULT_BUG_REPORT,
    BugReport,
    Color,
    FatalReport,
    Severity,
    to_color256,
)
from humantalk.talk import Config
from humantalk.version import VERSION, get_machine_info

# Silent until the host application opts in through init_logger
logger.disable("humantalk")

__all__ = [
    "DEFAULT_BUG_REPORT",
    "FATAL_EXIT_CODE",
    "REPORT_FAILED_EXIT_CODE",
    "VERSION",
    "BugReport",
    "Color",
    "Config",
    "CrashReportError",
    "FatalReport",
    "Severity",
    "get_machine_info",
    "init_logger",
    "to_color256",
]

"""Severity-tagged, colorized console output."""

import os
from collections.abc import Mapping
from typing import NoReturn

from rich.console import Console
from rich.text import Text

from humantalk.config import Settings
from humantalk.fatal import report_fatal
from humantalk.models import (
    DEFAULT_BUG_REPORT,
    BugReport,
    Color,
    ColorLike,
    FatalReport,
    Severity,
    to_color256,
)
from humantalk.version import get_machine_info

DEFAULT_COLORS: dict[Severity, ColorLike] = {
    Severity.ERROR: Color.RED,
    Severity.WARNING: Color.YELLOW,
    Severity.INFO: Color.GREEN,
    Severity.DEBUG: Color.BLUE,
}

# Used for any severity missing from the color map
FALLBACK_COLOR = Color.WHITE


class Config:
    """
    🗣️ Talks to the user through the console.

    Holds the color used for each severity and, optionally, where users
    should report crashes.

    Example:
        config = Config()
        config.error("oh no!")  # non fatal
        config.debug("not shown when include_debug is off")
    """

    def __init__(
        self,
        colors: Mapping[Severity, ColorLike] | None = None,
        bug_report: BugReport | None = None,
        *,
        include_debug: bool | None = None,
        crash_report_path: str | os.PathLike | None = None,
        console: Console | None = None,
    ) -> None:
        """
        Create a configuration, with the default colors unless given.

        Args:
            colors: Color per severity; severities left out print in white
            bug_report: Shown on fatal errors; a generic one is used if None
            include_debug: Print debug messages (defaults to settings)
            crash_report_path: Crash log location (defaults to settings)
            console: Output console (defaults to standard output)

        Raises:
            ValueError: If any of the colors is not a valid color
            pydantic.ValidationError: If include_debug or crash_report_path
                is left unset and the HUMANTALK_* environment or .env holds
                an invalid value for one of the settings
        """
        settings = None
        if include_debug is None or crash_report_path is None:
            settings = Settings()

        source = DEFAULT_COLORS if colors is None else colors
        self.colors: dict[Severity, ColorLike] = {}
        for severity, color in source.items():
            self.set_color(severity, color)

        self.bug_report = bug_report
        self.include_debug = (
            settings.include_debug if include_debug is None else include_debug
        )
        self.crash_report_path = (
            settings.crash_report_path
            if crash_report_path is None
            else crash_report_path
        )
        self.console = console or Console(highlight=False)

    @classmethod
    def default(cls) -> "Config":
        """Default colors, no bug report."""
        return cls()

    @classmethod
    def custom(
        cls, colors: Mapping[Severity, ColorLike], bug_report: BugReport
    ) -> "Config":
        """
        Create a configuration with your own colors and bug report.

        For a custom bug report with the stock colors:
            Config.custom(Config.default().colors, BugReport(message=..., url=...))
        """
        return cls(colors, bug_report)

    def __repr__(self) -> str:
        return (
            f"Config(colors={self.colors!r}, bug_report={self.bug_report!r}, "
            f"include_debug={self.include_debug!r})"
        )

    def get_color(self, severity: Severity) -> ColorLike:
        """Color for a severity, white if none is set."""
        return self.colors.get(severity, FALLBACK_COLOR)

    def set_color(self, severity: Severity, color: ColorLike) -> None:
        """
        Set the color for one severity level.

        Raises:
            ValueError: If color is not a Color or an int in 0-255
        """
        if not isinstance(severity, Severity):
            raise ValueError(f"Not a severity: {severity!r}")
        to_color256(color)
        self.colors[severity] = color

    def style_for(self, severity: Severity) -> str:
        return f"color({to_color256(self.get_color(severity))})"

    def write(self, severity: Severity, message: str) -> None:
        """Print '[severity] message' in the severity's color."""
        if severity is Severity.DEBUG and not self.include_debug:
            return

        line = Text(f"[{severity}] {message}", style=self.style_for(severity))
        self.console.print(line, soft_wrap=True)

    def debug(self, message: str) -> None:
        """Shorthand for config.write(Severity.DEBUG, ...)."""
        self.write(Severity.DEBUG, message)

    def info(self, message: str) -> None:
        """Shorthand for config.write(Severity.INFO, ...)."""
        self.write(Severity.INFO, message)

    def warning(self, message: str) -> None:
        """Shorthand for config.write(Severity.WARNING, ...)."""
        self.write(Severity.WARNING, message)

    def error(self, message: str) -> None:
        """Shorthand for config.write(Severity.ERROR, ...)."""
        self.write(Severity.ERROR, message)

    def machine_info(self) -> str:
        """OS family, OS, arch, interpreter, compiler and humantalk versions."""
        return get_machine_info()

    def fatal_report(self, message: str) -> FatalReport:
        """
        Print the fatal report and save it to the crash log, without exiting.

        Returns:
            FatalReport with the exit code the process should use
        """
        return report_fatal(
            self.console,
            message,
            self.bug_report or DEFAULT_BUG_REPORT,
            self.crash_report_path,
        )

    def fatal_error(self, message: str) -> NoReturn:
        """
        Error fatally: report the error, then exit.

        Exits with code 3 once the report is saved, or 255 if the crash log
        could not be written.
        """
        report = self.fatal_report(message)
        raise SystemExit(report.exit_code)

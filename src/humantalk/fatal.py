"""Fatal error reporting.

Composes the crash report shown to the user, prints it, and persists it to
a plaintext log the user can attach to a bug report.
"""

import contextlib
import os
import stat
import tempfile
from pathlib import Path
from typing import Literal

from rich.console import Console
from rich.text import Text

from humantalk.logging import logger
from humantalk.models import BugReport, Color, FatalReport, to_color256
from humantalk.version import get_machine_info

# The fatal error was reported, crash log included
FATAL_EXIT_CODE = 3
# Reporting itself failed; the unsigned form of -1
REPORT_FAILED_EXIT_CODE = 255

DEFAULT_LOG_NAME = "crash_report.log"
PLATFORM_INFO_LABEL = "[PLATFORM INFO]"

_FAILURE_NOTICES = {
    "create": "Failed to create debug file - just copy the information displayed above.",
    "write": "Failed to write to debug file - just copy the information displayed above.",
}


class CrashReportError(Exception):
    """Raised when the crash log could not be created or written."""

    def __init__(
        self, stage: Literal["create", "write"], path: Path, cause: OSError
    ) -> None:
        super().__init__(f"Could not {stage} crash report {path}: {cause}")
        self.stage = stage
        self.path = path
        self.cause = cause


def compose_report(
    message: str, bug_report: BugReport, log_name: str = DEFAULT_LOG_NAME
) -> str:
    """Build the '[FATAL] ...' text shared by the console and the crash log."""
    return (
        f"[FATAL] {message}\n"
        f"{bug_report.message}. Please submit a report to {bug_report.url}, "
        "along with a copy of this error message, which can also be found "
        f"in {log_name} as plaintext."
    )


def platform_block(machine_info: str) -> str:
    return f"{PLATFORM_INFO_LABEL}\n{machine_info}"


def _report_mode(target: Path) -> int:
    """Mode for a new crash log: the previous log's, else 0o666 minus the umask."""
    try:
        return stat.S_IMODE(os.stat(target).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_crash_report(path: str | os.PathLike, text: str) -> Path:
    """
    Write the crash log, replacing any previous one in a single step.

    The text goes to a temporary file next to the target which is then
    renamed over it, so the log is never left half-written.

    Args:
        path: Destination of the crash log
        text: Full report text

    Returns:
        The path written to

    Raises:
        CrashReportError: With stage 'create' if the file could not be
            created, or 'write' if writing or replacing it failed
    """
    target = Path(path)
    try:
        fd, tmp_name = tempfile.mkstemp(
            dir=target.parent, prefix=f".{target.name}.", suffix=".tmp"
        )
    except OSError as exc:
        raise CrashReportError("create", target, exc) from exc

    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(text)
        os.chmod(tmp_name, _report_mode(target))
        os.replace(tmp_name, target)
    except OSError as exc:
        with contextlib.suppress(FileNotFoundError):
            os.unlink(tmp_name)
        raise CrashReportError("write", target, exc) from exc

    return target


def report_fatal(
    console: Console,
    message: str,
    bug_report: BugReport,
    log_path: str | os.PathLike,
) -> FatalReport:
    """
    💥 Print and persist a fatal error report.

    The report is always printed before the crash log is attempted, so the
    user sees it even when the log cannot be written.

    Args:
        console: Where the report is printed
        message: What went wrong
        bug_report: Where to point the user
        log_path: Destination of the crash log

    Returns:
        FatalReport describing what was printed and written, with the exit
        code the process should terminate with
    """
    body = compose_report(message, bug_report, os.fspath(log_path))
    machine_info = get_machine_info()
    platform_text = platform_block(machine_info)

    console.print(
        Text(body + "\n", style=f"color({to_color256(Color.RED)})"), soft_wrap=True
    )
    console.print(
        Text(platform_text, style=f"color({to_color256(Color.CYAN)})"),
        soft_wrap=True,
    )

    failure = None
    try:
        written = write_crash_report(log_path, f"{body}\n{platform_text}")
    except CrashReportError as exc:
        logger.opt(exception=exc.cause).error(
            "Crash report could not be saved stage={stage} path={path}",
            stage=exc.stage,
            path=str(exc.path),
        )
        console.print(Text(_FAILURE_NOTICES[exc.stage]), soft_wrap=True)
        failure = exc.stage
    else:
        logger.info("Crash report saved path={path}", path=str(written))

    return FatalReport(
        message=message,
        body=body,
        platform_info=machine_info,
        log_path=str(log_path),
        log_written=failure is None,
        failure=failure,
        exit_code=FATAL_EXIT_CODE if failure is None else REPORT_FAILED_EXIT_CODE,
    )

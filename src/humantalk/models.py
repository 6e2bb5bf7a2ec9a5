"""Data models for humantalk."""

from enum import Enum, IntEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Severity(Enum):
    """Importance of a message, also used as its printed tag."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    DEBUG = "debug"

    def __str__(self) -> str:
        return self.value


class Color(IntEnum):
    """
    🎨 The eight named terminal colors.

    Each member's value is its index in the 256-color palette. Anywhere a
    color is accepted, a plain int between 0 and 255 works as well.
    """

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7


ColorLike = Color | int


def to_color256(color: ColorLike) -> int:
    """
    Convert a color to its 256-color palette index.

    Args:
        color: A named Color, or an int palette index

    Returns:
        The palette index (0-255)

    Raises:
        ValueError: If the value is not a color or falls outside the palette
    """
    # bool is an int subclass but never a meaningful color
    if isinstance(color, bool) or not isinstance(color, int):
        raise ValueError(f"Not a color: {color!r}")
    if not 0 <= color <= 255:
        raise ValueError(f"Color index out of range (0-255): {color}")
    return int(color)


class BugReport(BaseModel):
    """
    🐛 Where users should send crash reports.

    Shown as part of the fatal report, e.g.
    "<message>. Please submit a report to <url>, ..."
    """

    model_config = ConfigDict(frozen=True)

    message: str = Field(..., description="Explanation shown when the program crashes")
    url: str = Field(..., description="Where users are pointed to file the report")


DEFAULT_BUG_REPORT = BugReport(
    message="Oh no! The program has crashed",
    url="the appropriate place",
)


class FatalReport(BaseModel):
    """
    💥 Outcome of reporting a fatal error.

    Returned by Config.fatal_report so the caller can decide how to
    terminate; Config.fatal_error exits with exit_code.
    """

    model_config = ConfigDict(frozen=True)

    message: str = Field(..., description="The fatal message as given by the caller")
    body: str = Field(..., description="Composed report text, starting with [FATAL]")
    platform_info: str = Field(..., description="Machine info line")
    log_path: str = Field(..., description="Path the crash log was written to")
    log_written: bool = Field(..., description="Whether the crash log was persisted")
    failure: Literal["create", "write"] | None = Field(
        None, description="Which step of writing the crash log failed, if any"
    )
    exit_code: int = Field(..., description="Status the process should exit with")

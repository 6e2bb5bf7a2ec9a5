"""Configuration values for the humantalk package."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="HUMANTALK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # False under `python -O`, which stands in for a release build
    include_debug: bool = Field(
        __debug__, description="Print debug-level messages"
    )

    crash_report_path: str = Field(
        "crash_report.log", description="Where fatal errors persist their report"
    )

    log_level: str = Field("WARNING", description="Level for humantalk's own logs")

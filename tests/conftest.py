"""Shared pytest fixtures for humantalk tests."""

import io

import pytest
from loguru import logger
from rich.console import Console

from humantalk.version import get_machine_info


@pytest.fixture(autouse=True)
def disable_loguru():
    """Disable loguru output during tests for cleaner output."""
    logger.disable("humantalk")
    yield
    logger.enable("humantalk")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep HUMANTALK_* variables from the host out of the tests."""
    monkeypatch.delenv("HUMANTALK_INCLUDE_DEBUG", raising=False)
    monkeypatch.delenv("HUMANTALK_CRASH_REPORT_PATH", raising=False)
    monkeypatch.delenv("HUMANTALK_LOG_LEVEL", raising=False)


@pytest.fixture
def machine_info_cache():
    """Recompute machine info for tests that patch the platform."""
    get_machine_info.cache_clear()
    yield
    get_machine_info.cache_clear()


@pytest.fixture
def plain_console():
    """Console writing uncolored text to a buffer."""
    return Console(file=io.StringIO(), color_system=None, highlight=False, width=80)


@pytest.fixture
def color_console():
    """Console writing 256-color escape codes to a buffer."""
    return Console(
        file=io.StringIO(),
        force_terminal=True,
        color_system="256",
        no_color=False,
        highlight=False,
        width=80,
    )

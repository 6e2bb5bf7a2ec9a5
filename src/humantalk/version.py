"""Version and platform information for humantalk."""

import os
import platform
from functools import cache

# Bumped by hand on each release
VERSION = "0.1.1"

UNKNOWN = "unknown"

_OS_FAMILIES = {"posix": "unix", "nt": "windows"}


def get_os_family() -> str:
    """Get the OS family, e.g. 'unix' or 'windows'."""
    return _OS_FAMILIES.get(os.name, os.name or UNKNOWN)


def get_toolchain_version() -> str:
    """
    Get the interpreter running this program.

    Returns:
        Implementation and version, e.g. 'CPython 3.12.4', or 'unknown'.
    """
    implementation = platform.python_implementation()
    version = platform.python_version()
    if not version:
        return UNKNOWN
    return f"{implementation or 'Python'} {version}"


def get_compiler_version() -> str:
    """
    Get the compiler the interpreter was built with.

    Returns:
        Compiler string, e.g. 'GCC 13.2.0', or 'unknown' if not reported.
    """
    return platform.python_compiler() or UNKNOWN


@cache
def get_machine_info() -> str:
    """
    Get a one-line description of the host for crash reports.

    Contains the OS family, OS name, architecture, interpreter and compiler
    versions, and the humantalk version. Pieces that cannot be determined
    are reported as 'unknown'.
    """
    family = get_os_family()
    system = platform.system().lower() or UNKNOWN
    arch = platform.machine() or UNKNOWN

    return (
        f"{family}-{system}-{arch} - {get_toolchain_version()}, "
        f"compiled with {get_compiler_version()}. "
        f"information generated by humantalk {VERSION}"
    )

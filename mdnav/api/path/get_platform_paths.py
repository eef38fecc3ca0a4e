"""Select the PlatformPaths implementation for an OS family."""

import platform

from ._PosixPaths import _PosixPaths
from ._WindowsPaths import _WindowsPaths
from .PlatformPaths import PlatformPaths


def get_platform_paths(system: str | None = None) -> PlatformPaths:
    """Return path handling for ``system`` (defaults to ``platform.system()``).

    Any system name containing "windows" (case-insensitive) uses backslash
    separators; everything else is treated as POSIX.
    """
    system = system or platform.system()
    if "windows" in system.lower():
        return _WindowsPaths()
    return _PosixPaths()

"""Open targets with the operating system's default application."""

import logging
import os
import platform
import subprocess
from collections.abc import Callable
from typing import Any

from ..Notice import Notice
from ..Severity import Severity

logger = logging.getLogger(__name__)


class SystemOpener:
    """Launch ``xdg-open``, ``open`` or ``start`` depending on the OS family.

    Arguments are passed as an argv list, never through a shell, so paths
    need no escaping.
    """

    def __init__(self, system: str | None = None, runner: Callable[..., Any] = subprocess.Popen):
        self.system = system or platform.system()
        self.runner = runner

    def command_for(self, target: str) -> list[str] | None:
        """Return the argv that opens ``target``, or None for unsupported systems."""
        if self.system == "Linux":
            return ["xdg-open", target]
        if self.system == "Darwin":
            return ["open", target]
        if "windows" in self.system.lower():
            return ["cmd.exe", "/c", "start", "", target]
        return None

    def open(self, target: str) -> Notice | None:
        if target.startswith("~/"):
            target = os.path.expanduser(target)

        argv = self.command_for(target)
        if argv is None:
            message = f"Function unavailable for {self.system}. Please file an issue."
            logger.error(message)
            return Notice(message, Severity.ERROR)

        logger.debug("Launching %s", argv)
        try:
            self.runner(argv, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
        except OSError as exc:
            message = f"Could not open {target}: {exc}"
            logger.error(message)
            return Notice(message, Severity.ERROR)
        return None

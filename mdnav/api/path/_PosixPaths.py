"""Path handling for Linux, macOS and other POSIX systems."""

import os
import shlex

from .PlatformPaths import PlatformPaths


class _PosixPaths(PlatformPaths):
    name = "posix"
    sep = "/"

    def is_absolute(self, path: str) -> bool:
        return path.startswith("/") or path == "~" or path.startswith("~/")

    def expand_home(self, path: str) -> str:
        if path == "~" or path.startswith("~/"):
            return os.path.expanduser(path)
        return path

    def shell_quote(self, path: str) -> str:
        return shlex.quote(path)

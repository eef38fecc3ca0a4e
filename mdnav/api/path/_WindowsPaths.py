"""Path handling for the Windows family."""

import os
import re

from .PlatformPaths import PlatformPaths

_DRIVE = re.compile(r"^[A-Za-z]:[\\/]")


class _WindowsPaths(PlatformPaths):
    name = "windows"
    sep = "\\"

    def normalize_separators(self, path: str) -> str:
        return path.replace("/", "\\")

    def is_absolute(self, path: str) -> bool:
        path = self.normalize_separators(path)
        return bool(_DRIVE.match(path)) or path.startswith("\\") or path == "~" or path.startswith("~\\")

    def expand_home(self, path: str) -> str:
        path = self.normalize_separators(path)
        if path == "~" or path.startswith("~\\"):
            home = os.environ.get("USERPROFILE") or os.path.expanduser("~")
            return home + path[1:]
        return path

    def shell_quote(self, path: str) -> str:
        return f'"{path}"'

    def _comparable(self, path: str) -> str:
        return super()._comparable(self.normalize_separators(path)).lower()

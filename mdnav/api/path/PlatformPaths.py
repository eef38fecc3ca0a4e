"""Abstract base class for OS-family path string handling."""

from abc import ABC, abstractmethod


class PlatformPaths(ABC):
    """String-level path operations for one OS family.

    Link targets are handled as strings rather than ``Path`` objects so that
    a path written for one OS family can be resolved on any host.
    """

    name: str = ""
    sep: str = "/"

    @abstractmethod
    def is_absolute(self, path: str) -> bool:
        """Return True if ``path`` needs no base directory."""
        pass

    @abstractmethod
    def expand_home(self, path: str) -> str:
        """Replace a leading home marker with the home directory."""
        pass

    @abstractmethod
    def shell_quote(self, path: str) -> str:
        """Quote ``path`` for interpolation into a shell command line."""
        pass

    def normalize_separators(self, path: str) -> str:
        return path

    def join(self, base: str, path: str) -> str:
        """Join ``base`` and ``path`` with exactly one separator."""
        if not base:
            return path
        if base.endswith(self.sep):
            return f"{base}{path}"
        return f"{base}{self.sep}{path}"

    def dirname(self, path: str) -> str | None:
        """Return everything before the last separator, or None if there is none."""
        index = path.rfind(self.sep)
        if index < 0:
            return None
        if index == 0:
            return self.sep
        return path[:index]

    def _comparable(self, path: str) -> str:
        return path.rstrip(self.sep) or self.sep

    def is_under(self, path: str, root: str) -> bool:
        """Return True if ``path`` equals ``root`` or lies inside it (component-wise)."""
        path = self._comparable(path)
        root = self._comparable(root)
        if path == root:
            return True
        prefix = root if root.endswith(self.sep) else root + self.sep
        return path.startswith(prefix)

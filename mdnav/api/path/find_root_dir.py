"""Walk upward from a directory looking for a project root."""

from collections.abc import Callable
from pathlib import Path


def find_root_dir(start: Path, is_root: Callable[[Path], bool]) -> Path | None:
    """Return the nearest directory at or above ``start`` for which ``is_root`` holds."""
    for candidate in (start, *start.parents):
        if is_root(candidate):
            return candidate
    return None

"""Build a root-detection predicate from a configured marker."""

from collections.abc import Callable
from pathlib import Path


def make_root_predicate(root_tell: str | Callable[[Path], bool] | None) -> Callable[[Path], bool]:
    """Turn ``root_tell`` into a ``Path -> bool`` predicate.

    A string names a file or directory whose presence marks a root, e.g.
    ``".git"`` or ``"index.md"``. A callable is returned unchanged. ``None``
    never matches.
    """
    if callable(root_tell):
        return root_tell
    if not root_tell:
        return lambda _dir: False

    marker = root_tell

    def _has_marker(directory: Path) -> bool:
        return (directory / marker).exists()

    return _has_marker

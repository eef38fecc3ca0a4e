"""Apply the optional user link transform."""

from collections.abc import Callable
from typing import Any


def transform_link(raw: str, transform: Callable[[str], str] | Any = None) -> str:
    """Return ``transform(raw)`` if ``transform`` is callable, otherwise ``raw``."""
    if not callable(transform):
        return raw
    return transform(raw)

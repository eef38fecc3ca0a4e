"""Config API module."""

from .LinksConfig import LinksConfig
from .LogConfig import LogConfig
from .MdnavConfig import MdnavConfig
from .Perspective import Perspective, PerspectiveFallback, PerspectivePriority

__all__ = [
    "LinksConfig",
    "LogConfig",
    "MdnavConfig",
    "Perspective",
    "PerspectiveFallback",
    "PerspectivePriority",
]

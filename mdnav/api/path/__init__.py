"""Path resolution: platform handling, session roots and root tracking."""

from .find_root_dir import find_root_dir
from .get_platform_paths import get_platform_paths
from .make_root_predicate import make_root_predicate
from .PlatformPaths import PlatformPaths
from .resolve_link_path import resolve_link_path
from .ResolvedPath import ResolvedPath
from .RootTracker import RootTracker
from .SessionRoots import SessionRoots

__all__ = [
    "PlatformPaths",
    "ResolvedPath",
    "RootTracker",
    "SessionRoots",
    "find_root_dir",
    "get_platform_paths",
    "make_root_predicate",
    "resolve_link_path",
]

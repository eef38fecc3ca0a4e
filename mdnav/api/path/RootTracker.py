"""Keeps the session's project root in step with the active document."""

import logging
from collections.abc import Callable
from pathlib import Path

from ..config.Perspective import Perspective, PerspectivePriority
from ..Notice import Notice
from ..Severity import Severity
from .find_root_dir import find_root_dir
from .get_platform_paths import get_platform_paths
from .make_root_predicate import make_root_predicate
from .PlatformPaths import PlatformPaths
from .SessionRoots import SessionRoots

logger = logging.getLogger(__name__)


class RootTracker:
    """The only writer of ``SessionRoots.root_dir``."""

    def __init__(
        self,
        perspective: Perspective,
        roots: SessionRoots,
        is_root: Callable[[Path], bool] | None = None,
        platform_paths: PlatformPaths | None = None,
    ):
        """Initialize the tracker.

        Args:
            perspective: Resolution policy; tracking only happens for ``root`` priority
            roots: Session state to update
            is_root: Root predicate; built from ``perspective.root_tell`` if omitted
            platform_paths: Path handling; defaults to the running OS family
        """
        self.perspective = perspective
        self.roots = roots
        self.is_root = is_root or make_root_predicate(perspective.root_tell)
        self.paths = platform_paths or get_platform_paths()

    def update_root(self, current_doc_path: str | None) -> Notice | None:
        """Recompute the root if the document has left the recorded one.

        Returns:
            An info notice when the root switched, a warning the first time no
            root can be found, otherwise None
        """
        if self.perspective.priority != PerspectivePriority.ROOT:
            return None

        doc = self.paths.normalize_separators(current_doc_path or "")
        if self.roots.root_dir and doc and self.paths.is_under(doc, self.roots.root_dir):
            return None

        directory = self.paths.dirname(doc) if doc else None
        found = None
        if directory:
            found = find_root_dir(Path(self.paths.expand_home(directory)), self.is_root)

        if found is not None:
            self.roots.root_dir = str(found)
            self.roots.fallback_active = False
            logger.info("Switched roots: %s", found)
            return Notice(f"Switched roots: {found}", Severity.INFO)

        self.roots.root_dir = None
        if self.roots.fallback_active:
            logger.debug("Still no root for %s", current_doc_path)
            return None

        self.roots.fallback_active = True
        fallback = self.perspective.fallback.value
        logger.warning("No root found for %s; falling back to %s", current_doc_path, fallback)
        return Notice(
            f"Left root and found no alternative. Fallback perspective: {fallback}",
            Severity.WARNING,
        )

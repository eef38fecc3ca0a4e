"""Per-session directories used as resolution bases."""

from dataclasses import dataclass

from .PlatformPaths import PlatformPaths


@dataclass
class SessionRoots:
    """Mutable session state shared by the resolver and the root tracker.

    ``initial_dir`` is recorded once, from the first document seen.
    ``root_dir`` is written only by ``RootTracker``. ``fallback_active`` is
    True after a root search came up empty, so the fallback warning is not
    repeated until a root has been found again.
    """

    initial_dir: str | None = None
    root_dir: str | None = None
    fallback_active: bool = False

    def remember_initial(self, document_path: str | None, paths: PlatformPaths) -> None:
        """Record the directory of the first document, if not already set."""
        if self.initial_dir is not None or not document_path:
            return
        self.initial_dir = paths.dirname(paths.normalize_separators(document_path))

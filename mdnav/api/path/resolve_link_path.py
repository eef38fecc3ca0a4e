"""Perspective-relative resolution of link paths."""

import logging
from pathlib import PurePosixPath, PureWindowsPath

from ...constants import DEFAULT_IMPLICIT_EXTENSION
from ..config.Perspective import Perspective, PerspectiveFallback, PerspectivePriority
from ..link.LinkKind import LinkKind
from .get_platform_paths import get_platform_paths
from .PlatformPaths import PlatformPaths
from .ResolvedPath import ResolvedPath
from .SessionRoots import SessionRoots

logger = logging.getLogger(__name__)

_RESOLVABLE = (LinkKind.FILENAME, LinkKind.FILE)


def _has_extension(path: str, paths: PlatformPaths) -> bool:
    """True if the last component has a dot followed by at least one character.

    Dotfiles such as ``.hidden`` count as having an extension.
    """
    name = (PureWindowsPath(path) if paths.sep == "\\" else PurePosixPath(path)).name
    index = name.find(".")
    return 0 <= index < len(name) - 1


def _base_dir(
    perspective: Perspective,
    roots: SessionRoots,
    current_doc_path: str | None,
    paths: PlatformPaths,
) -> str | None:
    """Pick the directory a relative path is joined to, or None to leave it relative."""
    if perspective.priority == PerspectivePriority.ROOT and roots.root_dir:
        return roots.root_dir

    wants_first = perspective.priority == PerspectivePriority.FIRST or (
        perspective.priority == PerspectivePriority.ROOT and perspective.fallback == PerspectiveFallback.FIRST
    )
    if wants_first and roots.initial_dir:
        return roots.initial_dir

    if not current_doc_path:
        return None
    return paths.dirname(paths.normalize_separators(current_doc_path))


def resolve_link_path(
    kind: LinkKind,
    path_part: str,
    perspective: Perspective,
    roots: SessionRoots,
    current_doc_path: str | None,
    *,
    anchor: str | None = None,
    implicit_extension: str = DEFAULT_IMPLICIT_EXTENSION,
    platform_paths: PlatformPaths | None = None,
) -> ResolvedPath | None:
    """Resolve a filename or ``file:`` link path against the active perspective.

    Absolute paths (``/``, ``~/``, or a drive letter on Windows) are used as
    given after home expansion. Relative paths are joined to the recorded root
    directory, the first-opened file's directory or the current document's
    directory, in that order of preference according to ``perspective``.
    Plain filenames without an extension get ``implicit_extension``.

    Args:
        kind: Link kind; only FILENAME and FILE are resolved
        path_part: Path text (for FILE links, the part after ``file:``)
        perspective: Resolution policy
        roots: Session directories (read only)
        current_doc_path: Path of the document the link was followed from
        anchor: Optional heading anchor carried through to the result
        implicit_extension: Extension appended to extensionless filenames
        platform_paths: Path handling; defaults to the running OS family

    Returns:
        ResolvedPath, or None for URL, ANCHOR and CITATION links
    """
    if kind not in _RESOLVABLE:
        return None

    paths = platform_paths or get_platform_paths()
    path = paths.normalize_separators(path_part)

    if kind == LinkKind.FILENAME and not _has_extension(path, paths):
        if not implicit_extension.startswith("."):
            implicit_extension = f".{implicit_extension}"
        path = f"{path}{implicit_extension}"

    if paths.is_absolute(path):
        resolved = paths.expand_home(path)
    else:
        base = _base_dir(perspective, roots, current_doc_path, paths)
        resolved = paths.join(base, path) if base else path

    logger.debug("Resolved %s link %r to %r (%s)", kind.value, path_part, resolved, perspective.priority.value)
    return ResolvedPath(kind=kind, path=resolved, anchor=anchor, platform=paths.name)

"""Follow a link: classify, resolve and dispatch to the host."""

import logging
import os
from collections.abc import Callable
from pathlib import Path

from ..config.MdnavConfig import MdnavConfig
from ..link.classify_link import classify_link
from ..link.ClassifiedLink import ClassifiedLink
from ..link.has_url import has_url
from ..link.LinkKind import LinkKind
from ..link.split_anchor import split_anchor
from ..link.transform_link import transform_link
from ..Notice import Notice
from ..path.get_platform_paths import get_platform_paths
from ..path.PlatformPaths import PlatformPaths
from ..path.resolve_link_path import resolve_link_path
from ..path.ResolvedPath import ResolvedPath
from ..path.RootTracker import RootTracker
from ..path.SessionRoots import SessionRoots
from ..Severity import Severity
from .CitationLookup import CitationLookup
from .EditorHost import EditorHost
from .NavigationOutcome import (
    ACTION_CITATION,
    ACTION_JUMP_TO_HEADING,
    ACTION_NONE,
    ACTION_OPEN_BUFFER,
    ACTION_OPEN_EXTERNAL,
    NavigationOutcome,
)
from .Opener import Opener
from .SystemOpener import SystemOpener

logger = logging.getLogger(__name__)


class Navigator:
    """Dispatches link targets to the editor, the OS opener or the bibliography.

    One Navigator is kept per editing session; it owns the ``SessionRoots``
    that relative paths are resolved against.
    """

    def __init__(
        self,
        config: MdnavConfig,
        host: EditorHost,
        *,
        opener: Opener | None = None,
        citations: CitationLookup | None = None,
        roots: SessionRoots | None = None,
        link_transform: Callable[[str], str] | None = None,
        looks_like_url: Callable[[str], bool] = has_url,
        is_root: Callable[[Path], bool] | None = None,
        platform_paths: PlatformPaths | None = None,
    ):
        self.config = config
        self.host = host
        self.opener = opener or SystemOpener()
        self.citations = citations
        self.roots = roots or SessionRoots()
        self.link_transform = link_transform
        self.looks_like_url = looks_like_url
        self.paths = platform_paths or get_platform_paths()
        self.root_tracker = RootTracker(config.perspective, self.roots, is_root, self.paths)

    def follow(self, raw: str, anchor: str | None = None) -> NavigationOutcome:
        """Act on the link target ``raw``.

        Args:
            raw: Link target as it appears in the document
            anchor: Heading to jump to after opening a file; if omitted, a
                ``#heading`` suffix on a filename link is used

        Returns:
            NavigationOutcome describing the action taken and any notices
        """
        return self._follow(raw, anchor, depth=0)

    def update_root(self) -> Notice | None:
        """Re-check the project root for the host's current document."""
        notice = self.root_tracker.update_root(self.host.current_document_path())
        if notice is not None:
            self._notify(notice)
        return notice

    def _follow(self, raw: str, anchor: str | None, depth: int) -> NavigationOutcome:
        link = transform_link(raw, self.link_transform)
        classified = classify_link(link, self.looks_like_url)
        outcome = NavigationOutcome(kind=classified.kind)

        document = self.host.current_document_path()
        self.roots.remember_initial(document, self.paths)
        # First use: find the root the session starts in
        if self.roots.root_dir is None and not self.roots.fallback_active:
            notice = self.root_tracker.update_root(document)
            if notice is not None:
                self._record(notice, outcome)

        if classified.kind == LinkKind.FILENAME:
            self._handle_filename(classified, anchor, outcome)
        elif classified.kind == LinkKind.URL:
            self._handle_external(classified.remainder, outcome, check_exists=False)
        elif classified.kind == LinkKind.FILE:
            resolved = self._resolve(classified, classified.remainder, None)
            self._handle_external(resolved.path, outcome, check_exists=True)
        elif classified.kind == LinkKind.ANCHOR:
            self.host.jump_to_heading(classified.remainder)
            outcome.action = ACTION_JUMP_TO_HEADING
            outcome.anchor = classified.remainder
        elif classified.kind == LinkKind.CITATION:
            return self._handle_citation(classified, outcome, depth)

        return outcome

    def _resolve(self, classified: ClassifiedLink, path_part: str, anchor: str | None) -> ResolvedPath:
        resolved = resolve_link_path(
            classified.kind,
            path_part,
            self.config.perspective,
            self.roots,
            self.host.current_document_path(),
            anchor=anchor,
            implicit_extension=self.config.links.implicit_extension,
            platform_paths=self.paths,
        )
        if resolved is None:
            raise ValueError(f"{classified.kind.value} links cannot be resolved to a path")
        return resolved

    def _handle_filename(self, classified: ClassifiedLink, anchor: str | None, outcome: NavigationOutcome) -> None:
        path_part = classified.remainder
        if anchor is None:
            path_part, anchor = split_anchor(path_part)

        resolved = self._resolve(classified, path_part, anchor)
        self._ensure_parent_dir(resolved.path)

        self.host.open_buffer(resolved.path)
        outcome.action = ACTION_OPEN_BUFFER
        outcome.target = resolved.path
        outcome.anchor = resolved.anchor

        if resolved.anchor:
            self.host.jump_to_heading(resolved.anchor.lstrip("#"))

        notice = self.root_tracker.update_root(resolved.path)
        if notice is not None:
            self._record(notice, outcome)

    def _ensure_parent_dir(self, path: str) -> None:
        if not self.config.create_dirs:
            return
        directory = self.paths.dirname(path)
        if not directory:
            return
        target = Path(self.paths.expand_home(directory))
        if not target.is_dir():
            logger.info("Creating directory %s", target)
            target.mkdir(parents=True, exist_ok=True)

    def _handle_external(self, target: str, outcome: NavigationOutcome, check_exists: bool) -> None:
        if check_exists:
            local = Path(os.path.expanduser(target))
            if not local.is_file() and not local.is_dir():
                logger.warning("External target missing: %s", target)
                self._record(Notice(f"{target} doesn't seem to exist!", Severity.ERROR), outcome)
                return

        notice = self.opener.open(target)
        if notice is not None:
            self._record(notice, outcome)
            return
        outcome.action = ACTION_OPEN_EXTERNAL
        outcome.target = target

    def _handle_citation(self, classified: ClassifiedLink, outcome: NavigationOutcome, depth: int) -> NavigationOutcome:
        key = classified.remainder
        if depth > 0:
            self._record(Notice(f"Citation @{key} points at another citation; not following", Severity.WARNING), outcome)
            return outcome
        if self.citations is None:
            self._record(Notice(f"No bibliography available for @{key}", Severity.WARNING), outcome)
            return outcome

        field = self.citations.resolve_citation_key(key)
        if not field:
            self._record(Notice(f"No usable entry found for @{key}", Severity.WARNING), outcome)
            return outcome

        logger.debug("Citation @%s resolved to %r", key, field)
        inner = self._follow(field, None, depth=depth + 1)
        outcome.notices.extend(inner.notices)
        if inner.action != ACTION_NONE:
            outcome.action = ACTION_CITATION
            outcome.target = inner.target
            outcome.anchor = inner.anchor
        return outcome

    def _record(self, notice: Notice, outcome: NavigationOutcome) -> None:
        outcome.notices.append(notice)
        self._notify(notice)

    def _notify(self, notice: Notice) -> None:
        logger.info("Notice (%s): %s", notice.severity.value, notice.message)
        if self.config.silent:
            logger.debug("Silenced notice: %s", notice.message)
            return
        self.host.notify(notice.message, notice.severity)

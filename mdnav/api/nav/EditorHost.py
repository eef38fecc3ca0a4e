"""Protocol for the editor that hosts navigation."""

from typing import Protocol

from ..Severity import Severity


class EditorHost(Protocol):
    """Editor operations the navigator relies on."""

    def current_document_path(self) -> str | None:
        """Path of the active document, or None for an unnamed buffer."""
        ...

    def open_buffer(self, path: str) -> None:
        """Load (or create) a buffer for ``path`` and make it active."""
        ...

    def notify(self, message: str, severity: Severity) -> None: ...

    def jump_to_heading(self, text: str) -> None:
        """Move the cursor to the heading matching ``text``."""
        ...

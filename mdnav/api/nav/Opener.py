"""Protocol for opening targets with the default application."""

from typing import Protocol

from ..Notice import Notice


class Opener(Protocol):
    def open(self, target: str) -> Notice | None:
        """Open ``target`` outside the editor.

        Returns None once launched, or a notice explaining why nothing was.
        """
        ...

"""Outcome of following a link."""

from dataclasses import dataclass, field

from ..link.LinkKind import LinkKind
from ..Notice import Notice
from ..Severity import Severity

ACTION_OPEN_BUFFER = "open_buffer"
ACTION_OPEN_EXTERNAL = "open_external"
ACTION_JUMP_TO_HEADING = "jump_to_heading"
ACTION_CITATION = "citation"
ACTION_NONE = "none"


@dataclass
class NavigationOutcome:
    """What ``Navigator.follow`` did, and the notices it produced."""

    kind: LinkKind
    action: str = ACTION_NONE
    target: str | None = None
    anchor: str | None = None
    notices: list[Notice] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.action != ACTION_NONE and not any(n.severity == Severity.ERROR for n in self.notices)

"""Navigation: dispatch classified links to host collaborators."""

from .CitationLookup import CitationLookup
from .ConsoleHost import ConsoleHost
from .EditorHost import EditorHost
from .NavigationOutcome import NavigationOutcome
from .Navigator import Navigator
from .Opener import Opener
from .SystemOpener import SystemOpener

__all__ = [
    "CitationLookup",
    "ConsoleHost",
    "EditorHost",
    "NavigationOutcome",
    "Navigator",
    "Opener",
    "SystemOpener",
]

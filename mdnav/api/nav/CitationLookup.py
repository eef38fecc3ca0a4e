"""Protocol for bibliography lookups."""

from typing import Protocol


class CitationLookup(Protocol):
    def resolve_citation_key(self, key: str) -> str | None:
        """Return a link target (path or URL) for ``key``, or None if unknown."""
        ...

"""Result of resolving a link against a perspective."""

from dataclasses import dataclass

from ..link.LinkKind import LinkKind
from .get_platform_paths import get_platform_paths


@dataclass(frozen=True)
class ResolvedPath:
    kind: LinkKind
    path: str
    anchor: str | None = None
    platform: str = "posix"

    @property
    def shell_quoted(self) -> str:
        """The path quoted for the OS family it was resolved for."""
        return get_platform_paths(self.platform).shell_quote(self.path)

    def to_dict(self) -> dict[str, object]:
        return {
            "kind": self.kind.value,
            "path": self.path,
            "anchor": self.anchor,
        }

"""Perspective configuration: what relative link paths are resolved against."""

from __future__ import annotations

__all__ = ["Perspective", "PerspectiveFallback", "PerspectivePriority"]

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PerspectivePriority(str, Enum):
    CURRENT = "current"
    FIRST = "first"
    ROOT = "root"


class PerspectiveFallback(str, Enum):
    CURRENT = "current"
    FIRST = "first"


class Perspective(BaseModel):
    """Resolution policy for relative links.

    ``priority`` picks the base directory. ``fallback`` is used while
    ``priority`` is ``root`` but no root directory has been found.
    ``root_tell`` names the file or directory that marks a project root.
    """

    model_config = ConfigDict(extra="forbid")

    priority: PerspectivePriority = Field(PerspectivePriority.CURRENT, description="Primary resolution base")
    fallback: PerspectiveFallback = Field(PerspectiveFallback.CURRENT, description="Base used when no root is found")
    root_tell: str | None = Field(None, description="Marker file or directory identifying a root")

    @model_validator(mode="after")
    def _require_root_tell(self) -> Perspective:
        if self.priority == PerspectivePriority.ROOT and not self.root_tell:
            raise ValueError("root_tell is required when priority is 'root'")
        return self

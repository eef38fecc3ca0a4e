"""Link command output schemas."""

from pydantic import Field

from ._base import BaseOutputSchema


class LinkClassifyOutput(BaseOutputSchema):
    link: str = Field(..., description="Link target after the transform")
    kind: str = Field(..., description="Link kind")
    remainder: str = Field(..., description="Text after the kind's prefix")
    path: str | None = Field(None, description="Path part for filename links")
    anchor: str | None = Field(None, description="Heading anchor for filename links")


class LinkResolveOutput(BaseOutputSchema):
    link: str = Field(..., description="Link target as given")
    kind: str | None = Field(None, description="Link kind")
    resolved: str | None = Field(None, description="Resolved path, or None for kinds that are not resolved")
    anchor: str | None = Field(None, description="Heading anchor carried with the path")
    shell: str | None = Field(None, description="Resolved path quoted for the shell")
    root_dir: str | None = Field(None, description="Project root in effect")
    initial_dir: str | None = Field(None, description="First-opened file's directory")


class LinkFollowOutput(BaseOutputSchema):
    link: str = Field(..., description="Link target as given")
    kind: str | None = Field(None, description="Link kind")
    action: str = Field("none", description="Action taken")
    target: str | None = Field(None, description="Path or URL acted on")
    anchor: str | None = Field(None, description="Heading jumped to")

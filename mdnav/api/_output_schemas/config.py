"""Config command output schemas."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema


class ConfigShowOutput(BaseOutputSchema):
    section: str = Field(..., description="Section shown, empty for the section list")
    content: dict[str, Any] = Field(default_factory=dict, description="Section content")
    config_path: str = Field(..., description="Path to the config file")


class ConfigInitOutput(BaseOutputSchema):
    config_path: str = Field(..., description="Path to the config file")
    written: bool = Field(False, description="Whether a file was written")

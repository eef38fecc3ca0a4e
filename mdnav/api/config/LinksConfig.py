"""Link handling configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...constants import DEFAULT_IMPLICIT_EXTENSION


class LinksConfig(BaseModel):
    """Settings applied to plain filename links."""

    model_config = ConfigDict(extra="forbid")

    implicit_extension: str = Field(
        DEFAULT_IMPLICIT_EXTENSION, description="Extension appended to links that have none"
    )

    @field_validator("implicit_extension")
    @classmethod
    def _normalize_extension(cls, v: str) -> str:
        v = v.strip()
        if not v or v == ".":
            raise ValueError("implicit_extension must not be empty")
        return v if v.startswith(".") else f".{v}"

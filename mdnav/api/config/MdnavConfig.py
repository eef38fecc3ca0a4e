"""Top-level mdnav configuration."""

import json
import logging
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .get_config_path import get_config_path
from .LinksConfig import LinksConfig
from .LogConfig import LogConfig
from .Perspective import Perspective

logger = logging.getLogger(__name__)


class MdnavConfig(BaseModel):
    """Top-level configuration for link navigation."""

    model_config = ConfigDict(extra="forbid")

    perspective: Perspective = Field(default_factory=Perspective)
    links: LinksConfig = Field(default_factory=LinksConfig)
    create_dirs: bool = Field(True, description="Create missing parent directories before opening a file")
    silent: bool = Field(False, description="Suppress user-visible notices")
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on MDNAV_HOME or default to ~/.mdnav."""
        return get_config_path()

    @classmethod
    def load(cls) -> "MdnavConfig":
        """Load and validate config from file.

        A missing file yields the default configuration.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            logger.debug("No config file at %s, using defaults", path)
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        return cls.from_dict(raw)

    @classmethod
    def from_dict(cls, raw: Any) -> "MdnavConfig":
        """Validate a raw config mapping, flattening pydantic errors into ValueError."""
        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert MdnavConfig instance to a dictionary for serialization."""
        return self.model_dump(mode="json")

    def save(self) -> None:
        """Save the current configuration to a JSON file.

        Uses atomic write (write to temp file, then rename) to prevent corruption.
        """
        path = self.get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with temp_path.open("w") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except Exception as e:
            with suppress(Exception):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e

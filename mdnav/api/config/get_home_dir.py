"""Get mdnav home directory path or path under it."""

import os
from pathlib import Path

from ...constants import MDNAV_HOME_ENV, MDNAV_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get mdnav home directory path or path under it.

    Checks the MDNAV_HOME environment variable first, defaults to ~/.mdnav if not set.

    Args:
        *parts: Optional path components to join (e.g., "config.json")

    Returns:
        Absolute path to mdnav home directory or subpath under it

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.mdnav")
        >>> get_home_dir("config.json")
        Path("/Users/user/.mdnav/config.json")
    """
    home_env = os.environ.get(MDNAV_HOME_ENV)
    mdnav_home = Path(home_env).expanduser().resolve() if home_env else Path.home() / MDNAV_HOME_EXT

    return mdnav_home / Path(*parts) if parts else mdnav_home

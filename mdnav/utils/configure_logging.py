import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..constants import LOG_FILENAME, MDNAV_HOME_ENV, MDNAV_HOME_EXT

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(mdnav_home: Path | None = None, level: str | int = logging.INFO) -> None:
    """Configure unified mdnav logging.

    Args:
        mdnav_home: Path to mdnav home directory. If None, derived from environment.
        level: Level for the ``mdnav`` logger tree (name or number)
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if mdnav_home is None:
        env_home = os.environ.get(MDNAV_HOME_ENV)
        mdnav_home = Path(env_home).expanduser().resolve() if env_home else Path.home() / MDNAV_HOME_EXT

    mdnav_home.mkdir(parents=True, exist_ok=True)
    log_file = mdnav_home / LOG_FILENAME

    root_logger = logging.getLogger("mdnav")
    root_logger.setLevel(level)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}


def configure_logging(orgit_home: Path | None = None, level: str = "INFO", log_file: str = "orgit.log") -> None:
    """Configure unified orgit logging.

    Args:
        orgit_home: Path to orgit home directory. If None, derived from environment.
        level: One of DEBUG, INFO, WARN, ERROR.
        log_file: File name (or absolute path) of the log file.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if orgit_home is None:
        env_home = os.environ.get("ORGIT_HOME")
        orgit_home = Path(env_home).expanduser().resolve() if env_home else Path.home() / ".orgit"

    # Ensure directory exists
    orgit_home.mkdir(parents=True, exist_ok=True)
    log_path = orgit_home / log_file

    root_logger = logging.getLogger("orgit")
    root_logger.setLevel(_LEVELS.get(level, logging.INFO))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True

"""
Logging Configuration

Console output always; a rotating log file when one is configured.
Library modules only call logging.getLogger(__name__); applications call
setup_logging() once at startup.
"""
import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

from .config import Settings, get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the root logger.

    Args:
        level: Log level name. Falls back to IMAGES_LOG_LEVEL, then INFO.
            An unknown name raises pydantic.ValidationError.
        log_file: Path of the rotating log file. Falls back to IMAGES_LOG_FILE;
            when neither is set only the console handler is installed.

    Returns:
        The root logger.
    """
    env = get_settings()
    settings = Settings(
        log_level=level or env.log_level,
        log_file=log_file or env.log_file,
    )
    level = settings.log_level
    log_file = settings.log_file

    handlers = []

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    handlers.append(console_handler)

    if log_file:
        # 10MB per file, keep 5 backups
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8"
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handlers.append(file_handler)

    logging.basicConfig(level=level, handlers=handlers, force=True)

    root = logging.getLogger()
    if log_file:
        root.info(f"Logging to file: {log_file}")
    return root

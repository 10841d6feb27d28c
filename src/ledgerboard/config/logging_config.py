"""Logging configuration for the ledgerboard package and the server."""

import logging
import sys
from typing import Optional

from ledgerboard.config.settings import Settings, get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_NOISY_LOGGERS = {
    "matplotlib": logging.WARNING,
    "PIL": logging.WARNING,
    "uvicorn": logging.INFO,
    "uvicorn.access": logging.WARNING,
}


def resolve_level(name: str) -> int:
    """Map a level name like ``"debug"`` to its logging constant (INFO if unknown)."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """
    Configure the ``ledgerboard`` logger from settings.

    Records go to stdout and, when ``log_file`` is set, to that file as well.
    Calling this again replaces the handlers instead of stacking them.
    """
    settings = settings or get_settings()

    logger = logging.getLogger("ledgerboard")
    logger.setLevel(resolve_level(settings.log_level))
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if settings.log_file is not None:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(settings.log_file, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    # Reduce noise from third-party libraries
    for name, level in _NOISY_LOGGERS.items():
        logging.getLogger(name).setLevel(level)

    return logger

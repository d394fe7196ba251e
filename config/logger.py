"""Logging setup shared by the service and adapters."""

import logging
import os
import sys

from config.settings import normalise_log_level

__all__ = ["ROOT_LOGGER", "logger", "setup_logger"]

ROOT_LOGGER = "collections_fx"
_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logger(
    name: str = ROOT_LOGGER,
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """Attach a stdout handler to ``name`` once and set its level.

    ``level`` falls back to the ``LOG_LEVEL`` environment variable, then to
    WARNING. Unknown level names raise :class:`config.settings.ConfigError`.
    """
    resolved = normalise_log_level(level or os.getenv("LOG_LEVEL") or "WARNING")
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(format_string or _FORMAT, datefmt=_DATEFMT))
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(resolved)
    return logger


logger = setup_logger()

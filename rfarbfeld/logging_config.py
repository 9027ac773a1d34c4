from __future__ import annotations

import logging
import sys
from typing import Optional

ROOT_LOGGER = "rfarbfeld"


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Sets up console logging for the command-line front end.
    The library modules only log; they never install handlers.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)

    # Called again (e.g. from tests): only adjust the level
    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    formatter = logging.Formatter(
        "[%(asctime)s] %(levelname)-8s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Helper to get a sub-logger for a specific module.
    """
    if name:
        return logging.getLogger(f"{ROOT_LOGGER}.{name}")
    return logging.getLogger(ROOT_LOGGER)

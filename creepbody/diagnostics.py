"""Logging setup for callers that want the library's debug output."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .config import settings as settings_module
from .config.settings import RuntimeSettings

LOGGER_NAME = "creepbody"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def initialise_logger(runtime: Optional[RuntimeSettings] = None) -> logging.Logger:
    """Attach handlers to the package logger once and return it.

    Library modules only ever call ``logging.getLogger(__name__)``; handlers are
    configured here, on demand, by the embedding application.
    """

    runtime = runtime or settings_module.current_settings()
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger

    level_name = str(runtime.DEBUG_LOG_LEVEL).upper()
    level = getattr(logging, level_name, logging.INFO)
    logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)

    if runtime.LOG_TO_FILE:
        log_dir = runtime.LOG_DIRECTORY
        if not isinstance(log_dir, Path):
            log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / runtime.DEBUG_LOG_FILE
        handler: logging.Handler = logging.FileHandler(log_path, mode="w", encoding="utf-8")
    else:
        log_path = None
        handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False

    if log_path is not None:
        logger.info("Debug logging initialised at %s", log_path)
    else:
        logger.info("Debug logging initialised on stderr")
    return logger


def reset_logger() -> None:
    """Detach and close every handler installed by :func:`initialise_logger`."""

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True

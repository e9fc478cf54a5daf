"""Mini README: Application-wide logging helpers for the household ledger.

Structure:
    * get_logger - factory returning module loggers with baseline config.
    * configure_root_logger - installs the shared handler, or adjusts the
      level once the handler exists.
    * level_for_environment - maps the ``environment`` setting to a level.

Usage:
    Modules keep a module-level ``LOGGER = get_logger(__name__)``. Entry
    points call ``configure_root_logger`` with the level for the configured
    environment. The handler is attached exactly once so reloading modules in
    development (uvicorn ``--reload``) never stacks duplicate handlers.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False

_ENVIRONMENT_LEVELS = {
    "development": logging.DEBUG,
    "test": logging.WARNING,
    "production": logging.INFO,
}


def level_for_environment(environment: str) -> int:
    """Return the logging level for an environment label (INFO if unknown)."""

    return _ENVIRONMENT_LEVELS.get(environment.strip().lower(), logging.INFO)


def configure_root_logger(level: Union[int, str] = logging.INFO) -> None:
    """Configure the root logger; later calls only change the level."""

    global _LOGGER_INITIALISED
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if _LOGGER_INITIALISED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring a handler is installed."""

    if not _LOGGER_INITIALISED:
        configure_root_logger()
    return logging.getLogger(name)

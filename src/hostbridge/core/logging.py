"""Stdlib logging setup for the ``hostbridge`` logger hierarchy."""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from hostbridge.core.utils.io import ensure_directory

LOGGER_NAME = "hostbridge"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_CONFIGURED_KEY: tuple[str, str] | None = None
_INSTALLED_HANDLER: logging.Handler | None = None


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(level: str = "WARNING", log_path: Optional[Path] = None) -> logging.Logger:
    """Install one handler on the ``hostbridge`` logger.

    Writes to ``log_path`` when given (its directory is created), otherwise
    to stderr. Idempotent per-process: repeating the same arguments is a
    no-op, other arguments replace the installed handler.
    """
    global _CONFIGURED_KEY, _INSTALLED_HANDLER

    logger = logging.getLogger(LOGGER_NAME)
    target = str(Path(log_path).resolve()) if log_path is not None else "<stderr>"
    key = (target, level.upper())
    if _CONFIGURED_KEY == key and _INSTALLED_HANDLER is not None:
        return logger

    if _INSTALLED_HANDLER is not None:
        logger.removeHandler(_INSTALLED_HANDLER)
        _INSTALLED_HANDLER.close()
        _INSTALLED_HANDLER = None

    handler: logging.Handler
    if log_path is not None:
        ensure_directory(Path(target).parent)
        handler = logging.FileHandler(target, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler.setLevel(_level_from_name(level))

    logger.setLevel(_level_from_name(level))
    logger.addHandler(handler)

    _INSTALLED_HANDLER = handler
    _CONFIGURED_KEY = key
    return logger


def reset_logging_for_tests() -> None:
    """Test-only: remove the handler installed by :func:`configure_logging`."""
    global _CONFIGURED_KEY, _INSTALLED_HANDLER
    logger = logging.getLogger(LOGGER_NAME)
    if _INSTALLED_HANDLER is not None:
        logger.removeHandler(_INSTALLED_HANDLER)
        _INSTALLED_HANDLER.close()
    logger.setLevel(logging.NOTSET)
    _CONFIGURED_KEY = None
    _INSTALLED_HANDLER = None


__all__ = ["LOGGER_NAME", "configure_logging", "reset_logging_for_tests"]

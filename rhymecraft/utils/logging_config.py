"""Console logging for the ``rhymecraft`` package and its scripts.

Output goes through a single stream handler attached to the package logger,
so the root logger (and any handlers a host application or test runner has
installed there) is left untouched.
"""

from __future__ import annotations

import logging
import os
from typing import IO, Optional, Union

PACKAGE_LOGGER = "rhymecraft"
LEVEL_ENV = "RHYMECRAFT_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

LevelLike = Union[str, int, None]


class _PackageHandler(logging.StreamHandler):
    """Marker type so reconfiguration only ever replaces our own handler."""


def parse_level(level: LevelLike, default: int = logging.INFO) -> int:
    """Turn ``"debug"``, ``"10"`` or ``10`` into a logging level number.

    Unknown names fall back to ``default``.
    """

    if level is None:
        return default
    if isinstance(level, int):
        return level
    text = str(level).strip()
    if text.isdigit():
        return int(text)
    named = logging.getLevelName(text.upper())
    return named if isinstance(named, int) else default


def _installed_handler(logger: logging.Logger) -> Optional[_PackageHandler]:
    for handler in logger.handlers:
        if isinstance(handler, _PackageHandler):
            return handler
    return None


def configure_logging(
    level: LevelLike = None,
    *,
    stream: Optional[IO[str]] = None,
    force: bool = False,
) -> logging.Logger:
    """Attach the console handler to the package logger and set its level.

    The explicit ``level`` wins over ``RHYMECRAFT_LOG_LEVEL``, which wins over
    ``INFO``. Once a handler is installed, later calls leave it in place and
    only ``force`` swaps it for a new one (for example on another ``stream``).
    """

    logger = logging.getLogger(PACKAGE_LOGGER)
    resolved = parse_level(level if level is not None else os.environ.get(LEVEL_ENV))

    existing = _installed_handler(logger)
    if existing is not None and not force:
        return logger
    if existing is not None:
        logger.removeHandler(existing)
        existing.close()

    handler = _PackageHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(resolved)
    return logger


__all__ = ["configure_logging", "parse_level"]

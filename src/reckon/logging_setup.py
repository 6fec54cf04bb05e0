"""Centralized logging configuration for the ``reckon`` package.

Library modules only call ``logging.getLogger(__name__)``; handlers are
attached here, by the CLI entry point.
"""

import logging
import os
import sys
from typing import IO, Optional, Union

_PKG_LOGGER_NAME = "reckon"
_ENV_LEVEL = "RECKON_LOG_LEVEL"

logging.getLogger(_PKG_LOGGER_NAME).addHandler(logging.NullHandler())


class _ReckonHandler(logging.StreamHandler):
    """Marker type so repeated configuration replaces the previous handler."""


class _StderrHandler(_ReckonHandler):
    """Writes to whatever sys.stderr is when a record is emitted."""

    def __init__(self):
        super().__init__(sys.stderr)

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


def _level_from_text(text: str) -> Optional[int]:
    text = text.strip().upper()
    if text.isdigit():
        return int(text)
    numeric = getattr(logging, text, None)
    return numeric if isinstance(numeric, int) else None


def parse_level(level: Union[int, str, None]) -> int:
    """Resolve a level name or number.

    None reads RECKON_LOG_LEVEL; anything unrecognized means WARNING.
    """
    if isinstance(level, int):
        return level
    if level is None:
        level = os.getenv(_ENV_LEVEL, "")
    return _level_from_text(level) or logging.WARNING


def configure_logging(
    level: Union[int, str, None] = None,
    *,
    fmt: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Args:
        level: Level as int or name; None reads RECKON_LOG_LEVEL, else WARNING
        fmt: Optional format string
        stream: Output stream, sys.stderr when omitted

    Returns:
        The package logger
    """
    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, _ReckonHandler):
            logger.removeHandler(handler)

    resolved = parse_level(level)
    handler = _ReckonHandler(stream) if stream is not None else _StderrHandler()
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(fmt or "%(levelname)s: %(message)s"))

    logger.setLevel(resolved)
    logger.addHandler(handler)
    return logger

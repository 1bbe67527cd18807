"""Loguru-backed log sink and handler setup."""

from __future__ import annotations

import sys
from typing import Any

from loguru import logger

from biofilm_world.config.settings import WorldSettings

_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}"


def configure_logging(level: str | None = None, sink: Any = sys.stderr) -> int:
    """Install a single loguru handler, replacing any previous ones.

    Args:
        level: Minimum level to emit. Defaults to WorldSettings().log_level.
        sink: Anything loguru accepts as a sink.

    Returns:
        The loguru handler id.
    """
    if level is None:
        level = WorldSettings().log_level
    logger.remove()
    return logger.add(sink, level=level, format=_FORMAT, backtrace=True, diagnose=False)


class LoguruSink:
    """LogSink writing through the global loguru logger.

    Always-visible messages go out at WARNING so that INFO-filtered handlers
    still show them.
    """

    def write_error(self, error: BaseException, context: str) -> None:
        logger.opt(exception=error).error("{}: {}", context, error)

    def write_log_always(self, message: str) -> None:
        logger.warning(message)

"""
Logging for planar_quad, built on loguru.

Library modules log through ``logger`` at DEBUG level and never add sinks.
Messages from this package are disabled until an application calls
``setup_logger()`` once at startup.

Environment variables:
    PLANAR_QUAD_LOG_LEVEL: default level (INFO if unset)
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional

from loguru import logger as _logger

logger = _logger

_PACKAGE = "planar_quad"


class _InterceptHandler(logging.Handler):
    """Forward standard-library logging records into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logger(
    *,
    level: Optional[str] = None,
    log_dir: Optional[str | os.PathLike[str]] = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """
    Install console (and optionally file) sinks and enable package logs.

    Args:
        level: Log level; falls back to PLANAR_QUAD_LOG_LEVEL, then INFO
        log_dir: If given, also write rotated log files there
        rotation: loguru rotation policy for the file sink
        retention: loguru retention policy for the file sink

    Raises:
        ValueError: If the level name is unknown to loguru
    """
    level = (level or os.getenv("PLANAR_QUAD_LOG_LEVEL") or "INFO").upper()
    # Severity number shared with stdlib logging (TRACE=5, SUCCESS=25);
    # unknown names raise ValueError before any sink is touched
    level_no = logger.level(level).no

    logger.remove()
    logger.add(sys.stderr, level=level, colorize=True, backtrace=True, diagnose=False)

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(log_dir / "planar_quad_{time:YYYYMMDD}.log"),
            level=level,
            rotation=rotation,
            retention=retention,
            encoding="utf-8",
        )

    logger.enable(_PACKAGE)
    logging.basicConfig(handlers=[_InterceptHandler()], level=level_no, force=True)


logger.disable(_PACKAGE)

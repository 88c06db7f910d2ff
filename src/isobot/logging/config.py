# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Centralized logging configuration for isobot.

Structured logging through structlog:
- Everything goes to stderr; stdout is reserved for CLI output
- Level comes from ISOBOT_LOG_LEVEL via Settings (default: WARNING),
  or DEBUG when the caller asks for it explicitly
- Wall-clock timestamps (time of day only, one agent session per log)
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

import structlog

if TYPE_CHECKING:
    from isobot.settings import Settings

__all__ = ["get_logger", "configure_logging"]


def configure_logging(
    settings: Settings | None = None,
    *,
    debug: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Configure structlog for isobot.

    Call once at startup, before the first planner is created.

    Args:
        settings: Settings instance (will be created if None)
        debug: Force DEBUG level regardless of settings
        stream: Destination for log lines (default: stderr)
    """
    if settings is None:
        from isobot.settings import Settings

        settings = Settings()

    if debug:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, settings.log_level.upper(), logging.WARNING)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stderr),
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Logger name (typically __name__ of calling module)
    """
    return structlog.get_logger(name)

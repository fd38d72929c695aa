"""Logging configuration for investsim.

Provides structured logging using structlog with JSON output for production
and plain console output for development. Logs go to a stream only.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog

# Module-level state for lazy initialization
_configured: bool = False
_active: tuple[int, bool] | None = None
_default_logger: structlog.BoundLogger | None = None


def configure_logging(
    level: str | None = None,
    json_output: bool | None = None,
) -> structlog.BoundLogger:
    """Configure structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to env
            INVESTSIM_LOG_LEVEL or WARNING.
        json_output: If True, output JSON format (for production). Defaults to
            env INVESTSIM_JSON_LOGS.

    Returns:
        Configured logger instance.
    """
    global _configured, _active, _default_logger

    log_level = (level or os.environ.get("INVESTSIM_LOG_LEVEL", "WARNING")).upper()
    numeric_level = getattr(logging, log_level, logging.WARNING)
    if json_output is None:
        json_output = os.environ.get("INVESTSIM_JSON_LOGS", "").lower() in ("1", "true", "yes")

    # Skip if already configured with the same settings (idempotent)
    if _configured and _active == (numeric_level, json_output):
        return structlog.get_logger()

    # 1. Configure Standard Library Logging (Handlers)
    logging.basicConfig(
        format="%(message)s",
        level=numeric_level,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,  # Overwrite any existing config
    )

    # 2. Configure Structlog Processors
    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    # 3. Configure Structlog to wrap Stdlib
    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        # Module-level loggers must pick up reconfiguration
        cache_logger_on_first_use=False,
    )

    _configured = True
    _active = (numeric_level, json_output)
    _default_logger = structlog.get_logger()
    return _default_logger


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a logger instance, optionally bound to a specific name.

    This function lazily initializes logging on first call.

    Args:
        name: Optional logger name (usually module name).

    Returns:
        Bound logger instance.
    """
    if not _configured:
        configure_logging()

    logger = structlog.get_logger()
    if name:
        return logger.bind(logger_name=name)
    return logger

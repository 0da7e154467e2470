"""Structured logging configuration for swimtracker.

Usage:
    from swimtracker.logging import get_logger, configure_logging

    # Call once at application startup
    configure_logging()

    # Get a logger in any module
    logger = get_logger(__name__)
    logger.info("time_recorded", swimmer_id="42", event_label="100m Freestyle (50m)")

Level and format come from Settings (LOG_LEVEL, LOG_FORMAT) unless passed
explicitly. Production defaults to JSON output when LOG_FORMAT is not set.
"""

import logging
import os
import sys
from typing import Any

import structlog

from swimtracker.config import LogFormat, get_settings


def _resolve_log_level(level: str | None) -> int:
    """Map a level name to a stdlib logging level, defaulting to INFO."""
    name = (level or get_settings().log_level).upper()
    return getattr(logging, name, logging.INFO)


def _resolve_log_format(log_format: LogFormat | str | None) -> LogFormat:
    """Pick the renderer: explicit argument, then LOG_FORMAT, then environment."""
    if log_format:
        return LogFormat(str(log_format).lower())
    settings = get_settings()
    if os.getenv("LOG_FORMAT") is None and settings.is_production:
        return LogFormat.JSON
    return settings.log_format


def _add_environment(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Add environment to all log entries."""
    event_dict["environment"] = get_settings().environment.value
    return event_dict


def configure_logging(
    level: str | None = None,
    log_format: LogFormat | str | None = None,
) -> None:
    """Configure structlog for the application.

    Call this once at application startup (the CLI does it in its callback).

    Args:
        level: Log level name, overrides LOG_LEVEL
        log_format: "console" or "json", overrides LOG_FORMAT
    """
    resolved_format = _resolve_log_format(log_format)
    log_level = _resolve_log_level(level)

    shared_processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _add_environment,
    ]

    if resolved_format == LogFormat.JSON:
        processors = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Log lines go to stderr so CLI tables on stdout stay clean
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
        force=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a logger instance.

    Args:
        name: Logger name, typically __name__ from the calling module

    Returns:
        A configured structlog logger
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context variables that will be included in all subsequent logs.

    Example:
        bind_context(data_file="club.json")
        logger.info("snapshot_loaded")  # Will include data_file
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()

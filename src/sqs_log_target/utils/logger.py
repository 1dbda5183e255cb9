"""
Module: logger.py
Description: Diagnostic logging for the SQS log target.

The target reports its own failures (bad credentials, missing queue
URL, rejected sends) as JSON lines written straight to a stream, never
through the stdlib logging tree it serves, so diagnostics cannot loop
back into the SQS handler.

Loggers are wrapped individually instead of through structlog.configure()
so the host application's own structlog configuration is left alone.

Key Components:
- Timestamp and log level processors
- Level filtering via structlog's filtering bound loggers
- get_logger() helper function

Dependencies: structlog, logging, datetime
"""

import logging
from datetime import datetime, timezone
from typing import IO, Optional

import structlog
from structlog.typing import FilteringBoundLogger

DEFAULT_DIAGNOSTIC_LEVEL = "INFO"


def _add_timestamp(logger, method_name, event_dict):
    """
    Add ISO 8601 UTC timestamp to log entries.

    Args:
        logger: Logger instance
        method_name: Log method name (info, error, etc.)
        event_dict: Current log event dictionary

    Returns:
        Updated event dictionary with timestamp
    """
    event_dict["timestamp"] = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")
    return event_dict


def _add_log_level(logger, method_name, event_dict):
    """Add the upper-cased method name as the log level."""
    event_dict["level"] = method_name.upper()
    return event_dict


_PROCESSORS = [
    _add_timestamp,
    _add_log_level,
    structlog.processors.format_exc_info,
    structlog.processors.JSONRenderer(),
]


def get_logger(
    name: str,
    level: str = DEFAULT_DIAGNOSTIC_LEVEL,
    stream: Optional[IO[str]] = None
) -> FilteringBoundLogger:
    """
    Get a diagnostic logger for the SQS log target.

    Args:
        name: Logger name (typically __name__), bound as 'logger'
        level: Minimum level name; calls below it are no-ops
        stream: Destination stream, stdout when omitted

    Returns:
        Level-filtered structlog logger writing JSON lines

    Example:
        >>> logger = get_logger(__name__, level="WARNING")
        >>> logger.error("Queue URL is not defined", region="us-east-1")
        {"logger": "...", "region": "us-east-1", "event": "Queue URL is not defined", "timestamp": "2024-01-15T10:30:00.000000Z", "level": "ERROR"}
    """
    return structlog.wrap_logger(
        structlog.WriteLogger(stream),
        processors=_PROCESSORS,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        cache_logger_on_first_use=True,
    ).bind(logger=name)

"""
Structured Logging Configuration
Structured logging with structlog.
"""

import logging
import sys
from typing import Any, TextIO

import structlog
from pythonjsonlogger import jsonlogger


def configure_logging(
    level: str = "INFO", json_logs: bool = False, stream: TextIO | None = None
) -> None:
    """
    Configure structured logging for the engine.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Use JSON formatter for machine-readable logs
        stream: Destination for log lines (defaults to stdout)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    stream = stream or sys.stdout

    # Configure standard logging
    if json_logs:
        handler = logging.StreamHandler(stream)
        formatter = jsonlogger.JsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
        handler.setFormatter(formatter)
        logging.basicConfig(level=log_level, handlers=[handler], force=True)
    else:
        logging.basicConfig(
            level=log_level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            stream=stream,
            force=True,
        )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


class LogContext:
    """Add context to all log messages in scope. Outer values are restored on exit."""

    def __init__(self, **kwargs: Any):
        self.context = kwargs
        self.previous: dict[str, Any] = {}

    def __enter__(self) -> "LogContext":
        current = structlog.contextvars.get_contextvars()
        self.previous = {k: current[k] for k in self.context if k in current}
        structlog.contextvars.bind_contextvars(**self.context)
        return self

    def __exit__(self, *args: Any) -> None:
        structlog.contextvars.unbind_contextvars(*self.context.keys())
        if self.previous:
            structlog.contextvars.bind_contextvars(**self.previous)

"""
Centralized logging configuration for the reading package.

This module configures structlog for all components. Library modules only
obtain loggers; the application entry point (the CLI) decides where log
output goes and how it is rendered.
"""
import logging
import sys
from typing import Any, Optional, TextIO

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
        stream: Destination for log records, stderr by default so that
            command output on stdout is not interleaved with logs
    """
    log_level = getattr(logging, level.upper())

    # force=True so a second call (e.g. from tests) replaces the handler
    logging.basicConfig(
        level=log_level,
        stream=stream or sys.stderr,
        format="%(message)s",
        force=True,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_navigator_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger for cursor movements.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger bound to the navigator subsystem
    """
    # Must stay a lazy proxy: binding here would freeze the import-time config
    return structlog.get_logger(name, subsystem="navigator")


def log_cursor_move(
    logger: FilteringBoundLogger,
    plan_name: str,
    direction: str,
    steps: int,
    from_cursor: str,
    to_cursor: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a cursor movement with standardized format.

    Args:
        logger: Structlog logger instance
        plan_name: Name of the plan being moved
        direction: "advance" or "retreat"
        steps: Requested step count
        from_cursor: Cursor label before the move
        to_cursor: Cursor label after the move
        context: Additional context data
    """
    bound_logger = logger.bind(
        plan_name=plan_name,
        direction=direction,
        steps=steps,
        from_cursor=from_cursor,
        to_cursor=to_cursor,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("Cursor moved")

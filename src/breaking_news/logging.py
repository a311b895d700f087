"""Structured logging configuration."""

import logging
import sys

import orjson
import structlog


def configure_logging(json_output: bool = True, level: str = "INFO") -> None:
    """Configure structlog to write to stderr.

    stdout is reserved for announcements, so every renderer targets stderr.
    The stream is looked up on each event, so swapping or closing an earlier
    sys.stderr never breaks later log calls.

    Args:
        json_output: If True, output JSON logs. If False, use console renderer.
        level: Minimum level name, e.g. "DEBUG". Unknown names mean INFO.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.CallsiteParameterAdder(
            {
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            }
        ),
    ]

    if json_output or not sys.stderr.isatty():
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(serializer=orjson.dumps),
        ]
        logger_factory = _stderr_bytes_logger
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(),
        ]
        logger_factory = _stderr_print_logger

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_level_number(level)),
        logger_factory=logger_factory,
        # stderr is resolved per event, a cached logger would pin it
        cache_logger_on_first_use=False,
    )


def _stderr_bytes_logger(*args: object) -> structlog.BytesLogger:
    """Build a BytesLogger on whatever sys.stderr is right now."""
    return structlog.BytesLogger(sys.stderr.buffer)


def _stderr_print_logger(*args: object) -> structlog.PrintLogger:
    """Build a PrintLogger on whatever sys.stderr is right now."""
    return structlog.PrintLogger(sys.stderr)


def _level_number(level: str) -> int:
    """Map a level name to its stdlib logging number."""
    number = logging.getLevelName(level.upper())
    return number if isinstance(number, int) else logging.INFO


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Optional logger name.

    Returns:
        A structlog bound logger.
    """
    return structlog.get_logger(name)

"""
Enum helper logging configuration.

The library modules log through ``logging.getLogger(__name__)``. Applications
call ``setup_logging`` (or ``setup_enum_logging`` with a config object) to
route those records through structlog's JSON renderer or a plain stderr
handler.
"""

import logging
import sys
from contextlib import contextmanager
from enum import Enum

import structlog

from .mixin import EnumHelperMixin

LOGGER_NAME = "enum_helper"


class LogLevel(EnumHelperMixin, str, Enum):
    """Standard log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def _resolve_level(level: str) -> int:
    if not LogLevel.is_name_in(level.upper()):
        raise ValueError(
            f"Invalid log level '{level}'. Expected one of: {', '.join(LogLevel.names())}"
        )
    return getattr(logging, level.upper())


def setup_logging(
    level: str = "INFO",
    use_structured: bool = True,
    service_name: str = "enum-helper",
    version: str = "0.0.0",
) -> logging.Logger:
    """
    Setup logging for the enum helper.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        use_structured: Render records as JSON through structlog
        service_name: Name added to every structured record
        version: Version added to every structured record

    Returns:
        The ``enum_helper`` package logger
    """
    numeric_level = _resolve_level(level)
    if use_structured:
        return _setup_structured_logging(numeric_level, service_name, version)
    return _setup_standard_logging(numeric_level, service_name)


def _setup_structured_logging(level: int, service_name: str, version: str) -> logging.Logger:
    """Route stdlib records through structlog's JSON renderer on stderr."""
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        _add_service_info(service_name, version),
    ]
    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ],
        )
    )
    return _install_handler(handler, level)


def _setup_standard_logging(level: int, service_name: str) -> logging.Logger:
    """Setup standard Python logging with JSON-like format."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            '{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
            '"service": "' + service_name + '", "message": "%(message)s", '
            '"module": "%(name)s", "function": "%(funcName)s", "line": %(lineno)d}'
        )
    )
    return _install_handler(handler, level)


def _install_handler(handler: logging.Handler, level: int) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def _add_service_info(service_name: str, version: str):
    """Add service information to structured logs."""

    def processor(logger, method_name, event_dict):
        event_dict["service"] = service_name
        event_dict["version"] = version
        return event_dict

    return processor


@contextmanager
def log_context(**context_vars):
    """
    Context manager for adding structured context to logs.

    Args:
        **context_vars: Context variables to add to all logs in this context
    """
    with structlog.contextvars.bound_contextvars(**context_vars):
        yield


def setup_enum_logging(config, use_structured: bool = True) -> logging.Logger:
    """
    Setup logging from a configuration object.

    Args:
        config: Object with ``log_level`` and ``service_name``
    """
    from .__version__ import __version__

    return setup_logging(
        level=config.log_level,
        use_structured=use_structured,
        service_name=config.service_name,
        version=__version__,
    )

"""Structured logging built on structlog and the standard logging module."""
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, List, Optional

import structlog

from pattern_gallery.config.schemas.logging_schema import LoggingConfig

_configured = False

_SHARED_PROCESSORS: List[Any] = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
    structlog.processors.CallsiteParameterAdder([
        structlog.processors.CallsiteParameter.MODULE,
        structlog.processors.CallsiteParameter.FUNC_NAME,
        structlog.processors.CallsiteParameter.LINENO,
    ]),
]


class DetailedFormatter(structlog.stdlib.ProcessorFormatter):
    """Renders structlog and plain stdlib records as one console line with caller information."""

    def __init__(self) -> None:
        super().__init__(
            processor=structlog.dev.ConsoleRenderer(colors=False),
            foreign_pre_chain=_SHARED_PROCESSORS,
        )


def _configure_structlog() -> None:
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def setup_logging(config: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application.

    Args:
        config: Logging configuration. Defaults to ``LoggingConfig()``.

    Returns:
        Configured structlog logger for the package.
    """
    global _configured
    config = config or LoggingConfig()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.level))

    handlers: List[logging.Handler] = []

    if config.writes_to_file:
        log_path = os.path.expandvars(config.file_path or "")
        log_dir = os.path.dirname(log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=config.max_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
        )
        handlers.append(file_handler)

    if config.destination in ("stdout", "both"):
        handlers.append(logging.StreamHandler(sys.stdout))
    elif config.destination == "stderr":
        handlers.append(logging.StreamHandler(sys.stderr))
    elif config.destination == "none":
        handlers.append(logging.NullHandler())

    # Remove any existing handlers and add new ones
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    for handler in handlers:
        handler.setFormatter(DetailedFormatter())
        root_logger.addHandler(handler)

    _configure_structlog()
    _configured = True

    logger = structlog.get_logger("pattern_gallery")
    logger.debug(
        "Logging configured",
        log_level=config.level,
        log_destination=config.destination,
        log_file=config.file_path,
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a logger for ``name``.

    Before :func:`setup_logging` runs, records flow into the standard
    logging hierarchy untouched, so nothing is written to stdout.
    """
    if not _configured:
        _configure_structlog()
    return structlog.get_logger(name)

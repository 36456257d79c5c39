"""Structured logging for the Pixel Farm simulation core.

Every engine module logs through ``get_logger(__name__)``. Output is set up
once per process, either explicitly with ``configure_logging`` or from the
application settings with ``configure_logging_from_settings``; FarmLoop
does the latter on start when nothing has been configured yet.

Example:
    >>> from pixel_farm.core.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Crop planted", index=118, item=ItemId.WHEAT)
"""

from __future__ import annotations

import logging
import sys
from enum import Enum
from typing import TYPE_CHECKING, Any

import structlog
from structlog.types import Processor


if TYPE_CHECKING:
    from structlog.types import EventDict, WrappedLogger

    from pixel_farm.core.config import Settings


DEFAULT_APP_NAME = "pixel_farm"

_STDLIB_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def app_context(app_name: str) -> Processor:
    """Build a processor that tags every record with the application name."""

    def add_app_context(
        logger: WrappedLogger,
        method_name: str,
        event_dict: EventDict,
    ) -> EventDict:
        event_dict.setdefault("app", app_name)
        return event_dict

    return add_app_context


def plain_enum_values(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Log item, mascot and weather ids by value.

    Engine calls pass enum members straight through (``item=ItemId.WHEAT``);
    this keeps console lines reading ``item=WHEAT``.
    """
    for key, value in event_dict.items():
        if isinstance(value, Enum):
            event_dict[key] = value.value
    return event_dict


def configure_logging(
    *,
    level: str = "INFO",
    json_format: bool = False,
    log_file: str | None = None,
    app_name: str = DEFAULT_APP_NAME,
) -> None:
    """Configure application-wide logging.

    Args:
        level: The logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_format: If True, output logs as JSON lines.
        log_file: Optional path to a log file for persistent logging.
        app_name: Value of the ``app`` key on every record.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        app_context(app_name),
        plain_enum_values,
        structlog.processors.StackInfoRenderer(),
    ]

    if json_format:
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(
                colors=sys.stdout.isatty(),
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format=_STDLIB_FORMAT, level=numeric_level, stream=sys.stdout, force=True)
    # The tick timer would otherwise surface slow-callback warnings at INFO
    logging.getLogger("asyncio").setLevel(max(numeric_level, logging.WARNING))

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(logging.Formatter(_STDLIB_FORMAT))
        logging.getLogger().addHandler(file_handler)


def configure_logging_from_settings(settings: Settings | None = None) -> None:
    """Configure logging from application settings.

    Debug mode always logs at DEBUG; otherwise ``log_level`` applies.

    Args:
        settings: Settings to read. Defaults to ``get_settings()``.
    """
    if settings is None:
        from pixel_farm.core.config import get_settings

        settings = get_settings()

    configure_logging(
        level="DEBUG" if settings.debug else settings.log_level,
        json_format=settings.json_logs,
        log_file=str(settings.log_file) if settings.log_file else None,
        app_name=settings.app_name,
    )


def is_configured() -> bool:
    return structlog.is_configured()


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a logger, typically with ``__name__``."""
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context variables included in all subsequent logs.

    Example:
        >>> bind_context(component="farm_loop")
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


__all__ = [
    "app_context",
    "plain_enum_values",
    "configure_logging",
    "configure_logging_from_settings",
    "is_configured",
    "get_logger",
    "bind_context",
    "clear_context",
]

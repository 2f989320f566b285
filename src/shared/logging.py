"""
Logging Configuration - Shared Layer

Structured logging for the probe service. Log records from both structlog
and the standard library are routed through one ``ProcessorFormatter`` so
that probe events and third-party messages (httpx, uvicorn) share a format.
"""

import logging
import os
import sys
from typing import Any, List, Optional, TextIO

import structlog
from structlog.types import Processor

from src.shared.consts import EnumEnvironment

DEFAULT_LOG_LEVEL = "INFO"


def _shared_processors() -> List[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def configure_logging(
    level: Optional[str] = None,
    file_path: Optional[str] = None,
    environment: str = EnumEnvironment.DEVELOPMENT.value,
    stream: Optional[TextIO] = None,
    log_format: Optional[str] = None,
) -> None:
    """
    Configure structlog on top of Python's standard logging.

    Called once at startup with environment defaults, then again through
    ``update_logging_from_settings`` once the settings are loaded.

    Args:
        level: Log level name; falls back to ``LOG_LEVEL`` then ``INFO``.
        file_path: Optional log file; falls back to ``LOG_FILE_PATH``.
        environment: ``production`` renders JSON, anything else renders
            human readable console output.
        stream: Console stream, ``sys.stdout`` by default.
        log_format: ``json`` or ``console``; overrides the environment choice.
    """
    log_level = level or os.environ.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL
    log_file = file_path or os.environ.get("LOG_FILE_PATH")
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    handlers: List[logging.Handler] = [logging.StreamHandler(stream or sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    log_format = (log_format or os.environ.get("LOG_FORMAT") or "").lower()
    if not log_format:
        production = environment.lower() == EnumEnvironment.PRODUCTION.value
        log_format = "json" if production else "console"

    renderer: Processor
    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
        foreign_pre_chain=_shared_processors(),
    )
    for handler in handlers:
        handler.setFormatter(formatter)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.handlers = handlers
    root_logger.setLevel(numeric_level)

    # httpx emits one INFO line per request.
    logging.getLogger("httpx").setLevel(max(numeric_level, logging.WARNING))

    get_logger(__name__).info("logging.configured", level=log_level, file_path=log_file)


def update_logging_from_settings(
    settings: Any, stream: Optional[TextIO] = None
) -> None:
    """
    Reconfigure logging from the application settings object.

    Args:
        settings: The application settings object from Pydantic.
        stream: Console stream forwarded to ``configure_logging``.
    """
    try:
        log_level = getattr(settings.logging.level, "value", settings.logging.level)
        environment = getattr(settings.environment, "value", settings.environment)
        configure_logging(
            level=log_level,
            file_path=settings.logging.file_path,
            environment=environment,
            stream=stream,
            log_format=getattr(settings.logging, "format", None),
        )
    except Exception as e:
        logging.error(f"Failed to update logging from settings: {e}")


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger configured for the project."""
    return structlog.get_logger(name)

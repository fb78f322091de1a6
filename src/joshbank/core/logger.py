"""Structured logging setup for JoshBank using structlog."""

from __future__ import annotations

import logging

import structlog

from joshbank.core.config import AppSettings


def setup_logging(settings: AppSettings | None = None) -> structlog.stdlib.BoundLogger:
    """Configure stdlib logging and structlog from settings.

    Args:
        settings: Application settings. If None, loads from the environment.

    Returns:
        A logger bound to the ``joshbank`` namespace.
    """
    if settings is None:
        settings = AppSettings()

    level = getattr(logging, settings.logging.level.upper(), logging.INFO)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))

    root_logger = logging.getLogger()
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    if settings.logging.renderer == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    logger = structlog.get_logger("joshbank")
    logger.debug(
        "logging.configured",
        level=settings.logging.level,
        renderer=settings.logging.renderer,
        environment=settings.environment,
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger backed by the stdlib logger ``name``.

    Events flow through the stdlib logging tree, so nothing is printed until
    ``setup_logging`` (or the host application) installs a handler.
    """
    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger)

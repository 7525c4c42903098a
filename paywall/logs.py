"""structlog configuration shared by every entry point."""

from __future__ import annotations

import logging

import structlog

from paywall.config import Settings, get_settings


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog once at startup.

    JSON output for deployments (``PAYWALL_LOG_JSON=true``), colored console
    output otherwise.
    """
    settings = settings or get_settings()
    renderer = structlog.processors.JSONRenderer() if settings.log_json else structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(settings.log_level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

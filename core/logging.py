from __future__ import annotations

import logging
import sys

import structlog

from core.config import settings


def setup_logging(level: str | None = None, json_logs: bool | None = None) -> None:
    """Konfigurera structlog en gång för hela appen."""
    resolved_level = logging.getLevelName(level or settings.log_level)
    if not isinstance(resolved_level, int):
        resolved_level = logging.INFO
    use_json = settings.log_json if json_logs is None else json_logs

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=resolved_level)

    renderer = structlog.processors.JSONRenderer() if use_json else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(resolved_level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

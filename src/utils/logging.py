"""Structured logging setup using structlog.

One shared processor chain feeds either a coloured ConsoleRenderer for
local development or a JSONRenderer for production.  The renderer follows
the ``app.env`` value resolved by ``load_config`` (``APP_ENV`` in the
environment when called without one), or ``json_output`` forces JSON.

Standard-library ``logging`` goes through the same formatter, so httpx's
own records come out in the same shape as ours.  httpx logs one INFO line
per request; that is held back to WARNING unless we run at DEBUG.

Anything that looks like the stock photo API credential is masked before
rendering: a ``token`` or ``authorization`` key logged by mistake shows up
as ``"***"``.
"""

import logging
import os
import sys
from typing import Any

import structlog

_SECRET_KEYS = frozenset({"token", "authorization", "stock_photo_token"})
_MASK = "***"

# Loggers of third-party libraries that are chatty at INFO.
_QUIET_LOGGERS = ("httpx", "httpcore")


def mask_secrets(_logger: Any, _method_name: str, event_dict: dict) -> dict:
    """structlog processor that replaces credential values with a mask."""
    for key in event_dict.keys() & _SECRET_KEYS:
        if event_dict[key]:
            event_dict[key] = _MASK
    return event_dict


def configure_logging(
    log_level: str = "INFO",
    app_env: str | None = None,
    json_output: bool = False,
) -> structlog.BoundLogger:
    """Configure structlog with environment-appropriate rendering.

    Args:
        log_level: Logging level string (DEBUG, INFO, WARNING, ERROR).
        app_env: Deployment name; ``"production"`` selects JSON.  Read from
            ``APP_ENV`` when omitted.
        json_output: Force JSON output regardless of ``app_env``.

    Returns:
        A configured structlog BoundLogger.
    """
    if app_env is None:
        app_env = os.environ.get("APP_ENV", "development")
    use_json = json_output or app_env == "production"
    level = log_level.upper()

    # mask_secrets runs before any renderer sees the event.
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        mask_secrets,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if use_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *shared_processors,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    # build_image_lookup_service may run more than once per process.
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    library_level = level if level == "DEBUG" else "WARNING"
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(library_level)

    return structlog.get_logger()


def get_logger(name: str) -> structlog.BoundLogger:
    """Return a structlog logger bound to *name*.

    Configures logging with defaults on first use if nothing else has.
    """
    if not structlog.is_configured():
        configure_logging()

    return structlog.get_logger(logger_name=name)

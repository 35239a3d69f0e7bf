# enellerett/shared/logging_config.py
import logging
import sys

import structlog
from opentelemetry import trace

from enellerett.shared.config import AppEnv, settings


def add_open_telemetry_spans(_, __, event_dict):
    """Adds trace_id/span_id of the active span, so a lookup's log lines join its trace."""
    span = trace.get_current_span()
    if not span.is_recording():
        event_dict["trace_id"] = None
        event_dict["span_id"] = None
        return event_dict

    ctx = span.get_span_context()
    event_dict["trace_id"] = format(ctx.trace_id, "032x")
    event_dict["span_id"] = format(ctx.span_id, "016x")
    return event_dict


def configure_logging():
    """
    Sets up structlog for the service.

    LOG_FORMAT=json writes one JSON object per line with Swedish characters
    kept as-is; any other value gives the coloured console renderer. Loggers
    are cached after first use only in production, so tests and local runs
    can reconfigure (e.g. `structlog.testing.capture_logs`).
    """
    processors = [
        structlog.contextvars.merge_contextvars,  # request_id, method, path
        add_open_telemetry_spans,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if settings.LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer(ensure_ascii=False))
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    level = logging.getLevelName(settings.LOG_LEVEL.upper())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=settings.APP_ENV == AppEnv.PRODUCTION,
    )

    # uvicorn's access and error logs
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

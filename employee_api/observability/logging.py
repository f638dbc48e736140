"""
Structured Logging with structlog
=============================================================================
CONCEPT: Structured (JSON) Logging

Plain text log:
    2025-01-15 10:30:45 INFO served page 3 of employees matching "ann"

Structured log:
    {
        "timestamp": "2025-01-15T10:30:45.123Z",
        "level": "info",
        "event": "employee_listing_served",
        "keyword": "ann",
        "page": 3,
        "item_count": 25,
        "request_id": "4bf92f3577b34da6"
    }

Same information, but every field is queryable by a log aggregator.

STRUCTLOG PIPELINE:
  logger.info("event", key=value) runs the entry through a chain of
  processors before it reaches the stdlib handler:

    Raw event  ->  [merge_contextvars]  ->  [add_log_level]  ->  [TimeStamper]
               ->  [JSONRenderer | ConsoleRenderer]  ->  stdout

  merge_contextvars is what puts request_id/method/path on every entry
  emitted while a request is being served (see the bind_request_context
  middleware in employee_api.main.create_app).
=============================================================================
"""

import logging
import sys

import structlog

_logging_configured: bool = False


def setup_logging(log_level: str = "INFO", debug: bool = False) -> None:
    """
    Configure structlog for structured logging.

    Called once from the application lifespan. Repeated calls are no-ops.
    `debug` selects the colored console renderer instead of JSON.
    """
    global _logging_configured

    if _logging_configured:
        return

    level = getattr(logging, log_level.upper(), logging.INFO)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]

    structlog.configure(
        processors=shared_processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=structlog.dev.ConsoleRenderer()
        if debug
        else structlog.processors.JSONRenderer(),
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    # Reduce noise from verbose third-party libraries
    for noisy_logger in ["uvicorn.access", "sqlalchemy.engine", "aiosqlite"]:
        logging.getLogger(noisy_logger).setLevel(logging.WARNING)

    _logging_configured = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a named structured logger. Use the module's __name__.

    USAGE:
        logger = get_logger(__name__)
        logger.info("employee_listing_served", page=3, item_count=25)
    """
    return structlog.get_logger(name)

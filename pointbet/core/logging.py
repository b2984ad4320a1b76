"""Structured logging setup.

Every module asks for a logger with ``get_logger(__name__)`` and logs
event-style messages with key/value context::

    logger.info("user_registered", user_id=user["id"])
"""

import logging
import sys

import structlog

from pointbet.core.config import settings


def add_app_context(logger, method_name, event_dict):
    event_dict["app"] = "pointbet"
    event_dict["environment"] = settings.ENVIRONMENT
    return event_dict


def configure_logging(log_level=None, json_logs=None):
    """Configure structlog and the stdlib root logger.

    Args:
        log_level: Level name, defaults to ``LOG_LEVEL``
        json_logs: Render JSON lines instead of the console format,
            defaults to ``LOG_JSON``
    """
    log_level = (log_level or settings.LOG_LEVEL).upper()
    if json_logs is None:
        json_logs = settings.LOG_JSON

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        add_app_context,
    ]

    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level, logging.INFO),
    )


def get_logger(name):
    return structlog.get_logger(name)

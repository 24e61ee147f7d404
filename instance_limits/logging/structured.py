"""
Structured Logging Setup
========================
JSON logging for applications using instance_limits.

Library modules log through structlog; this module routes those events
through the standard logging tree so they share one handler and format.

Usage:
    from instance_limits.logging import setup_logging, get_logger

    setup_logging(service_name="my-bot")
    logger = get_logger(__name__)
    logger.info("limits_refreshed", instance="chat.example.org")
"""

import json
import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone

import structlog

# Context variables for log enrichment
service_name_var: ContextVar[str] = ContextVar("service_name", default="unknown")
instance_var: ContextVar[str] = ContextVar("instance", default="")


class JSONFormatter(logging.Formatter):
    """
    Renders one JSON object per record.

    structlog hands its event dict over as ``record.msg``; its key/value
    pairs become top-level fields next to the event name. Plain stdlib
    records use their formatted message as the event.
    """

    def format(self, record: logging.LogRecord) -> str:
        if isinstance(record.msg, dict):
            fields = dict(record.msg)
            event = fields.pop("event", "")
        else:
            fields = {}
            event = record.getMessage()

        entry = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "event": event,
            "service": service_name_var.get(),
        }
        instance = instance_var.get()
        if instance:
            entry["instance"] = instance
        entry.update(fields)

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        entry["at"] = f"{record.module}:{record.lineno}"

        return json.dumps(entry, default=str)


def setup_logging(
    service_name: str,
    level: str = "INFO",
    json_output: bool = True,
) -> logging.Logger:
    """
    Configure logging for an application.

    Args:
        service_name: Name reported in every record
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: Whether to output JSON (for production)

    Returns:
        Configured root logger
    """
    service_name_var.set(service_name)
    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.processors.format_exc_info,
    ]
    if json_output:
        handler.setFormatter(JSONFormatter())
        # JSONFormatter receives the event dict as the record message
        processors.append(_as_record_msg)
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
        ))
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    root_logger.addHandler(handler)

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger.info(f"Logging configured for {service_name}")
    return root_logger


def _as_record_msg(logger, method_name, event_dict):
    return (event_dict,), {}


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger with the given name."""
    return structlog.get_logger(name)

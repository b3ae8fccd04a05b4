"""Structured logging configuration for responder."""

import logging
import sys

from json_log_formatter import JSONFormatter


def configure_logging(level: str = "INFO", json_format: bool = False) -> None:
    """Configure logging for responder.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: If True, use JSON format; otherwise use normal format
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("responder")
    logger.setLevel(log_level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(JSONFormatter() if json_format else StructuredFormatter())
    logger.addHandler(handler)


class StructuredFormatter(logging.Formatter):
    """Structured formatter that adds context to log messages."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with context."""
        context = getattr(record, "context", {})

        parts = [f"[{record.levelname}]"]

        if hasattr(record, "resource_key") and record.resource_key:
            parts.append(f"resource={record.resource_key}")

        for key, value in context.items():
            parts.append(f"{key}={value}")

        parts.append(record.getMessage())

        return " ".join(parts)

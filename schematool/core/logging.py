"""Structured logging configuration for schematool."""

import logging
import sys
from typing import Optional

from json_log_formatter import JSONFormatter


def configure_logging(
    level: str = "INFO",
    json_format: bool = False,
    project_name: Optional[str] = None,
) -> None:
    """Configure logging for schematool.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: If True, use JSON format; otherwise use normal format
        project_name: Optional project name added to every record
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("schematool")
    logger.setLevel(log_level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)

    if json_format:
        formatter = JSONFormatter()
    else:
        formatter = StructuredFormatter()

    handler.setFormatter(formatter)
    if project_name:
        handler.addFilter(_ProjectFilter(project_name))
    logger.addHandler(handler)


class _ProjectFilter(logging.Filter):
    """Stamp the project name onto records that don't carry one."""

    def __init__(self, project_name: str):
        super().__init__()
        self.project_name = project_name

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "project_name"):
            record.project_name = self.project_name
        return True


class StructuredFormatter(logging.Formatter):
    """Structured formatter that adds context to log messages."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with context."""
        context = getattr(record, "context", {})

        parts = [f"[{record.levelname}]"]

        if hasattr(record, "project_name"):
            parts.append(f"project={record.project_name}")

        if hasattr(record, "task_name"):
            parts.append(f"task={record.task_name}")

        for key, value in context.items():
            parts.append(f"{key}={value}")

        parts.append(record.getMessage())

        return " ".join(parts)

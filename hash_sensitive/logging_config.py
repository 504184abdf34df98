# hash_sensitive/logging_config.py

"""Structured logging configuration with sensitive context hashing."""

import logging
import sys
import json
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from hash_sensitive.service.processor import (
    CONTEXT_ATTRIBUTE,
    HashSensitiveFilter,
    HashSensitiveProcessor,
)


class StructuredFormatter(logging.Formatter):
    """JSON formatter emitting the record context alongside the message."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON-formatted log string
        """
        current_time = datetime.now(timezone.utc).isoformat()

        log_data: Dict[str, Any] = {
            "timestamp": current_time,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        context = getattr(record, CONTEXT_ATTRIBUTE, None)
        if context is not None:
            log_data["context"] = context

        return json.dumps(log_data, default=str)


def configure_logging(
    level: str = "INFO", processor: Optional[HashSensitiveProcessor] = None
) -> None:
    """Configure application logging.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        processor: When given, context of every emitted record is hashed by it
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    if root_logger.handlers:
        root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(StructuredFormatter())

    if processor is not None:
        handler.addFilter(HashSensitiveFilter(processor))

    root_logger.addHandler(handler)

    # Suppress noisy libraries
    logging.getLogger("streamlit").setLevel(logging.WARNING)
    logging.getLogger("watchdog").setLevel(logging.WARNING)

    # We use the root logger to log this initialization event
    logging.info(
        "Logging configured successfully",
        extra={"log_level": level, "python_version": sys.version},
    )

# hash_sensitive/service/pipeline.py

"""Main hashing service pipeline."""

import logging
import threading
from typing import Any, Optional

from hash_sensitive.service.config import Settings, settings
from hash_sensitive.service.processor import HashSensitiveProcessor
from hash_sensitive.core.domain import RedactionResult
from hash_sensitive.core.loader import SpecificationLoader
from hash_sensitive.core.exceptions import (
    ConfigurationError,
    HashSensitiveError,
)

logger = logging.getLogger(__name__)


def build_processor(config: Settings) -> HashSensitiveProcessor:
    """Creates a processor from application settings.

    Args:
        config: Settings naming the specification file and digest options

    Returns:
        Configured HashSensitiveProcessor

    Raises:
        ConfigurationError: If no specification file is configured or it is invalid.
    """
    if config.sensitive_keys_file is None:
        raise ConfigurationError(
            "No specification file configured (set HASH_SENSITIVE_SENSITIVE_KEYS_FILE)"
        )

    specification = SpecificationLoader.load(config.sensitive_keys_file)

    return HashSensitiveProcessor(
        specification,
        algorithm=config.algorithm,
        length_limit=config.length_limit,
        exclusive_subtree=config.exclusive_subtree,
    )


class RedactionService:
    """Singleton service wrapper for the configured processor.

    Manages processor lifecycle and provides thread-safe access to it.
    """

    _instance: Optional[HashSensitiveProcessor] = None
    _lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> HashSensitiveProcessor:
        """Returns singleton processor instance.

        Returns:
            HashSensitiveProcessor built from the global settings

        Raises:
            ConfigurationError: If the processor cannot be configured
        """
        if cls._instance is None:
            with cls._lock:
                # Double-checked locking pattern
                if cls._instance is None:
                    try:
                        logger.info("Initializing hash-sensitive processor")
                        cls._instance = build_processor(settings)
                        logger.info("Hash-sensitive processor initialized successfully")

                    except Exception as e:
                        logger.error(
                            "Failed to initialize hash-sensitive processor",
                            exc_info=True,
                        )
                        if isinstance(e, ConfigurationError):
                            raise
                        raise ConfigurationError(
                            "Hash-sensitive processor initialization failed"
                        ) from e

        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drops the cached processor so the next call rebuilds it."""
        with cls._lock:
            cls._instance = None


def redact_context(
    context: Any,
    sensitive_keys: Any = None,
    processor: Optional[HashSensitiveProcessor] = None,
) -> RedactionResult:
    """Main entry point for one-shot context redaction.

    Args:
        context: Nested data to redact
        sensitive_keys: Specification overriding the processor's keys
        processor: Processor to use, defaults to the configured singleton

    Returns:
        RedactionResult with the redacted context and replaced paths

    Raises:
        HashSensitiveError: If configuration or traversal fails.
    """
    try:
        if processor is None:
            processor = RedactionService.get_instance()

        result = processor.redactor.redact_with_report(context, sensitive_keys)

        logger.debug(
            "Context redacted",
            extra={"redacted_count": result.redacted_count},
        )
        return result

    except HashSensitiveError as e:
        # Known errors are logged with context and handed back to the caller
        logger.error(
            f"Known error during redaction: {type(e).__name__}",
            exc_info=True,
            extra={"error_type": type(e).__name__},
        )
        raise

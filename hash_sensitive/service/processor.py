# hash_sensitive/service/processor.py

"""Logging integration hashing sensitive values in record context.

Context is attached to a record through the standard 'extra' mechanism:

    logger.info("User login", extra={"context": {"password": "hunter2"}})

Only the record's 'context' attribute is redacted; message, level, name,
timestamps and other attributes pass through untouched.
"""

import copy
import logging
from typing import Any, Optional, Union

from hash_sensitive.core.definitions import Defaults
from hash_sensitive.engine.hasher import Hasher
from hash_sensitive.engine.redactor import TreeRedactor

logger = logging.getLogger(__name__)

CONTEXT_ATTRIBUTE = "context"


class HashSensitiveProcessor:
    """Record processor replacing sensitive context values with digests."""

    def __init__(
        self,
        sensitive_keys: Any,
        algorithm: str = Defaults.ALGORITHM,
        length_limit: Optional[int] = None,
        exclusive_subtree: bool = Defaults.EXCLUSIVE_SUBTREE,
    ) -> None:
        """Creates a new processor.

        Args:
            sensitive_keys: Keys that should trigger the redaction
            algorithm: hashlib algorithm name
            length_limit: Maximum number of characters hashed per value
            exclusive_subtree: When False, matched subtrees are also scanned
                with the top-level keys

        Raises:
            UnsupportedAlgorithmError: If algorithm is not available.
            ConfigurationError: If sensitive_keys or length_limit is invalid.
        """
        self._redactor = TreeRedactor(
            sensitive_keys,
            hasher=Hasher(algorithm, length_limit),
            exclusive_subtree=exclusive_subtree,
        )

    @property
    def redactor(self) -> TreeRedactor:
        return self._redactor

    def __call__(self, record: logging.LogRecord) -> logging.LogRecord:
        """Returns a copy of the record with its context redacted.

        Args:
            record: Log record before being processed

        Returns:
            Log record with sensitive context values hashed
        """
        context = getattr(record, CONTEXT_ATTRIBUTE, None)
        if context is None:
            return record

        redacted = self._redactor.redact(context)

        processed = copy.copy(record)
        setattr(processed, CONTEXT_ATTRIBUTE, redacted)
        return processed

    def scrub_keys(self, value: Any, sensitive_keys: Any = None) -> Any:
        """Hashes sensitive keys in arbitrary nested data.

        Args:
            value: The data to hash values in
            sensitive_keys: Keys to hash, defaults to the configured keys

        Returns:
            Copy of value with sensitive keys hashed
        """
        return self._redactor.redact(value, sensitive_keys)


class HashSensitiveFilter(logging.Filter):
    """Logging filter handing redacted record copies to handlers.

    Relies on Filter.filter() returning a replacement record (Python 3.12+).
    """

    def __init__(self, processor: HashSensitiveProcessor, name: str = "") -> None:
        super().__init__(name)
        self._processor = processor

    def filter(self, record: logging.LogRecord) -> Union[bool, logging.LogRecord]:
        if not super().filter(record):
            return False
        return self._processor(record)

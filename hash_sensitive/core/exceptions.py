# hash_sensitive/core/exceptions.py

"""Custom exception hierarchy for the sensitive-value hashing system.

This module defines the error types raised by the digest engine, the tree
redactor, and the configuration layer. All of them indicate a programming or
configuration error rather than a transient fault.
"""

from typing import Any, Sequence


class HashSensitiveError(Exception):
    """Base exception for all application-specific errors."""

    pass


class ConfigurationError(HashSensitiveError):
    """Raised when configuration or specification loading fails."""

    pass


class UnsupportedAlgorithmError(ConfigurationError):
    """Raised when the configured digest algorithm is not available."""

    def __init__(self, algorithm: str, reason: str = "not recognized"):
        self.algorithm = algorithm
        super().__init__(f"Unsupported hash algorithm '{algorithm}': {reason}")


class TraversalError(HashSensitiveError):
    """Raised when the redactor reaches a value it cannot traverse.

    Attributes:
        key: Key at which the unsupported value was found
        path: Keys leading from the root of the tree to the value
    """

    def __init__(self, key: Any, path: Sequence[Any] = ()):
        self.key = key
        self.path = tuple(path)
        location = ".".join(str(part) for part in self.path) or "<root>"
        super().__init__(
            f"Don't know how to traverse value at key {key!r} (path: {location})"
        )

# hash_sensitive/engine/hasher.py

"""Digest engine turning sensitive values into hex digests."""

import hashlib
import json
import logging
from typing import Any, Optional, Sequence

from hash_sensitive.core.definitions import Defaults
from hash_sensitive.core.exceptions import ConfigurationError, UnsupportedAlgorithmError
from hash_sensitive.engine.nodes import to_plain

logger = logging.getLogger(__name__)


class Hasher:
    """Hashes values with a named hashlib algorithm and optional length limit.

    The algorithm is probed when the hasher is created, so a misconfigured
    name fails at startup instead of on the first sensitive value.
    """

    def __init__(
        self, algorithm: str = Defaults.ALGORITHM, length_limit: Optional[int] = None
    ) -> None:
        """Initialize the hasher.

        Args:
            algorithm: Name of a hashlib algorithm (e.g. 'sha256', 'md5')
            length_limit: Maximum number of characters hashed, None for no limit

        Raises:
            UnsupportedAlgorithmError: If hashlib cannot produce a digest for algorithm.
            ConfigurationError: If length_limit is negative.
        """
        if length_limit is not None and length_limit < 0:
            raise ConfigurationError(
                f"Length limit must be zero or positive, got {length_limit}"
            )

        self._algorithm = algorithm
        self._length_limit = length_limit
        self._probe_algorithm()

        logger.debug(
            "Hasher initialized",
            extra={"algorithm": algorithm, "length_limit": length_limit},
        )

    def _probe_algorithm(self) -> None:
        """Checks that the algorithm exists and yields a fixed-length digest.

        Raises:
            UnsupportedAlgorithmError: If the algorithm is unknown or variable-length.
        """
        try:
            probe = hashlib.new(self._algorithm)
        except (ValueError, TypeError) as e:
            raise UnsupportedAlgorithmError(self._algorithm) from e

        try:
            probe.hexdigest()
        except TypeError as e:
            # shake_* algorithms need an explicit output length
            raise UnsupportedAlgorithmError(
                self._algorithm, "variable-length digests are not supported"
            ) from e

    @property
    def algorithm(self) -> str:
        return self._algorithm

    @property
    def length_limit(self) -> Optional[int]:
        return self._length_limit

    def hash(self, value: str) -> Optional[str]:
        """Hashes the value using the configured algorithm and length limit.

        Args:
            value: Text to hash

        Returns:
            Lowercase hex digest, or None when the (truncated) input is empty
        """
        if not value:
            return None

        # Cut the input to the configured length limit
        if self._length_limit is not None:
            value = value[: self._length_limit]

        if not value:
            return None

        digest = hashlib.new(self._algorithm)
        digest.update(value.encode("utf-8"))
        return digest.hexdigest()

    @staticmethod
    def stringify(value: Any) -> str:
        """Returns the text hashed for a scalar value.

        True renders as "1" and False as "" (so it hashes to None), and
        integral floats drop their fractional part ("1.0" -> "1").
        """
        if isinstance(value, bool):
            return "1" if value else ""
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)

    def __repr__(self):
        return f"<Hasher algorithm={self._algorithm} length_limit={self._length_limit}>"


def serialize_subtree(value: Any, path: Sequence[Any] = ()) -> str:
    """Renders a container as stable compact JSON for whole-subtree hashing.

    Args:
        value: Mapping, sequence or record to serialize
        path: Keys leading to value, used for error reporting

    Returns:
        JSON text preserving key order

    Raises:
        TraversalError: If the subtree contains an unsupported value.
    """
    return json.dumps(to_plain(value, path), ensure_ascii=False, separators=(",", ":"))

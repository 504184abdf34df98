# hash_sensitive/core/loader.py

"""Sensitive-key specification loader for YAML files."""

import yaml
import logging
from pathlib import Path
from typing import Any, Union

from hash_sensitive.core.definitions import Defaults
from hash_sensitive.core.domain import Specification
from hash_sensitive.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class SpecificationLoader:
    """Loads sensitive-key specifications from YAML.

    A document is either the specification itself, e.g.

        - password
        - user:
            - email

    or a mapping carrying it under a top-level 'sensitive_keys' entry.
    """

    @classmethod
    def load(cls, path: Union[str, Path]) -> Specification:
        """Loads a specification from a YAML file.

        Args:
            path: Location of the YAML document

        Returns:
            Normalized Specification

        Raises:
            ConfigurationError: If file is missing, invalid, or empty.
        """
        spec_path = Path(path)

        if not spec_path.is_file():
            error_msg = f"Specification file not found: {spec_path}"
            logger.error(error_msg)
            raise ConfigurationError(error_msg)

        try:
            with open(spec_path, "r", encoding="utf-8") as f:
                text = f.read()
        except OSError as e:
            logger.error(f"Failed to read specification file: {e}", exc_info=True)
            raise ConfigurationError(f"Failed to read {spec_path}: {e}") from e

        specification = cls.loads(text, source=str(spec_path))

        logger.info(
            "Specification loaded successfully",
            extra={
                "spec_path": str(spec_path),
                "top_level_keys": len(specification),
            },
        )
        return specification

    @classmethod
    def loads(cls, text: str, source: str = "<string>") -> Specification:
        """Parses a specification from YAML text.

        Args:
            text: YAML document
            source: Name used in error messages

        Returns:
            Normalized Specification

        Raises:
            ConfigurationError: If the document is invalid or empty.
        """
        try:
            document = yaml.safe_load(text)
        except yaml.YAMLError as e:
            logger.error(f"YAML parsing error in {source}: {e}", exc_info=True)
            raise ConfigurationError(f"Failed to parse {source}: {e}") from e

        raw = cls._extract(document, source)
        return Specification.from_raw(raw)

    @staticmethod
    def _extract(document: Any, source: str) -> Any:
        """Returns the raw specification held by a parsed document.

        Raises:
            ConfigurationError: If the document holds no specification.
        """
        if not document:
            raise ConfigurationError(f"Specification {source} is empty or invalid")

        if isinstance(document, dict) and Defaults.SPEC_DOCUMENT_KEY in document:
            document = document[Defaults.SPEC_DOCUMENT_KEY]
            if not document:
                raise ConfigurationError(
                    f"Entry '{Defaults.SPEC_DOCUMENT_KEY}' in {source} is empty"
                )

        return document

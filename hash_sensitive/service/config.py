# hash_sensitive/service/config.py

"""Application configuration using Pydantic Settings.

Manages environment variables, defaults, and validation rules.
"""

from pathlib import Path
from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hash_sensitive.core.definitions import Defaults


class Settings(BaseSettings):
    """Global application settings.

    Loads values from environment variables (prefix 'HASH_SENSITIVE_') or .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="HASH_SENSITIVE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Digest Settings
    algorithm: str = Field(
        default=Defaults.ALGORITHM, description="hashlib algorithm used for digests."
    )

    length_limit: Optional[int] = Field(
        default=None,
        ge=0,
        description="Maximum number of characters hashed per value (unset = no limit).",
    )

    # Traversal Settings
    exclusive_subtree: bool = Field(
        default=Defaults.EXCLUSIVE_SUBTREE,
        description="Scan matched subtrees only with their nested specification.",
    )

    sensitive_keys_file: Optional[Path] = Field(
        default=None, description="YAML file holding the sensitive-key specification."
    )

    log_level: str = Field(default=Defaults.LOG_LEVEL, description="Root log level.")

    @field_validator("algorithm")
    @classmethod
    def validate_algorithm(cls, v: str) -> str:
        """Ensure algorithm name is not empty and normalize its case."""
        if not v.strip():
            raise ValueError("Hash algorithm name cannot be empty")
        return v.strip().lower()


# Singleton settings instance
settings = Settings()

"""Shared pytest fixtures for the hash-sensitive test suite."""

import logging
from pathlib import Path
from typing import Any, Callable, Optional

import pytest

from hash_sensitive.service.pipeline import RedactionService

# sha256 digests of values used across the tests
SHA256_FOOBAR = "c3ab8ff13720e8ad9047dd39466b3c8974e592c2fa383d4a3960714caef0c4f2"
SHA256_FOOBA = "41cbe1a87981490351ccad5346d96da0ac10678670b31fc0ab209aed1b5bc515"
SHA256_BAZQUX = "972c5e1203896784a7cf9dd60acd443a1065e19ad5f92e59a9180c185f065c04"
SHA256_TEST_VALUE = "4f7f6a4ae46676d9751fdccdf15ae1e6a200ed0de5653e06390148928c642006"
SHA256_TEST = "9f86d081884c7d659a2feaa0c55ad015a3bf4f1b2b0b822cd15d6c15b0f00a08"


@pytest.fixture
def make_record() -> Callable[..., logging.LogRecord]:
    """Factory building log records, optionally carrying a context attribute."""

    def _make(
        context: Optional[Any] = None,
        message: str = "test",
        level: int = logging.WARNING,
        name: str = "test",
    ) -> logging.LogRecord:
        record = logging.LogRecord(
            name=name, level=level, pathname=__file__, lineno=0,
            msg=message, args=None, exc_info=None,
        )
        if context is not None:
            record.context = context
        return record

    return _make


@pytest.fixture
def spec_file(tmp_path: Path) -> Path:
    """Write a YAML specification file with a nested entry."""
    path = tmp_path / "sensitive_keys.yaml"
    path.write_text(
        "sensitive_keys:\n"
        "  - password\n"
        "  - user:\n"
        "      - email\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def reset_service() -> None:
    """Make sure no test sees a processor cached by another."""
    RedactionService.reset()
    yield
    RedactionService.reset()

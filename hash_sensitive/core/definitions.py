# hash_sensitive/core/definitions.py

"""Constants shared by the digest engine, redactor and configuration layer."""


class Defaults:
    """Default values for redactor configuration."""

    ALGORITHM = "sha256"
    EXCLUSIVE_SUBTREE = True
    LOG_LEVEL = "INFO"

    # Top-level entry holding the specification inside a YAML document
    SPEC_DOCUMENT_KEY = "sensitive_keys"

    # Separator used when rendering key paths
    PATH_SEPARATOR = "."


class NodeKind:
    """Constants naming the shapes a value tree node can take."""

    NULL = "null"
    SCALAR = "scalar"
    CONTAINER = "container"
    UNSUPPORTED = "unsupported"

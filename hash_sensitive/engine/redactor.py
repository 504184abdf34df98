# hash_sensitive/engine/redactor.py

"""Tree redactor replacing sensitive values with digests.

The redactor walks a tree of mappings, sequences and records. At each entry
it checks whether the key is present in the active specification:

- scalars under a matching key are hashed;
- containers under a leaf marker are serialized and hashed as one value;
- containers under a subtree marker are walked with the nested
  specification, and again with the top-level specification when
  exclusive_subtree is off;
- containers under a non-matching key are walked with the same
  specification, so sensitive keys are found at any depth.

The input tree is never mutated. A walked container is rebuilt only when
something under it was replaced, otherwise the original object is kept.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from hash_sensitive.core.definitions import Defaults, NodeKind
from hash_sensitive.core.domain import RedactionResult, Specification
from hash_sensitive.core.exceptions import TraversalError
from hash_sensitive.engine.hasher import Hasher, serialize_subtree
from hash_sensitive.engine.nodes import as_container, classify_node

logger = logging.getLogger(__name__)


def format_path(path: Sequence[Any]) -> str:
    """Renders a key path as a dotted string (e.g. 'user.tokens.0')."""
    return Defaults.PATH_SEPARATOR.join(str(part) for part in path)


class TreeRedactor:
    """Hashes the values of sensitive keys inside nested data."""

    def __init__(
        self,
        specification: Any,
        hasher: Optional[Hasher] = None,
        exclusive_subtree: bool = Defaults.EXCLUSIVE_SUBTREE,
    ) -> None:
        """Initialize the redactor.

        Args:
            specification: Sensitive keys, in any shape Specification.from_raw accepts
            hasher: Digest engine, defaults to an unlimited sha256 Hasher
            exclusive_subtree: When False, matched subtrees are also scanned
                with the top-level specification

        Raises:
            ConfigurationError: If the specification has an unsupported shape.
        """
        self._specification = Specification.from_raw(specification)
        self._hasher = hasher if hasher is not None else Hasher()
        self._exclusive_subtree = exclusive_subtree

        logger.debug(
            "TreeRedactor initialized",
            extra={
                "top_level_keys": len(self._specification),
                "algorithm": self._hasher.algorithm,
                "exclusive_subtree": exclusive_subtree,
            },
        )

    @property
    def specification(self) -> Specification:
        return self._specification

    @property
    def hasher(self) -> Hasher:
        return self._hasher

    @property
    def exclusive_subtree(self) -> bool:
        return self._exclusive_subtree

    def redact(self, value: Any, spec: Any = None) -> Any:
        """Returns a copy of value with sensitive entries hashed.

        Args:
            value: Mapping, sequence or record to redact (None passes through)
            spec: Specification overriding the configured one for this call

        Returns:
            Redacted copy of value

        Raises:
            TraversalError: If the tree contains a value that cannot be traversed.
        """
        return self._redact_root(value, spec, None)

    def redact_with_report(self, value: Any, spec: Any = None) -> RedactionResult:
        """Redacts value and reports the key paths that were replaced.

        Args:
            value: Mapping, sequence or record to redact
            spec: Specification overriding the configured one for this call

        Returns:
            RedactionResult holding the redacted copy and the replaced paths
        """
        report: List[str] = []
        redacted = self._redact_root(value, spec, report)
        return RedactionResult(
            context=redacted,
            # A position hashed by both passes is reported once
            redacted_paths=list(dict.fromkeys(report)),
            metadata={
                "algorithm": self._hasher.algorithm,
                "length_limit": self._hasher.length_limit,
                "exclusive_subtree": self._exclusive_subtree,
            },
        )

    def _redact_root(
        self, value: Any, spec: Any, report: Optional[List[str]]
    ) -> Any:
        top_spec = (
            self._specification if spec is None else Specification.from_raw(spec)
        )

        kind = classify_node(value)
        if kind == NodeKind.NULL:
            return None
        if kind != NodeKind.CONTAINER:
            raise TraversalError(None, ())

        return self._traverse(value, top_spec, top_spec, (), report)

    def _traverse(
        self,
        value: Any,
        spec: Specification,
        top_spec: Specification,
        path: Tuple[Any, ...],
        report: Optional[List[str]],
    ) -> Any:
        """Walks one container and returns its redacted version.

        Args:
            value: Container to walk
            spec: Specification active at this level
            top_spec: Specification passed to the outermost call
            path: Keys leading from the root to value
            report: Collects replaced paths when not None

        Raises:
            TraversalError: If an entry holds an unsupported value.
        """
        view = as_container(value)
        changes: Dict[Any, Any] = {}

        for key, item in view.entries():
            item_path = (*path, key)
            kind = classify_node(item)

            if kind == NodeKind.NULL:
                # Nothing to hash or process
                continue

            if kind == NodeKind.UNSUPPORTED:
                raise TraversalError(key, item_path)

            if kind == NodeKind.SCALAR:
                if key in spec:
                    changes[key] = self._hasher.hash(Hasher.stringify(item))
                    self._record(report, item_path)
                continue

            if key not in spec:
                redacted = self._traverse(item, spec, top_spec, item_path, report)
                if redacted is not item:
                    changes[key] = redacted
                continue

            node = spec[key]

            if node.is_leaf:
                # No nested specification, hash the entire subtree
                changes[key] = self._hasher.hash(serialize_subtree(item, item_path))
                self._record(report, item_path)
                logger.debug(
                    "Hashed whole subtree",
                    extra={"path": format_path(item_path)},
                )
                continue

            redacted = self._traverse(item, node.children, top_spec, item_path, report)

            # Outside exclusive mode, keys in the subtree are also checked
            # against the top-level specification
            if not self._exclusive_subtree:
                redacted = self._traverse(
                    redacted, top_spec, top_spec, item_path, report
                )

            if redacted is not item:
                changes[key] = redacted

        return view.rebuild(changes)

    @staticmethod
    def _record(report: Optional[List[str]], path: Tuple[Any, ...]) -> None:
        if report is not None:
            report.append(format_path(path))

    def __repr__(self):
        return (
            f"<TreeRedactor keys={len(self._specification)} "
            f"hasher={self._hasher!r} "
            f"exclusive_subtree={self._exclusive_subtree}>"
        )

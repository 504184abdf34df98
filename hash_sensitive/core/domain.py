# hash_sensitive/core/domain.py

"""Domain models for sensitive-key specifications and redaction results."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Hashable, Iterator, List, Optional

from hash_sensitive.core.exceptions import ConfigurationError

_COLLECTION_TYPES = (list, tuple, set, frozenset)


@dataclass(frozen=True)
class SpecNode:
    """A single entry of a sensitive-key specification.

    Attributes:
        key: Key name that triggers the redaction
        children: Nested specification for subtree markers, None for leaf markers
    """

    key: Hashable
    children: Optional["Specification"] = None

    @property
    def is_leaf(self) -> bool:
        """True when matching this node hashes the whole reached value."""
        return self.children is None


class Specification(Mapping):
    """Immutable set of specification nodes, keyed by key name.

    Callers may describe sensitive keys as a flat list of names, a nested
    mapping, or a mix of both. Every accepted shape is normalized by
    from_raw() into SpecNode entries, so matching at traversal time is a
    plain membership test.
    """

    __slots__ = ("_nodes",)

    def __init__(self, nodes: Optional[Mapping[Hashable, SpecNode]] = None):
        self._nodes = MappingProxyType(dict(nodes or {}))

    @classmethod
    def from_raw(cls, raw: Any) -> "Specification":
        """Builds a specification from a caller-supplied structure.

        Args:
            raw: A Specification, a key name, a list/tuple/set of key names
                and mappings, or a mapping of key names to nested specs

        Returns:
            Normalized Specification

        Raises:
            ConfigurationError: If raw has a shape that cannot describe keys
        """
        if isinstance(raw, Specification):
            return raw

        nodes: Dict[Hashable, SpecNode] = {}
        cls._collect(raw, nodes)
        return cls(nodes)

    @classmethod
    def _collect(cls, raw: Any, nodes: Dict[Hashable, SpecNode]) -> None:
        if raw is None:
            return

        if isinstance(raw, Specification):
            for node in raw.nodes():
                cls._add(nodes, node)
            return

        if isinstance(raw, (str, int)) and not isinstance(raw, bool):
            cls._add(nodes, SpecNode(raw))
            return

        if isinstance(raw, Mapping):
            for key, sub in raw.items():
                if isinstance(sub, (Mapping, Specification) + _COLLECTION_TYPES):
                    cls._add(nodes, SpecNode(key, cls.from_raw(sub)))
                else:
                    cls._add(nodes, SpecNode(key))
            return

        if isinstance(raw, _COLLECTION_TYPES):
            for item in raw:
                if isinstance(item, _COLLECTION_TYPES):
                    raise ConfigurationError(
                        f"Nested list {item!r} in specification has no key to attach to"
                    )
                cls._collect(item, nodes)
            return

        raise ConfigurationError(
            f"Unsupported specification entry of type {type(raw).__name__}: {raw!r}"
        )

    @staticmethod
    def _add(nodes: Dict[Hashable, SpecNode], node: SpecNode) -> None:
        existing = nodes.get(node.key)

        # A subtree marker is never downgraded by a later leaf marker
        if existing is not None and not existing.is_leaf and node.is_leaf:
            return

        nodes[node.key] = node

    def __getitem__(self, key: Hashable) -> SpecNode:
        return self._nodes[key]

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, key: object) -> bool:
        try:
            return key in self._nodes
        except TypeError:
            # Unhashable keys can never be sensitive
            return False

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Specification):
            return dict(self._nodes) == dict(other._nodes)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self._nodes.items()))

    def nodes(self) -> List[SpecNode]:
        """Returns the specification nodes in declaration order."""
        return list(self._nodes.values())

    def to_raw(self) -> Dict[Hashable, Any]:
        """Renders the specification as plain data (None marks a leaf)."""
        return {
            node.key: None if node.is_leaf else node.children.to_raw()
            for node in self._nodes.values()
        }

    def __repr__(self):
        return f"<Specification {self.to_raw()!r}>"


@dataclass
class RedactionResult:
    """Result object returned by the redaction service.

    Attributes:
        context: Redacted copy of the input tree
        redacted_paths: Dotted key paths of every replaced position
        metadata: Additional processing information
    """

    context: Any
    redacted_paths: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def redacted_count(self) -> int:
        """Number of positions whose value was replaced."""
        return len(self.redacted_paths)

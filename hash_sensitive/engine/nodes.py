# hash_sensitive/engine/nodes.py

"""Node classification and container adapters for value trees.

Every value reached by the redactor is classified once into a NodeKind.
Containers are wrapped in a ContainerView exposing their entries in order
and a way to rebuild a copy with some entries replaced, so the traversal
never has to care whether it walks a dict, a list, a dataclass or a
pydantic model.
"""

import copy
import dataclasses
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping, MutableMapping
from types import MappingProxyType, SimpleNamespace
from typing import Any, Dict, List, Optional, Sequence, Tuple

from pydantic import BaseModel

from hash_sensitive.core.definitions import NodeKind
from hash_sensitive.core.exceptions import TraversalError

logger = logging.getLogger(__name__)

SCALAR_TYPES = (str, int, float, bool)
_JSON_KEY_TYPES = (str, int, float, bool)


class ContainerView(ABC):
    """Uniform access to the entries of a container node."""

    def __init__(self, value: Any):
        self.value = value

    @abstractmethod
    def entries(self) -> List[Tuple[Any, Any]]:
        """Returns (key, value) pairs in their original order."""
        pass

    def rebuild(self, changes: Dict[Any, Any]) -> Any:
        """Returns the container with the given entries replaced.

        Args:
            changes: New values keyed by existing keys

        Returns:
            The wrapped value itself when changes is empty, otherwise a copy
            of the same type and key set
        """
        if not changes:
            return self.value
        return self.replace(changes)

    @abstractmethod
    def replace(self, changes: Dict[Any, Any]) -> Any:
        """Returns a copy of the container with the given entries replaced."""
        pass

    def plain(self, items: List[Tuple[Any, Any]]) -> Any:
        """Returns JSON-ready data for already converted entries."""
        return {
            key if isinstance(key, _JSON_KEY_TYPES) else str(key): item
            for key, item in items
        }


class MappingView(ContainerView):
    def entries(self) -> List[Tuple[Any, Any]]:
        return list(self.value.items())

    def replace(self, changes: Dict[Any, Any]) -> Any:
        if isinstance(self.value, MutableMapping):
            rebuilt = copy.copy(self.value)
        else:
            rebuilt = dict(self.value)

        for key, item in changes.items():
            rebuilt[key] = item

        if isinstance(self.value, MappingProxyType):
            return MappingProxyType(rebuilt)
        # Other read-only mappings come back as dicts
        return rebuilt


class SequenceView(ContainerView):
    def entries(self) -> List[Tuple[Any, Any]]:
        return list(enumerate(self.value))

    def replace(self, changes: Dict[Any, Any]) -> Any:
        items = list(self.value)
        for index, item in changes.items():
            items[index] = item

        if isinstance(self.value, tuple):
            return tuple(items)
        return type(self.value)(items)

    def plain(self, items: List[Tuple[Any, Any]]) -> Any:
        return [item for _, item in items]


class NamedTupleView(ContainerView):
    def entries(self) -> List[Tuple[Any, Any]]:
        return list(zip(self.value._fields, self.value))

    def replace(self, changes: Dict[Any, Any]) -> Any:
        return self.value._replace(**changes)


class RecordView(ContainerView):
    """Dataclass instances and SimpleNamespace objects."""

    def entries(self) -> List[Tuple[Any, Any]]:
        if dataclasses.is_dataclass(self.value):
            return [
                (f.name, getattr(self.value, f.name))
                for f in dataclasses.fields(self.value)
            ]
        return list(vars(self.value).items())

    def replace(self, changes: Dict[Any, Any]) -> Any:
        rebuilt = copy.copy(self.value)
        for name, item in changes.items():
            # Bypasses frozen dataclass guards, the copy is private to us
            object.__setattr__(rebuilt, name, item)
        return rebuilt


class ModelView(ContainerView):
    """Pydantic models, including extra fields."""

    def entries(self) -> List[Tuple[Any, Any]]:
        return list(self.value)

    def replace(self, changes: Dict[Any, Any]) -> Any:
        return self.value.model_copy(update=changes)


def is_record(value: Any) -> bool:
    """True for dataclass instances and SimpleNamespace objects."""
    if isinstance(value, SimpleNamespace):
        return True
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def as_container(value: Any) -> Optional[ContainerView]:
    """Wraps value in the matching ContainerView, None if it is not a container."""
    if isinstance(value, BaseModel):
        return ModelView(value)
    if isinstance(value, tuple) and hasattr(value, "_fields"):
        return NamedTupleView(value)
    if isinstance(value, Mapping):
        return MappingView(value)
    if isinstance(value, (list, tuple)):
        return SequenceView(value)
    if is_record(value):
        return RecordView(value)
    return None


def classify_node(value: Any) -> str:
    """Returns the NodeKind of a value."""
    if value is None:
        return NodeKind.NULL
    if isinstance(value, SCALAR_TYPES):
        return NodeKind.SCALAR
    if as_container(value) is not None:
        return NodeKind.CONTAINER
    return NodeKind.UNSUPPORTED


def to_plain(value: Any, path: Sequence[Any] = ()) -> Any:
    """Converts a value tree into JSON-ready dicts, lists and scalars.

    Args:
        value: Tree to convert
        path: Keys leading to value, used for error reporting

    Returns:
        Plain data with the same shape as value

    Raises:
        TraversalError: If the tree contains an unsupported value.
    """
    kind = classify_node(value)

    if kind == NodeKind.NULL or kind == NodeKind.SCALAR:
        return value

    if kind == NodeKind.CONTAINER:
        view = as_container(value)
        items = [
            (key, to_plain(item, (*path, key))) for key, item in view.entries()
        ]
        return view.plain(items)

    raise TraversalError(path[-1] if path else None, path)

"""NodeKind StrEnum and path aliases for nested map/list trees.

Every value reachable from an explored tree falls into exactly one of three
kinds.  Traversal, output assembly, and equality all dispatch on the kind
returned by ``node_kind`` instead of repeating ``isinstance`` chains.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from enum import StrEnum, auto
from typing import Any, TypeAlias

__all__ = ["NodeKind", "Path", "Step", "new_container", "node_kind"]

# A map key or a list index.
Step: TypeAlias = Hashable

# Route from the root to a node.  The empty tuple is the root itself.
Path: TypeAlias = tuple[Step, ...]


class NodeKind(StrEnum):
    """Enumeration of the three node kinds in an explored tree.

    - MAP    -> "map"    : any ``collections.abc.Mapping``
    - LIST   -> "list"   : a ``list``
    - SCALAR -> "scalar" : everything else (tuples and strings included)
    """

    MAP = auto()
    LIST = auto()
    SCALAR = auto()


def node_kind(value: Any) -> NodeKind:
    """Classify ``value`` as a map, a list, or a scalar leaf."""
    if isinstance(value, Mapping):
        return NodeKind.MAP
    if isinstance(value, list):
        return NodeKind.LIST
    return NodeKind.SCALAR


def new_container(kind: NodeKind) -> dict[Any, Any] | list[Any]:
    """Return a fresh, empty output container mirroring ``kind``.

    Raises:
        ValueError: If ``kind`` is ``NodeKind.SCALAR``.
    """
    if kind is NodeKind.MAP:
        return {}
    if kind is NodeKind.LIST:
        return []
    msg = f"scalar nodes have no container, got {kind!r}"
    raise ValueError(msg)

"""ExploreConfig and the default selection/report callables.

ExploreConfig is a frozen (immutable) dataclass holding the three knobs of a
single ``explore`` call: which nodes to select, what to report for each of
them, and whether reconstructed lists keep their source indexes.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Final, TypeAlias

from object_explorer.tree.nodes import Path

__all__ = ["ALL_NODES", "NODE_ITSELF", "ExploreConfig", "Reporter", "Selector"]

# select(node, path, parent) -> truthy when the node belongs in the output
Selector: TypeAlias = Callable[[Any, Path, Any], object]

# report(node, path, root) -> value stored in the output at ``path``
Reporter: TypeAlias = Callable[[Any, Path, Any], Any]


def _all_nodes(node: Any, path: Path, parent: Any) -> bool:
    return True


def _node_itself(node: Any, path: Path, root: Any) -> Any:
    return node


ALL_NODES: Final[Selector] = _all_nodes
NODE_ITSELF: Final[Reporter] = _node_itself


@dataclass(frozen=True, slots=True)
class ExploreConfig:
    """Immutable configuration for one exploration.

    Attributes:
        select: Predicate called as ``select(node, path, parent)``.  Nodes for
            which it returns a truthy value are reported.  Exceptions it
            raises mean "not selected".  Defaults to ``ALL_NODES``.
        report: Called as ``report(node, path, root)`` for each selected
            node; its return value is placed in the output.  Defaults to
            ``NODE_ITSELF``.
        preserve_array_indexes: When True, selected list elements keep their
            source index and skipped positions are filled with ``NoValue``.
            When False (default), they are packed from index 0.
    """

    select: Selector = ALL_NODES
    report: Reporter = NODE_ITSELF
    preserve_array_indexes: bool = False

    def __post_init__(self) -> None:
        if not callable(self.select):
            msg = f"select must be callable, got {type(self.select).__name__}"
            raise TypeError(msg)
        if not callable(self.report):
            msg = f"report must be callable, got {type(self.report).__name__}"
            raise TypeError(msg)
        if not isinstance(self.preserve_array_indexes, bool):
            msg = (
                "preserve_array_indexes must be a bool, "
                f"got {type(self.preserve_array_indexes).__name__}"
            )
            raise TypeError(msg)

"""TreeWalker: depth-first, post-order traversal of nested map/list trees.

Each node is yielded exactly once, *after* all of its descendants, as a
``Visit`` carrying the node, its path from the root, and the container that
holds it.  Maps are iterated in insertion order, lists in index order.
Scalars have no children.

The root is yielded last, with an empty path and ``parent=None``::

    walker = TreeWalker()
    [v.path for v in walker.walk({"a": [1, 2]})]
    # [("a", 0), ("a", 1), ("a",), ()]
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from object_explorer.tree.nodes import NodeKind, Path, node_kind

__all__ = ["TreeWalker", "Visit"]


@dataclass(frozen=True, slots=True)
class Visit:
    """One node reached during traversal.

    Attributes:
        node:   The value at ``path``.
        path:   Keys/indices leading from the root to ``node``.
        parent: The map or list holding ``node``; ``None`` for the root.
    """

    node: Any
    path: Path
    parent: Any


@dataclass
class TreeWalker:
    """Walks a tree depth-first, yielding children before their container.

    Traversal is plain recursion and does not guard against cycles; a tree
    that contains itself raises ``RecursionError``.
    """

    def walk(self, node: Any, path: Path = (), parent: Any = None) -> Iterator[Visit]:
        """Yield a ``Visit`` for ``node`` and every node beneath it, post-order.

        Args:
            node:   Root of the (sub)tree to walk.
            path:   Path of ``node`` from the overall root. Defaults to ``()``.
            parent: Container holding ``node``. Defaults to ``None``.
        """
        kind = node_kind(node)
        if kind is NodeKind.MAP:
            yield from self._walk_map(node, path)
        elif kind is NodeKind.LIST:
            yield from self._walk_list(node, path)

        yield Visit(node=node, path=path, parent=parent)

    def _walk_map(self, node: Mapping[Any, Any], path: Path) -> Iterator[Visit]:
        for key, value in node.items():
            yield from self.walk(value, (*path, key), node)

    def _walk_list(self, node: list[Any], path: Path) -> Iterator[Visit]:
        for index, value in enumerate(node):
            yield from self.walk(value, (*path, index), node)

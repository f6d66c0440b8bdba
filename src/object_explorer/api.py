"""Public API functions for object-explorer.

This module provides the user-facing functions: explore, diff, diff_paths,
and is_equivalent. Each call creates a fresh ObjectExplorer to guarantee zero
shared state between calls.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from object_explorer.config import ALL_NODES, NODE_ITSELF, Reporter, Selector
from object_explorer.explorer import ObjectExplorer
from object_explorer.tree.nodes import Path
from object_explorer.tree.paths import to_pointer

__all__ = ["diff", "diff_paths", "explore", "is_equivalent"]


def explore(
    tree: Mapping[Any, Any],
    select: Selector = ALL_NODES,
    report: Reporter = NODE_ITSELF,
    preserve_array_indexes: bool = False,
) -> dict[Any, Any]:
    """Return the selected nodes of ``tree``, rebuilt along their paths.

    Args:
        tree:   The map to explore.
        select: ``select(node, path, parent)`` predicate. Defaults to all nodes.
        report: ``report(node, path, root)`` output value. Defaults to the node.
        preserve_array_indexes: Keep source list indexes, padding with ``NoValue``.

    Returns:
        A new map holding one entry per selected path.

    Raises:
        InvalidInput: If ``tree`` is not a mapping.
    """
    return ObjectExplorer(tree).explore(
        select=select,
        report=report,
        preserve_array_indexes=preserve_array_indexes,
    )


def diff(
    tree: Mapping[Any, Any],
    other: Any,
    report: Reporter = NODE_ITSELF,
    preserve_array_indexes: bool = False,
) -> dict[Any, Any]:
    """Return the nodes of ``tree`` that differ at the same path in ``other``.

    Args:
        tree:   The map to explore.
        other:  The value to compare against.
        report: ``report(node, path, root)`` output value. Defaults to the node.
        preserve_array_indexes: Keep source list indexes, padding with ``NoValue``.

    Returns:
        A new map holding one entry per differing path; ``{}`` when every
        path of ``tree`` holds an equal value in ``other``.
    """
    return ObjectExplorer(tree).diff(
        other,
        report=report,
        preserve_array_indexes=preserve_array_indexes,
    )


def diff_paths(tree: Mapping[Any, Any], other: Any) -> list[str]:
    """Return the JSON Pointer of every differing path of ``tree``, in post-order.

    Nested differences are all listed, so a changed list element is followed
    later by the list that contains it.

    Args:
        tree:  The map to explore.
        other: The value to compare against.

    Returns:
        JSON Pointers (RFC 6901), e.g. ``["/y/0", "/y"]``.
    """
    pointers: list[str] = []

    def _record(node: Any, path: Path, root: Any) -> Any:
        pointers.append(to_pointer(path))
        return node

    ObjectExplorer(tree).diff(other, report=_record)
    return pointers


def is_equivalent(tree: Mapping[Any, Any], other: Any) -> bool:
    """Return True if ``tree`` and ``other`` hold equal values at every path.

    Unlike ``diff``, the check runs in both directions, so keys present on
    only one side make the trees non-equivalent.

    Args:
        tree:  First map.
        other: Second value. A non-mapping is never equivalent.

    Returns:
        True when neither tree has a path that differs in the other.
    """
    if not isinstance(other, Mapping):
        return False
    return not diff(tree, other) and not diff(other, tree)

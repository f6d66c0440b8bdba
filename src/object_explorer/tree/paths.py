"""Path helpers: safe lookup and JSON Pointer rendering.

``dig`` follows a path through any tree and answers ``NoValue`` (or a given
default) instead of raising when the path does not exist.  The diff
predicate passes its own default so that a missing path stays distinct from
a stored ``NoValue``.

``to_pointer`` renders a path as an RFC 6901 JSON Pointer for messages and
logs:
- Root is "" (empty string)
- Each step appends "/{key_or_index}", with "~" escaped as "~0" and "/" as "~1"
"""

from __future__ import annotations

from typing import Any

from object_explorer.sentinel import NoValue
from object_explorer.tree.nodes import NodeKind, Path, node_kind

__all__ = ["dig", "to_pointer"]


def dig(tree: Any, path: Path, default: Any = NoValue) -> Any:
    """Return the value at ``path`` inside ``tree``, or ``default`` if absent.

    A path is absent when a map lacks the key, a list index is out of range
    or not an integer, or the path runs into a scalar before it ends.
    Lookups never mutate ``tree`` (a ``defaultdict`` does not grow).

    Args:
        tree:    Any value; usually the map a diff compares against.
        path:    Keys/indices to follow.
        default: Returned when the path is absent.  Defaults to ``NoValue``.

    Returns:
        The value found, or ``default``.
    """
    node = tree
    for step in path:
        kind = node_kind(node)
        if kind is NodeKind.MAP:
            if step not in node:
                return default
            node = node[step]
        elif kind is NodeKind.LIST:
            # bool subclasses int, but True is a map key here, never an index
            if (
                not isinstance(step, int)
                or isinstance(step, bool)
                or not 0 <= step < len(node)
            ):
                return default
            node = node[step]
        else:
            return default
    return node


def to_pointer(path: Path) -> str:
    """Render ``path`` as a JSON Pointer, e.g. ``("d", 1, "b")`` -> ``"/d/1/b"``."""
    return "".join(
        "/" + str(step).replace("~", "~0").replace("/", "~1") for step in path
    )

"""Deep value equality used by the diff predicate.

Maps compare by key set and per-key value (order-insensitive), lists compare
element-wise, and scalars use ``==``.  ``numpy.ndarray`` leaves compare by
shape and content via ``np.array_equal``; plain ``==`` on arrays returns an
array whose truth value is ambiguous.

Booleans only equal booleans: ``True`` and ``1`` are different values here,
even though Python's ``==`` says otherwise.

``NoValue`` equals only itself.  A path missing from the other tree is not
``NoValue``: the diff predicate detects it before comparing values.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from object_explorer.sentinel import NoValue
from object_explorer.tree.nodes import NodeKind, node_kind

__all__ = ["values_equal"]

_BOOL_TYPES = (bool, np.bool_)


def values_equal(left: Any, right: Any) -> bool:
    """Return True if ``left`` and ``right`` are structurally equal.

    Args:
        left:  Any value (map, list, scalar, ndarray, ``NoValue``).
        right: Any value.

    Returns:
        True when both sides have the same kind and equal content.
    """
    if left is right:
        return True
    if left is NoValue or right is NoValue:
        return False

    kind = node_kind(left)
    if kind is not node_kind(right):
        return False

    if kind is NodeKind.MAP:
        if len(left) != len(right) or any(key not in right for key in left):
            return False
        return all(values_equal(value, right[key]) for key, value in left.items())

    if kind is NodeKind.LIST:
        if len(left) != len(right):
            return False
        return all(values_equal(a, b) for a, b in zip(left, right, strict=True))

    if isinstance(left, np.ndarray) or isinstance(right, np.ndarray):
        return bool(np.array_equal(left, right))

    if isinstance(left, _BOOL_TYPES) is not isinstance(right, _BOOL_TYPES):
        return False

    return bool(left == right)

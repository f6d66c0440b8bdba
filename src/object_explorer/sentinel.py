"""NoValue: the placeholder marker for list slots that hold no selected value.

When ``preserve_array_indexes=True``, reconstructed lists keep the source
positions of their selected elements.  Every position in front of a selected
element that was not itself selected is filled with ``NoValue``.

``NoValue`` is a single-member Enum, so it is a true singleton: it survives
``copy.deepcopy`` and pickling as the same object, compares equal only to
itself, and is distinct from ``None``.  Test for it by identity::

    from object_explorer import NoValue

    if slot is NoValue:
        ...
"""

from __future__ import annotations

from enum import Enum
from typing import Final, Literal

__all__ = ["NoValue", "NoValueType"]


class _NoValueType(Enum):
    NO_VALUE = "NoValue"

    def __repr__(self) -> str:
        return "NoValue"

    __str__ = __repr__

    def __bool__(self) -> bool:
        return False


NoValue: Final = _NoValueType.NO_VALUE

# Annotation helper, e.g. ``def lookup(...) -> Any | NoValueType``.
NoValueType = Literal[_NoValueType.NO_VALUE]

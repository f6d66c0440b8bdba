"""OutputAssembler: sparse reconstruction of the source shape along a path.

Given a selected path and its report value, ``assign`` creates every
intermediate container the path passes through, of the same kind (map or
list) as the source container at that position, and stores the value at the
end.  Siblings that were never selected stay absent.

Assembly is a fold (``functools.reduce``) over the path steps carrying a
``_Cursor``: the source container, the matching output container, and the
path prefix consumed so far.

List slots:
- preserve mode: the output index is the source index; any gap in front of
  it is padded with ``NoValue``.
- compact mode: each source index gets the next free output slot the first
  time it is touched under that list, and keeps it for later writes, so
  selected elements are packed from 0 in traversal order.

Precedence: writes are last-write-wins.  Traversal is post-order, so a
selected ancestor is written after all of its descendants and its report
replaces whatever was assembled below it.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from functools import reduce
from typing import Any

from object_explorer.sentinel import NoValue
from object_explorer.tree.nodes import Path, Step, new_container, node_kind

__all__ = ["OutputAssembler"]


@dataclass(frozen=True, slots=True)
class _Cursor:
    source: Any
    output: dict[Any, Any] | list[Any]
    prefix: Path


class OutputAssembler:
    """Writes report values into an output tree mirroring ``source``.

    One assembler serves one exploration: it remembers, per output list,
    which source index landed in which output slot.

    Args:
        source: The tree being explored.  Never mutated.
        preserve_array_indexes: Keep source list indexes (padding with
            ``NoValue``) instead of packing selected elements.
    """

    def __init__(
        self,
        source: Mapping[Any, Any],
        preserve_array_indexes: bool = False,
    ) -> None:
        self._source = source
        self._preserve_array_indexes = preserve_array_indexes
        # list prefix -> {source index: output index}, compact mode only
        self._list_slots: dict[Path, dict[int, int]] = {}

    def assign(self, output: dict[Any, Any], path: Path, value: Any) -> dict[Any, Any]:
        """Store ``value`` at the output position mirroring ``path``.

        Args:
            output: The output root being built (mutated in place).
            path:   Non-empty path of the selected node in the source tree.
                    The empty path has no slot and leaves ``output`` as is.
            value:  The report value to store.

        Returns:
            ``output``, for chaining.
        """
        if not path:
            return output

        *steps, last = path
        cursor = reduce(self._step_into, steps, _Cursor(self._source, output, ()))
        self._write(cursor.output, self._slot(cursor, last), value)
        return output

    # ------------------------------------------------------------------
    # Fold step
    # ------------------------------------------------------------------

    def _step_into(self, cursor: _Cursor, step: Step) -> _Cursor:
        """Descend one step, creating the output container on first touch."""
        source_child = cursor.source[step]
        kind = node_kind(source_child)
        slot = self._slot(cursor, step)

        container = self._read(cursor.output, slot)
        if container is NoValue or node_kind(container) is not kind:
            container = new_container(kind)
            self._write(cursor.output, slot, container)

        return _Cursor(source_child, container, (*cursor.prefix, step))

    # ------------------------------------------------------------------
    # Slot resolution
    # ------------------------------------------------------------------

    def _slot(self, cursor: _Cursor, step: Step) -> Step:
        """Map a source step to the key/index used in the output container."""
        if not isinstance(cursor.output, list) or self._preserve_array_indexes:
            return step

        slots = self._list_slots.setdefault(cursor.prefix, {})
        if step not in slots:
            slots[step] = len(cursor.output)
        return slots[step]

    @staticmethod
    def _read(container: dict[Any, Any] | list[Any], slot: Any) -> Any:
        if isinstance(container, list):
            return container[slot] if slot < len(container) else NoValue
        return container.get(slot, NoValue)

    @staticmethod
    def _write(container: dict[Any, Any] | list[Any], slot: Any, value: Any) -> None:
        if isinstance(container, list):
            if slot >= len(container):
                container.extend([NoValue] * (slot - len(container)))
                container.append(value)
            else:
                container[slot] = value
        else:
            container[slot] = value

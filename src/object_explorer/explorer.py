"""ObjectExplorer: selective traversal, reporting, and reassembly of a tree.

This is the central wiring layer of the package.  It walks the root tree with
``TreeWalker``, runs the selection predicate on every node, computes the
report for each selected node, and hands the result to ``OutputAssembler``,
which rebuilds only the branches leading to selected nodes.

Architecture:
- Traversal is post-order: descendants are selected and written before
  their container is tested.  A selected container therefore replaces any
  partial output assembled beneath it (ancestor wins).
- A predicate that raises is treated as "not selected" and logged at DEBUG;
  the traversal carries on with the remaining nodes.  Report functions are
  not guarded: their errors reach the caller.
- The root (empty path) can be selected but has no slot in the output, so
  ``explore`` always returns a fresh ``dict``.
- ``diff`` is ``explore`` with a fixed predicate comparing every non-root
  node against the same path in another tree.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from object_explorer.assembly import OutputAssembler
from object_explorer.config import (
    ALL_NODES,
    NODE_ITSELF,
    ExploreConfig,
    Reporter,
    Selector,
)
from object_explorer.equality import values_equal
from object_explorer.exceptions import InvalidInput
from object_explorer.tree.nodes import Path
from object_explorer.tree.paths import dig, to_pointer
from object_explorer.tree.walker import TreeWalker, Visit

__all__ = ["ObjectExplorer"]

logger = logging.getLogger(__name__)

# Private miss marker for diff lookups; NoValue can be a stored value.
_MISSING = object()


class ObjectExplorer:
    """Explores a nested map/list tree and reports on selected nodes.

    The explorer keeps a reference to ``tree`` and never mutates it.  Every
    ``explore``/``diff`` call is independent and returns a newly built map.

    Example::

        from object_explorer import ObjectExplorer, NoValue

        explorer = ObjectExplorer({"a": [1, None, 3], "b": None})
        nones = lambda node, path, parent: node is None

        explorer.explore(select=nones)
        # {"a": [None], "b": None}
        explorer.explore(select=nones, preserve_array_indexes=True)
        # {"a": [NoValue, None], "b": None}

        explorer.diff({"a": [1, None, 3], "b": 0})
        # {"b": None}

    Raises:
        InvalidInput: If ``tree`` is not a mapping.
    """

    def __init__(self, tree: Mapping[Any, Any]) -> None:
        if not isinstance(tree, Mapping):
            msg = f"tree must be a mapping, got {type(tree).__name__}"
            raise InvalidInput(msg)

        self._tree = tree
        self._walker = TreeWalker()

    @property
    def tree(self) -> Mapping[Any, Any]:
        """The root tree this explorer was built around."""
        return self._tree

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def explore(
        self,
        select: Selector = ALL_NODES,
        report: Reporter = NODE_ITSELF,
        preserve_array_indexes: bool = False,
    ) -> dict[Any, Any]:
        """Select nodes, report on them, and rebuild their paths.

        The root may pass ``select``, but it has no slot in the output, so
        ``report`` is never called for it and never receives an empty path.

        Args:
            select: ``select(node, path, parent)`` predicate.  Defaults to
                selecting every node.
            report: ``report(node, path, root)`` producing the output value
                for a selected node.  Defaults to the node itself.
            preserve_array_indexes: Keep selected list elements at their
                source index, padding gaps with ``NoValue``.

        Returns:
            A new map holding one entry per selected path.
        """
        config = ExploreConfig(
            select=select,
            report=report,
            preserve_array_indexes=preserve_array_indexes,
        )
        return self.explore_with(config)

    def explore_with(self, config: ExploreConfig) -> dict[Any, Any]:
        """Run ``explore`` from a prepared ``ExploreConfig``."""
        output: dict[Any, Any] = {}
        assembler = OutputAssembler(
            self._tree, preserve_array_indexes=config.preserve_array_indexes
        )

        visited = 0
        selected = 0
        for visit in self._walker.walk(self._tree):
            visited += 1
            if not self._is_selected(config.select, visit):
                continue
            selected += 1
            if not visit.path:
                continue
            value = config.report(visit.node, visit.path, self._tree)
            assembler.assign(output, visit.path, value)

        logger.debug("explored %d nodes, selected %d", visited, selected)
        return output

    def diff(
        self,
        other: Any,
        report: Reporter = NODE_ITSELF,
        preserve_array_indexes: bool = False,
    ) -> dict[Any, Any]:
        """Report every node whose value differs at the same path in ``other``.

        The root itself is never selected.  A path missing from ``other``
        counts as different.  The comparison is one-sided: keys present only
        in ``other`` do not appear in the result.

        Args:
            other: The tree to compare against.
            report: As for ``explore``.  Defaults to this tree's node.
            preserve_array_indexes: As for ``explore``.

        Returns:
            A new map holding one entry per differing path.
        """
        return self.explore(
            select=self._diff_selector(other),
            report=report,
            preserve_array_indexes=preserve_array_indexes,
        )

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    @staticmethod
    def _is_selected(select: Selector, visit: Visit) -> bool:
        try:
            return bool(select(visit.node, visit.path, visit.parent))
        except Exception as exc:  # noqa: BLE001
            logger.debug(
                "select raised at %r, node skipped: %r", to_pointer(visit.path), exc
            )
            return False

    @staticmethod
    def _diff_selector(other: Any) -> Selector:
        def select(node: Any, path: Path, parent: Any) -> bool:
            if not path:
                return False
            theirs = dig(other, path, _MISSING)
            return theirs is _MISSING or not values_equal(node, theirs)

        return select

"""DiffEntry dataclass and the annotated-diff report factory.

``diff`` reports the explored tree's own node by default.  Passing
``report=diff_entry_report(other)`` instead puts a ``DiffEntry`` at every
differing path, pairing both sides of the difference.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from object_explorer.config import Reporter
from object_explorer.tree.nodes import Path
from object_explorer.tree.paths import dig

__all__ = ["DiffEntry", "diff_entry_report"]


@dataclass(frozen=True, slots=True)
class DiffEntry:
    """Both sides of one difference found by ``diff``.

    Attributes:
        path:  Keys/indices of the differing node.
        node:  Value at ``path`` in the explored tree.
        other: Value at ``path`` in the compared tree, or ``NoValue`` when
            the path does not exist there.
    """

    path: Path
    node: Any
    other: Any


def diff_entry_report(other: Any) -> Reporter:
    """Return a report function producing a ``DiffEntry`` against ``other``.

    Example::

        explorer = ObjectExplorer({"x": 1, "y": 2})
        explorer.diff({"x": 1, "y": 3}, report=diff_entry_report({"x": 1, "y": 3}))
        # {"y": DiffEntry(path=("y",), node=2, other=3)}
    """

    def report(node: Any, path: Path, root: Any) -> DiffEntry:
        return DiffEntry(path=path, node=node, other=dig(other, path))

    return report

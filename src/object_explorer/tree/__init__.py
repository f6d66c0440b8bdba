"""Tree subpackage for map/list traversal primitives.

Re-exports the public API for the tree module:
- NodeKind: StrEnum of the three node kinds (MAP, LIST, SCALAR)
- Path / Step: type aliases for routes through a tree
- TreeWalker / Visit: post-order depth-first traversal
- dig / to_pointer: safe path lookup and JSON Pointer rendering
"""

from object_explorer.tree.nodes import NodeKind, Path, Step, new_container, node_kind
from object_explorer.tree.paths import dig, to_pointer
from object_explorer.tree.walker import TreeWalker, Visit

__all__ = [
    "NodeKind",
    "Path",
    "Step",
    "TreeWalker",
    "Visit",
    "dig",
    "new_container",
    "node_kind",
    "to_pointer",
]

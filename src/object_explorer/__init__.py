"""Object explorer - selective traversal and structural diff of nested maps and lists."""

from __future__ import annotations

from object_explorer.api import diff, diff_paths, explore, is_equivalent
from object_explorer.config import ALL_NODES, NODE_ITSELF, ExploreConfig
from object_explorer.exceptions import InvalidInput
from object_explorer.explorer import ObjectExplorer
from object_explorer.result import DiffEntry, diff_entry_report
from object_explorer.sentinel import NoValue

__version__: str = "0.1.0"
__all__: list[str] = [
    "ALL_NODES",
    "NODE_ITSELF",
    "DiffEntry",
    "ExploreConfig",
    "InvalidInput",
    "NoValue",
    "ObjectExplorer",
    "diff",
    "diff_entry_report",
    "diff_paths",
    "explore",
    "is_equivalent",
]

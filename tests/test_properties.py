"""Law-style tests run over a small corpus of trees.

Covers:
- Path fidelity: with preserved indexes, every reported path appears in the
  output at exactly its source position, and nothing else does
- Shape mirroring: every container on the way to a reported value has the
  same kind as in the source
- Compact mode keeps the same values in the same order per list
- Diff of a deep copy is empty, also when the tree holds NoValue gaps
- Diff of the preserved output of explore against its own copy is empty
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any

import pytest

from object_explorer import NoValue, ObjectExplorer
from object_explorer.tree import NodeKind, TreeWalker, dig, node_kind

TREES: list[dict[Any, Any]] = [
    {},
    {"a": 1},
    {"a": [], "b": None, "c": 0},
    {"a": [1, [2, [3, [4]]]], "b": {"c": {"d": {"e": "deep"}}}},
    {"m": [{"x": 1, "y": [None, 2]}, {"x": 3}, [], [[5, 6], {}]], "n": (1, 2)},
    {0: "zero", None: [True, False], ("t",): {"k": [0.5]}},
    {"xs": [NoValue, None], "gap": NoValue, "flags": [True, 1, 0, False]},
]


@dataclass(frozen=True)
class _Marker:
    path: tuple[Any, ...]


def _mark(node: Any, path: tuple[Any, ...], root: Any) -> _Marker:
    return _Marker(path)


def _every_other_leaf(node: Any, path: tuple[Any, ...], parent: Any) -> bool:
    return node_kind(node) is NodeKind.SCALAR and hash(path) % 2 == 0


def _markers(output: dict[Any, Any]) -> list[tuple[tuple[Any, ...], _Marker]]:
    return [
        (visit.path, visit.node)
        for visit in TreeWalker().walk(output)
        if isinstance(visit.node, _Marker)
    ]


@pytest.mark.parametrize("tree", TREES)
class TestLaws:
    def test_path_fidelity(self, tree: dict[Any, Any]) -> None:
        output = ObjectExplorer(tree).explore(
            select=_every_other_leaf, report=_mark, preserve_array_indexes=True
        )
        expected = {
            visit.path
            for visit in TreeWalker().walk(tree)
            if visit.path and _every_other_leaf(visit.node, visit.path, visit.parent)
        }
        found = _markers(output)
        assert {marker.path for _, marker in found} == expected
        for position, marker in found:
            assert position == marker.path

    def test_shape_mirroring(self, tree: dict[Any, Any]) -> None:
        output = ObjectExplorer(tree).explore(
            select=_every_other_leaf, report=_mark, preserve_array_indexes=True
        )
        for position, _ in _markers(output):
            for depth in range(1, len(position)):
                prefix = position[:depth]
                assert node_kind(dig(output, prefix)) is node_kind(dig(tree, prefix))

    def test_only_novalue_fills_gaps(self, tree: dict[Any, Any]) -> None:
        output = ObjectExplorer(tree).explore(
            select=_every_other_leaf, report=_mark, preserve_array_indexes=True
        )
        for visit in TreeWalker().walk(output):
            kind = node_kind(visit.node)
            if kind is NodeKind.SCALAR and visit.path:
                assert isinstance(visit.node, _Marker) or visit.node is NoValue

    def test_compact_mode_keeps_marker_order(self, tree: dict[Any, Any]) -> None:
        explorer = ObjectExplorer(tree)
        compact = explorer.explore(select=_every_other_leaf, report=_mark)
        preserved = explorer.explore(
            select=_every_other_leaf, report=_mark, preserve_array_indexes=True
        )
        assert [m for _, m in _markers(compact)] == [m for _, m in _markers(preserved)]

    def test_identity(self, tree: dict[Any, Any]) -> None:
        assert ObjectExplorer(tree).explore() == tree

    def test_diff_of_deep_copy_is_empty(self, tree: dict[Any, Any]) -> None:
        assert ObjectExplorer(tree).diff(copy.deepcopy(tree)) == {}

    def test_preserved_output_diffs_clean(self, tree: dict[Any, Any]) -> None:
        output = ObjectExplorer(tree).explore(
            select=_every_other_leaf, preserve_array_indexes=True
        )
        assert ObjectExplorer(output).diff(copy.deepcopy(output)) == {}

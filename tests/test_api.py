"""Unit tests for the public API functions: explore, diff, diff_paths, is_equivalent."""

from __future__ import annotations

from typing import Any

import pytest

from object_explorer import (
    InvalidInput,
    NoValue,
    ObjectExplorer,
    diff,
    diff_paths,
    explore,
    is_equivalent,
)


class TestExplore:
    """Tests for the explore() function."""

    def test_default_rebuilds_tree(self) -> None:
        tree = {"a": [1, {"b": None}], "c": "x"}
        assert explore(tree) == tree

    def test_matches_explorer_method(self) -> None:
        tree = {"a": [1, None, 3]}

        def nones(node: Any, path: Any, parent: Any) -> bool:
            return node is None

        assert explore(tree, select=nones, preserve_array_indexes=True) == (
            ObjectExplorer(tree).explore(select=nones, preserve_array_indexes=True)
        )
        assert explore(tree, select=nones, preserve_array_indexes=True) == {
            "a": [NoValue, None]
        }

    def test_report_passthrough(self) -> None:
        assert explore({"a": 1}, report=lambda node, path, root: path) == {
            "a": ("a",)
        }

    def test_rejects_non_mapping(self) -> None:
        with pytest.raises(InvalidInput):
            explore([1, 2])  # type: ignore[arg-type]

    def test_no_state_between_calls(self) -> None:
        tree = {"a": [1, 2]}
        assert explore(tree) == explore(tree)
        assert explore(tree) is not explore(tree)


class TestDiff:
    """Tests for the diff() function."""

    def test_equal_trees(self) -> None:
        assert diff({"a": [1]}, {"a": [1]}) == {}

    def test_spec_example(self) -> None:
        assert diff({"x": 1, "y": [1, 2]}, {"x": 1, "y": [9, 2]}) == {"y": [1, 2]}

    def test_report_passthrough(self) -> None:
        result = diff({"a": 1}, {"a": 2}, report=lambda node, path, root: "changed")
        assert result == {"a": "changed"}


class TestDiffPaths:
    """Tests for the diff_paths() function."""

    def test_no_differences(self) -> None:
        assert diff_paths({"a": 1}, {"a": 1}) == []

    def test_post_order_pointers(self) -> None:
        assert diff_paths({"x": 1, "y": [1, 2]}, {"x": 1, "y": [9, 2]}) == [
            "/y/0",
            "/y",
        ]

    def test_missing_subtree_lists_every_node(self) -> None:
        assert diff_paths({"a": {"b": 1}}, {}) == ["/a/b", "/a"]

    def test_escaped_keys(self) -> None:
        assert diff_paths({"a/b": 1}, {"a/b": 2}) == ["/a~1b"]


class TestIsEquivalent:
    """Tests for the is_equivalent() function."""

    def test_equal_trees(self) -> None:
        assert is_equivalent({"a": [1, {"b": None}]}, {"a": [1, {"b": None}]}) is True

    def test_changed_value(self) -> None:
        assert is_equivalent({"a": 1}, {"a": 2}) is False

    def test_extra_key_on_either_side(self) -> None:
        assert is_equivalent({"a": 1}, {"a": 1, "b": 2}) is False
        assert is_equivalent({"a": 1, "b": 2}, {"a": 1}) is False

    def test_none_is_not_missing(self) -> None:
        assert is_equivalent({"a": None}, {}) is False

    def test_non_mapping_other(self) -> None:
        assert is_equivalent({}, []) is False

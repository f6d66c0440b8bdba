"""pytest plugin for object-explorer.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from object_explorer.api import diff_paths, is_equivalent


@pytest.fixture(scope="session")
def assert_trees_equal() -> Any:
    """Fixture that returns a callable tree equality asserter.

    The fixture is session-scoped because the returned callable is stateless
    (each call builds fresh ObjectExplorer instances).

    Usage in tests::

        def test_roundtrip(assert_trees_equal):
            assert_trees_equal(load(dump(doc)), doc)

        def test_changed(assert_trees_equal):
            with pytest.raises(AssertionError, match=r"/user/name"):
                assert_trees_equal({"user": {"name": "a"}}, {"user": {"name": "b"}})

    Returns:
        A callable ``_assert(actual, expected) -> None`` that raises
        ``AssertionError`` when the two maps differ at any path.
    """

    def _assert(actual: Any, expected: Any) -> None:
        """Assert that two maps hold equal values at every path.

        Args:
            actual:   The value produced by the code under test.
            expected: The expected/reference value.

        Raises:
            AssertionError: When the trees differ or either side is not a map,
                with a message listing the differing JSON Pointers on each
                side and both values.
        """
        if isinstance(actual, Mapping) and is_equivalent(actual, expected):
            return

        changed = diff_paths(actual, expected) if isinstance(actual, Mapping) else []
        missing_or_changed = (
            diff_paths(expected, actual) if isinstance(expected, Mapping) else []
        )
        raise AssertionError(
            f"trees differ:\n"
            f"  differing in actual:   {changed}\n"
            f"  differing in expected: {missing_or_changed}\n"
            f"  actual:   {actual}\n"
            f"  expected: {expected}"
        )

    return _assert

"""Integrations subpackage for object-explorer.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via pytest11 entry point), providing the
  ``assert_trees_equal`` fixture
"""

from __future__ import annotations

__all__: list[str] = []

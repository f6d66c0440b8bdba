"""Exceptions raised by object-explorer."""

from __future__ import annotations

__all__ = ["InvalidInput"]


class InvalidInput(TypeError):  # noqa: N818
    """Raised when an ObjectExplorer is constructed around a non-mapping root.

    Subclasses ``TypeError`` so callers that already guard against wrong
    argument types keep working.
    """

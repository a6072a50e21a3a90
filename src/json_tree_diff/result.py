"""DiffResult dataclass for rich diff output.

This module provides the result type returned by compare() calls.
"""

from __future__ import annotations

from dataclasses import dataclass

from json_tree_diff.tree.nodes import DiffNode, DiffStatus

__all__ = ["DiffResult"]


@dataclass(frozen=True, slots=True)
class DiffResult:
    """Rich result of a compare() call.

    Attributes:
        nodes: The diff tree, as returned by ``diff()``.
        status_counts: Number of nodes per status across the whole tree
            (composite nodes included).  Every status is present as a key.
        changed_paths: JSON Pointer paths of the nodes that carry a change
            themselves: ADDED/REMOVED nodes (not their projected descendants)
            and MODIFIED leaves, in tree order.  A top-level scalar comparison
            reports its root key, e.g. "/(root)".
        computation_time_ms: Wall-clock duration of the diff in milliseconds.
    """

    nodes: tuple[DiffNode, ...]
    status_counts: dict[DiffStatus, int]
    changed_paths: list[str]
    computation_time_ms: float

    @property
    def has_changes(self) -> bool:
        """True when any node is ADDED, REMOVED or MODIFIED."""
        return bool(self.changed_paths)

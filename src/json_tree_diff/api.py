"""Public API functions for json-tree-diff.

This module provides the three user-facing functions: diff, compare and
has_changes.  Each call creates a fresh TreeDiffer (or TreeDiffComparator) to
guarantee zero global state mutation between calls.
"""

from __future__ import annotations

from typing import Any

from json_tree_diff.algorithm.config import DiffConfig
from json_tree_diff.algorithm.differ import TreeDiffer
from json_tree_diff.comparator import TreeDiffComparator
from json_tree_diff.result import DiffResult
from json_tree_diff.tree.nodes import DiffNode

__all__ = ["compare", "diff", "has_changes"]


def diff(
    left: Any,
    right: Any,
    config: DiffConfig | None = None,
) -> list[DiffNode]:
    """Return the structural diff tree of two JSON values.

    Strings are decoded as JSON when possible.  When only one side is given
    (the other is ``None`` or ``MISSING``) a composite document is presented
    with every node UNCHANGED: a diff against nothing is not an edit.

    Args:
        left:   Original JSON value (dict, list, str, int, float, bool, None),
                a JSON-encoded string, or ``MISSING``.
        right:  Current JSON value, in the same forms.
        config: Algorithm settings.  Defaults to ``DiffConfig()`` when None.

    Returns:
        The ordered list of top-level ``DiffNode`` objects.

    Raises:
        DepthExceededError: If a document nests deeper than
            ``config.max_depth``.
    """
    return TreeDiffer(config=config).diff(left, right)


def compare(
    left: Any,
    right: Any,
    config: DiffConfig | None = None,
) -> DiffResult:
    """Diff two JSON values and return a rich DiffResult.

    Creates a fresh ``TreeDiffComparator`` per call.

    Args:
        left:   Original JSON value.
        right:  Current JSON value.
        config: Algorithm settings.  Defaults to ``DiffConfig()`` when None.

    Returns:
        A ``DiffResult`` with nodes, status_counts, changed_paths and
        computation_time_ms populated.
    """
    return TreeDiffComparator(config=config).compare(left, right)


def has_changes(
    left: Any,
    right: Any,
    config: DiffConfig | None = None,
) -> bool:
    """Return True if the diff of the two values contains any change.

    Args:
        left:   Original JSON value.
        right:  Current JSON value.
        config: Algorithm settings.  Defaults to ``DiffConfig()`` when None.

    Returns:
        True if ``compare(left, right, config).has_changes``.
    """
    return compare(left, right, config=config).has_changes

"""Plain-text rendering of a diff tree.

One line per node, indented two spaces per level and prefixed with a status
marker::

    ~ user:
        name: "Ada"
    ~   age: 36 -> 37
    +   email: "ada@example.com"
    - legacy_id: 7
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from json_tree_diff.tree.expansion import ExpansionState, NodePath
from json_tree_diff.tree.nodes import DiffNode, DiffStatus

__all__ = ["STATUS_MARKERS", "format_tree"]

STATUS_MARKERS: dict[DiffStatus, str] = {
    DiffStatus.ADDED: "+",
    DiffStatus.REMOVED: "-",
    DiffStatus.MODIFIED: "~",
    DiffStatus.UNCHANGED: " ",
}


def _format_value(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, default=repr)


def format_tree(
    nodes: Sequence[DiffNode],
    expansion: ExpansionState | None = None,
    *,
    only_changes: bool = False,
) -> str:
    """Render ``nodes`` as indented text.

    Args:
        nodes:        The diff tree.
        expansion:    Optional expand/collapse state.  Collapsed composite
                      nodes are rendered with a trailing ``...`` and their
                      children are skipped.  Without it every node is shown.
        only_changes: Skip UNCHANGED nodes (and therefore their subtrees).

    Returns:
        The rendered lines joined by newlines; empty for an empty tree.
    """
    lines: list[str] = []
    _render(nodes, (), 0, expansion, only_changes, lines)
    return "\n".join(lines)


def _render(
    nodes: Sequence[DiffNode],
    prefix: NodePath,
    depth: int,
    expansion: ExpansionState | None,
    only_changes: bool,
    lines: list[str],
) -> None:
    indent = "  " * depth
    for node in nodes:
        if only_changes and node.status == DiffStatus.UNCHANGED:
            continue
        path = (*prefix, node.key)
        marker = STATUS_MARKERS[node.status]

        if node.children is None:
            if node.has_previous_value:
                text = (
                    f"{_format_value(node.previous_value)} -> "
                    f"{_format_value(node.value)}"
                )
            else:
                text = _format_value(node.value)
            lines.append(f"{marker} {indent}{node.key}: {text}")
            continue

        collapsed = expansion is not None and not expansion.is_expanded(path)
        lines.append(f"{marker} {indent}{node.key}:{' ...' if collapsed else ''}")
        if not collapsed:
            _render(node.children, path, depth + 1, expansion, only_changes, lines)

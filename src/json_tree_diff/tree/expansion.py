"""ExpansionState: expand/collapse state for a diff tree, kept beside it.

Diff nodes are immutable, so a UI that lets users fold and unfold subtrees
records that state here, keyed by node path (the keys from the root down to
the node).  The initial state of every node is its ``expanded`` hint.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from json_tree_diff.tree.nodes import DiffNode

__all__ = ["ExpansionState", "NodePath", "iter_nodes"]

NodePath = tuple[str, ...]


def iter_nodes(
    nodes: Sequence[DiffNode], prefix: NodePath = ()
) -> Iterator[tuple[NodePath, DiffNode]]:
    """Yield ``(path, node)`` for every node, depth-first in tree order."""
    for node in nodes:
        path = (*prefix, node.key)
        yield path, node
        if node.children:
            yield from iter_nodes(node.children, path)


class ExpansionState:
    """Mutable expand/collapse flags for the nodes of one diff tree.

    Example::

        state = ExpansionState(nodes)
        state.toggle(("user", "address"))
        state.is_expanded(("user", "address"))

    Args:
        nodes: The diff tree whose nodes are tracked.  Every node is seeded
            from its ``expanded`` hint.
    """

    def __init__(self, nodes: Sequence[DiffNode]) -> None:
        self._expanded: dict[NodePath, bool] = {
            path: node.expanded for path, node in iter_nodes(nodes)
        }

    def __contains__(self, path: object) -> bool:
        return path in self._expanded

    def __len__(self) -> int:
        return len(self._expanded)

    def is_expanded(self, path: Iterable[str]) -> bool:
        """Return the current flag for ``path``.

        Raises:
            KeyError: If no node lives at ``path``.
        """
        return self._expanded[tuple(path)]

    def set_expanded(self, path: Iterable[str], expanded: bool) -> None:
        """Set the flag for ``path``.

        Raises:
            KeyError: If no node lives at ``path``.
        """
        key = tuple(path)
        if key not in self._expanded:
            raise KeyError(key)
        self._expanded[key] = expanded

    def toggle(self, path: Iterable[str]) -> bool:
        """Flip the flag for ``path`` and return the new value."""
        key = tuple(path)
        expanded = not self.is_expanded(key)
        self._expanded[key] = expanded
        return expanded

    def expand_all(self) -> None:
        for path in self._expanded:
            self._expanded[path] = True

    def collapse_all(self) -> None:
        for path in self._expanded:
            self._expanded[path] = False

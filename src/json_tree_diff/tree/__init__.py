"""Tree subpackage for the diff result tree and its presentation helpers.

Re-exports the public API for the tree module:
- DiffNode: immutable dataclass representing a node in the diff tree
- DiffStatus: StrEnum of the four node statuses
- MISSING: sentinel for an absent value (distinct from JSON null)
- ExpansionState: expand/collapse side-map keyed by node path
- format_tree: plain-text rendering of a diff tree
- normalize_input: best-effort decoding of JSON-encoded string inputs
"""

from json_tree_diff.tree.expansion import ExpansionState, NodePath, iter_nodes
from json_tree_diff.tree.nodes import MISSING, DiffNode, DiffStatus, Missing
from json_tree_diff.tree.normalizer import normalize_input
from json_tree_diff.tree.render import format_tree

__all__ = [
    "MISSING",
    "DiffNode",
    "DiffStatus",
    "ExpansionState",
    "Missing",
    "NodePath",
    "format_tree",
    "iter_nodes",
    "normalize_input",
]

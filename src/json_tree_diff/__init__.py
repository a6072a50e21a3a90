"""JSON tree diff - structural differences between JSON documents."""

from __future__ import annotations

from json_tree_diff.algorithm.config import DiffConfig
from json_tree_diff.algorithm.differ import TreeDiffer
from json_tree_diff.api import compare, diff, has_changes
from json_tree_diff.comparator import TreeDiffComparator
from json_tree_diff.errors import (
    DepthExceededError,
    DocumentLoadError,
    JsonTreeDiffError,
)
from json_tree_diff.loader import document_label, load_document
from json_tree_diff.result import DiffResult
from json_tree_diff.tree.expansion import ExpansionState
from json_tree_diff.tree.nodes import MISSING, DiffNode, DiffStatus
from json_tree_diff.tree.render import format_tree

__version__: str = "0.1.0"
__all__: list[str] = [
    "MISSING",
    "DepthExceededError",
    "DiffConfig",
    "DiffNode",
    "DiffResult",
    "DiffStatus",
    "DocumentLoadError",
    "ExpansionState",
    "JsonTreeDiffError",
    "TreeDiffComparator",
    "TreeDiffer",
    "compare",
    "diff",
    "document_label",
    "format_tree",
    "has_changes",
    "load_document",
]

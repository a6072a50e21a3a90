"""algorithm subpackage: public API for the tree diff algorithm.

Provides the recursive differ, its configuration, value classification and
key ordering.  Import from this module (not from sub-modules directly) to
stay on the stable public interface.

Example::

    from json_tree_diff.algorithm import DiffConfig, TreeDiffer

    differ = TreeDiffer(DiffConfig(max_depth=64))
    nodes = differ.diff({"a": {"b": 1}}, {"a": {"b": 2}})
    # nodes[0].status == "modified"
"""

from __future__ import annotations

from json_tree_diff.algorithm.classify import (
    is_composite,
    is_present,
    members,
    strict_equal,
)
from json_tree_diff.algorithm.config import ROOT_KEY, DiffConfig
from json_tree_diff.algorithm.differ import TreeDiffer
from json_tree_diff.algorithm.ordering import KeyOrder, numeric_value

__all__ = [
    "ROOT_KEY",
    "DiffConfig",
    "KeyOrder",
    "TreeDiffer",
    "is_composite",
    "is_present",
    "members",
    "numeric_value",
    "strict_equal",
]

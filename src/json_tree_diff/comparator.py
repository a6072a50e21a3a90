"""TreeDiffComparator: orchestrator that wires TreeDiffer into a DiffResult.

compare() starts a wall-clock timer, delegates the diff to
``TreeDiffer.diff()``, then walks the finished tree once to collect per-status
counts and the JSON Pointer paths of every change.
"""

from __future__ import annotations

import logging
import time
from collections import Counter
from typing import Any

from json_tree_diff.algorithm.config import DiffConfig
from json_tree_diff.algorithm.differ import TreeDiffer
from json_tree_diff.result import DiffResult
from json_tree_diff.tree.expansion import iter_nodes
from json_tree_diff.tree.nodes import DiffNode, DiffStatus

__all__ = ["TreeDiffComparator", "json_pointer"]

logger = logging.getLogger(__name__)


def json_pointer(path: tuple[str, ...]) -> str:
    """Return the RFC 6901 JSON Pointer for a node path ("" is the root)."""
    return "".join(
        "/" + key.replace("~", "~0").replace("/", "~1") for key in path
    )


class TreeDiffComparator:
    """Orchestrator for structural JSON diffs.

    Wraps a ``TreeDiffer`` and turns its node list into a ``DiffResult`` with
    counts, changed paths and timing.  The differ's key-order cache is reused
    across ``compare()`` calls on the same instance.

    Example::

        from json_tree_diff.comparator import TreeDiffComparator

        cmp = TreeDiffComparator()
        result = cmp.compare({"a": 1, "b": 2}, {"a": 1, "b": 3, "c": 4})
        print(result.changed_paths)   # ["/b", "/c"]
    """

    def __init__(self, config: DiffConfig | None = None) -> None:
        self._config: DiffConfig = config if config is not None else DiffConfig()
        self._differ = TreeDiffer(config=self._config)

    @property
    def config(self) -> DiffConfig:
        return self._config

    def compare(self, left: Any, right: Any) -> DiffResult:
        """Diff two JSON values and return a rich DiffResult.

        Args:
            left:  Original JSON value, JSON string, or ``MISSING``.
            right: Current JSON value, JSON string, or ``MISSING``.

        Returns:
            A ``DiffResult`` with all four fields populated.

        Raises:
            DepthExceededError: If a document nests deeper than
                ``config.max_depth``.
        """
        t0 = time.perf_counter()
        nodes = self._differ.diff(left, right)
        status_counts, changed_paths = self._summarize(nodes)
        elapsed_ms = (time.perf_counter() - t0) * 1000.0

        logger.debug(
            "diff produced %d top-level nodes, %d changes in %.3f ms",
            len(nodes),
            len(changed_paths),
            elapsed_ms,
        )
        return DiffResult(
            nodes=tuple(nodes),
            status_counts=status_counts,
            changed_paths=changed_paths,
            computation_time_ms=elapsed_ms,
        )

    @staticmethod
    def _summarize(
        nodes: list[DiffNode],
    ) -> tuple[dict[DiffStatus, int], list[str]]:
        counts: Counter[DiffStatus] = Counter()
        changed_paths: list[str] = []
        # descendants of an ADDED/REMOVED node repeat its status; only the
        # topmost one is a change of its own
        one_sided: tuple[str, ...] | None = None

        for path, node in iter_nodes(nodes):
            counts[node.status] += 1
            if one_sided is not None and path[: len(one_sided)] == one_sided:
                continue
            one_sided = None
            if node.status in (DiffStatus.ADDED, DiffStatus.REMOVED):
                one_sided = path
                changed_paths.append(json_pointer(path))
            elif node.status == DiffStatus.MODIFIED and node.is_leaf:
                changed_paths.append(json_pointer(path))

        return {status: counts[status] for status in DiffStatus}, changed_paths

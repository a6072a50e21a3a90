"""TreeDiffer: recursive structural diff of two JSON values.

Architecture:
- ``diff`` is the top-level entry.  It normalizes both inputs once, checks
  presence, and dispatches to ``compare``, ``primitive_diff`` or ``project``.
- ``compare`` reconciles two composite values key by key over the sorted union
  of their keys.  Two-sided composite members recurse; the parent status is
  MODIFIED iff any child is not UNCHANGED.
- ``project`` turns a single composite value into a subtree mirroring its
  shape, every node stamped with one fixed status.  It is used for members
  that exist on one side only, and for a lone top-level document.
- ``primitive_diff`` produces the single root node of a comparison that
  involves at least one scalar.

Nothing here mutates the inputs.  Recursion depth equals container nesting
depth and is bounded by ``DiffConfig.max_depth``.
"""

from __future__ import annotations

from typing import Any

from json_tree_diff.algorithm.classify import (
    is_composite,
    is_present,
    members,
    strict_equal,
)
from json_tree_diff.algorithm.config import DiffConfig
from json_tree_diff.algorithm.ordering import KeyOrder
from json_tree_diff.errors import DepthExceededError
from json_tree_diff.tree.nodes import MISSING, DiffNode, DiffStatus
from json_tree_diff.tree.normalizer import normalize_input

__all__ = ["TreeDiffer"]


class TreeDiffer:
    """Recursive diff algorithm producing a tree of ``DiffNode``.

    Example::

        from json_tree_diff.algorithm.differ import TreeDiffer

        differ = TreeDiffer()
        nodes = differ.diff({"a": 1}, {"a": 1, "b": 2})
        # [DiffNode(key="a", status=UNCHANGED, value=1),
        #  DiffNode(key="b", status=ADDED, value=2, expanded=True)]
    """

    def __init__(self, config: DiffConfig | None = None) -> None:
        """Initialise the differ.

        Args:
            config: Algorithm settings.  Defaults to ``DiffConfig()``.
        """
        self._config = config if config is not None else DiffConfig()
        self._order = KeyOrder(max_size=self._config.key_cache_size)

    @property
    def config(self) -> DiffConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def diff(self, left: Any, right: Any) -> list[DiffNode]:
        """Diff two JSON values (or JSON-encoded strings).

        Presence policy: a side is absent when it is ``None`` or ``MISSING``.
        A lone composite document has nothing to be diffed against and is
        projected as UNCHANGED rather than ADDED/REMOVED.  A lone scalar is an
        UNCHANGED root leaf, except against an explicit JSON null, where the
        root comparison reports ADDED/REMOVED.

        Args:
            left:  Original value.  ``MISSING`` means "no document".
            right: Current value.  ``MISSING`` means "no document".

        Returns:
            Ordered diff nodes; empty when neither side is present.

        Raises:
            DepthExceededError: If either document nests deeper than
                ``config.max_depth``.
        """
        parse = self._config.parse_json_strings
        left = normalize_input(left, parse_strings=parse)
        right = normalize_input(right, parse_strings=parse)

        left_present = is_present(left)
        right_present = is_present(right)

        if left_present and right_present:
            if is_composite(left) and is_composite(right):
                return self.compare(left, right)
            return self.primitive_diff(left, right)

        if left_present or right_present:
            value, other = (left, right) if left_present else (right, left)
            if is_composite(value):
                return self.project(value, DiffStatus.UNCHANGED)
            if other is None:
                return self.primitive_diff(left, right)
            return [
                DiffNode(
                    key=self._config.root_key,
                    status=DiffStatus.UNCHANGED,
                    value=value,
                )
            ]

        return []

    def primitive_diff(self, left: Any, right: Any) -> list[DiffNode]:
        """Return the single root node comparing two values as whole leaves."""
        key = self._config.root_key
        if not is_present(left) and is_present(right):
            return [DiffNode(key=key, status=DiffStatus.ADDED, value=right)]
        if not is_present(right) and is_present(left):
            return [DiffNode(key=key, status=DiffStatus.REMOVED, value=left)]
        if strict_equal(left, right):
            return [DiffNode(key=key, status=DiffStatus.UNCHANGED, value=left)]
        return [
            DiffNode(
                key=key,
                status=DiffStatus.MODIFIED,
                value=right,
                previous_value=left,
            )
        ]

    def compare(self, left: Any, right: Any) -> list[DiffNode]:
        """Reconcile two composite values into child diff nodes.

        ``None`` or ``MISSING`` on either side behaves as an empty key set.
        Output follows the ``KeyOrder`` of the merged key union.
        """
        return self._compare(left, right, ())

    def project(self, value: Any, status: DiffStatus) -> list[DiffNode]:
        """Mirror a composite value as a subtree stamped with ``status``.

        Keys keep the value's own order (insertion order for objects, index
        order for arrays).  A scalar value projects to an empty list.
        """
        return self._project(value, status, ())

    # ------------------------------------------------------------------
    # Recursion
    # ------------------------------------------------------------------

    def _check_depth(self, path: tuple[str, ...]) -> None:
        # path has one key per enclosing container, so the container being
        # entered sits at depth len(path) + 1
        max_depth = self._config.max_depth
        if max_depth is not None and len(path) + 1 > max_depth:
            raise DepthExceededError(path, max_depth)

    def _compare(
        self, left: Any, right: Any, path: tuple[str, ...]
    ) -> list[DiffNode]:
        self._check_depth(path)
        left_members = members(left)
        right_members = members(right)
        keys = self._order.sort(left_members.keys() | right_members.keys())

        return [
            self._diff_member(
                key,
                left_members.get(key, MISSING),
                right_members.get(key, MISSING),
                (*path, key),
            )
            for key in keys
        ]

    def _diff_member(
        self, key: str, old: Any, new: Any, path: tuple[str, ...]
    ) -> DiffNode:
        if old is MISSING:
            return self._one_sided(key, new, DiffStatus.ADDED, path)
        if new is MISSING:
            return self._one_sided(key, old, DiffStatus.REMOVED, path)

        if is_composite(old) and is_composite(new):
            children = self._compare(old, new, path)
            changed = any(child.status != DiffStatus.UNCHANGED for child in children)
            return DiffNode(
                key=key,
                status=DiffStatus.MODIFIED if changed else DiffStatus.UNCHANGED,
                children=tuple(children),
                expanded=changed,
            )

        if not strict_equal(old, new):
            return DiffNode(
                key=key, status=DiffStatus.MODIFIED, value=new, previous_value=old
            )
        return DiffNode(key=key, status=DiffStatus.UNCHANGED, value=old)

    def _one_sided(
        self, key: str, value: Any, status: DiffStatus, path: tuple[str, ...]
    ) -> DiffNode:
        children = (
            tuple(self._project(value, status, path)) if is_composite(value) else None
        )
        return DiffNode(
            key=key, status=status, value=value, children=children, expanded=True
        )

    def _project(
        self, value: Any, status: DiffStatus, path: tuple[str, ...]
    ) -> list[DiffNode]:
        if not is_composite(value):
            return []
        self._check_depth(path)
        return [
            self._one_sided(key, item, status, (*path, key))
            for key, item in members(value).items()
        ]

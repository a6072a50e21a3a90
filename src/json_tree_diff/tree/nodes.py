"""DiffNode dataclass and DiffStatus StrEnum for the diff result tree.

A diff is an ordered sequence of ``DiffNode`` objects.  Composite nodes carry
``children``; leaves carry ``value`` (and ``previous_value`` when modified).
``MISSING`` marks an absent value, since ``None`` is a legitimate JSON null.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, StrEnum, auto
from typing import Any, Final

__all__ = ["MISSING", "DiffNode", "DiffStatus", "Missing"]


class Missing(Enum):
    """Type of the ``MISSING`` sentinel (a single-member enum types cleanly)."""

    MISSING = auto()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = Missing.MISSING


class DiffStatus(StrEnum):
    """The four statuses a diff node can carry.

    StrEnum values are the lowercased member names:
    - ADDED     -> "added"     : present only on the right-hand side
    - REMOVED   -> "removed"   : present only on the left-hand side
    - MODIFIED  -> "modified"  : leaf values differ, or a descendant changed
    - UNCHANGED -> "unchanged" : identical on both sides
    """

    ADDED = auto()
    REMOVED = auto()
    MODIFIED = auto()
    UNCHANGED = auto()


@dataclass(frozen=True, slots=True)
class DiffNode:
    """A node in the diff tree.

    Nodes are immutable once built.  Expand/collapse state toggled by a UI is
    kept in ``ExpansionState``, not here; ``expanded`` is only the initial hint.

    Attributes:
        key:            Property name, stringified array index, or the root
                        marker for a top-level scalar comparison.
        status:         One of the four ``DiffStatus`` values.
        value:          Current (right-hand) value, or ``MISSING`` when the
                        node is a two-sided composite summarised by children.
        previous_value: Original (left-hand) value; set only on modified leaves.
        children:       Child nodes for composite values, ``None`` for leaves.
        expanded:       Presentation hint; true for changes and projections.
    """

    key: str
    status: DiffStatus
    value: Any = MISSING
    previous_value: Any = MISSING
    children: tuple[DiffNode, ...] | None = None
    expanded: bool = False

    @property
    def is_leaf(self) -> bool:
        """True when the node has no children tuple (a scalar position)."""
        return self.children is None

    @property
    def has_value(self) -> bool:
        return self.value is not MISSING

    @property
    def has_previous_value(self) -> bool:
        return self.previous_value is not MISSING

    def to_dict(self) -> dict[str, Any]:
        """Return the reference serialization of this node and its subtree.

        Shape: ``{key, status, value?, previousValue?, children?, expanded?}``.
        Absent members are omitted; ``expanded`` appears only when true.
        """
        data: dict[str, Any] = {"key": self.key, "status": str(self.status)}
        if self.value is not MISSING:
            data["value"] = self.value
        if self.previous_value is not MISSING:
            data["previousValue"] = self.previous_value
        if self.children is not None:
            data["children"] = [child.to_dict() for child in self.children]
        if self.expanded:
            data["expanded"] = True
        return data

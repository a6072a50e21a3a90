"""Value classification: composite (keyed) versus scalar JSON values.

Objects and arrays are both composite.  Arrays are addressed by their
stringified indices, so they diff exactly like objects whose keys are
"0", "1", ... (no positional alignment).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from json_tree_diff.tree.nodes import MISSING

__all__ = ["is_composite", "is_present", "members", "strict_equal"]


def is_composite(value: Any) -> bool:
    """Return True for JSON objects (mappings) and arrays (lists, tuples)."""
    return isinstance(value, (Mapping, list, tuple))


def is_present(value: Any) -> bool:
    """Return True unless ``value`` is ``None`` or ``MISSING``.

    Falsy scalars such as ``""``, ``0`` and ``False`` are present.
    """
    return value is not None and value is not MISSING


def members(value: Any) -> dict[str, Any]:
    """Return the own members of a composite value keyed by string.

    Objects keep insertion order and arrays keep index order.  Scalars,
    ``None`` and ``MISSING`` have no members.
    """
    if isinstance(value, Mapping):
        return {str(key): item for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return {str(index): item for index, item in enumerate(value)}
    return {}


def strict_equal(left: Any, right: Any) -> bool:
    """Strict scalar equality.

    - A composite never equals anything but itself.
    - Booleans only equal booleans (``True`` is not ``1``).
    - ``int`` and ``float`` compare numerically (``1 == 1.0``).
    - Everything else needs the same type and an equal value.
    """
    if is_composite(left) or is_composite(right):
        return left is right
    # bool subclasses int, so it is checked first
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    if isinstance(left, (int, float)) and isinstance(right, (int, float)):
        return left == right
    return type(left) is type(right) and left == right

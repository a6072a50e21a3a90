"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents. No random values.
Three tiers: 10-key flat, 100-key nested, 1000-key deeply nested.
Each tier provides both an "identical" and a "changed" pair.
"""

from __future__ import annotations

from typing import Any

import pytest


def generate_flat_object(num_keys: int, prefix: str = "key") -> dict[str, Any]:
    """Generate a flat dict with deterministic string values."""
    return {f"{prefix}_{i}": f"value_{i}" for i in range(num_keys)}


def _make_nested(sections: int, leaves: int) -> dict[str, Any]:
    """Generate ``sections`` objects of ``leaves`` keys, each with an array."""
    return {
        f"section_{i}": {
            **{f"field_{i}_{j}": j for j in range(leaves)},
            "items": [{"id": j, "tags": [f"t{j}"]} for j in range(3)],
        }
        for i in range(sections)
    }


def _change_every_third(document: dict[str, Any]) -> dict[str, Any]:
    """Copy ``document`` modifying, dropping or adding every third leaf key."""
    changed: dict[str, Any] = {}
    for n, (key, value) in enumerate(document.items()):
        if isinstance(value, dict):
            changed[key] = _change_every_third(value)
        elif n % 3 == 0:
            changed[key] = f"{value}_changed"
        elif n % 3 == 1:
            changed[f"{key}_renamed"] = value
        else:
            changed[key] = value
    return changed


def _deep(levels: int, width: int) -> dict[str, Any]:
    if levels == 0:
        return {f"leaf_{i}": i for i in range(width)}
    return {f"node_{i}": _deep(levels - 1, width) for i in range(width)}


@pytest.fixture
def pair_10key_identical() -> tuple[dict[str, Any], dict[str, Any]]:
    return generate_flat_object(10), generate_flat_object(10)


@pytest.fixture
def pair_10key_changed() -> tuple[dict[str, Any], dict[str, Any]]:
    left = generate_flat_object(10)
    return left, _change_every_third(left)


@pytest.fixture
def pair_100key_identical() -> tuple[dict[str, Any], dict[str, Any]]:
    return _make_nested(10, 9), _make_nested(10, 9)


@pytest.fixture
def pair_100key_changed() -> tuple[dict[str, Any], dict[str, Any]]:
    left = _make_nested(10, 9)
    return left, _change_every_third(left)


@pytest.fixture
def pair_1000key_identical() -> tuple[dict[str, Any], dict[str, Any]]:
    # 5 x 5 x 5 inner objects of 8 leaves each
    return _deep(3, 5) | {"extra": _deep(1, 8)}, _deep(3, 5) | {"extra": _deep(1, 8)}


@pytest.fixture
def pair_1000key_changed() -> tuple[dict[str, Any], dict[str, Any]]:
    left = _deep(3, 5) | {"extra": _deep(1, 8)}
    return left, _change_every_third(left)

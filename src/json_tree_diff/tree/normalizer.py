"""Input normalization: decode JSON-encoded strings at the diff boundary.

A string input may be either a scalar or a serialized document.  It is parsed
best-effort; anything that is not strict JSON stays a plain string scalar.
Python's ``json`` module accepts ``NaN`` and ``Infinity`` literals by default,
so they are rejected explicitly to match a strict parser.
"""

from __future__ import annotations

import json
import logging
from typing import Any

__all__ = ["normalize_input"]

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name!r}")


def normalize_input(value: Any, *, parse_strings: bool = True) -> Any:
    """Return ``value`` with a JSON-encoded string decoded.

    Args:
        value:         Any input.  Only ``str`` values are touched.
        parse_strings: When False the value is returned untouched.

    Returns:
        The decoded document for a valid JSON string, otherwise ``value``
        itself.  Never raises.
    """
    if not parse_strings or not isinstance(value, str):
        return value
    try:
        return json.loads(value, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        # json.JSONDecodeError subclasses ValueError
        logger.debug("treating unparseable string input as a scalar: %s", exc)
        return value

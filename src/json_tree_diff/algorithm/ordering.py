"""KeyOrder: deterministic natural ordering for merged key sets.

Keys that parse fully as numbers come first, in ascending numeric order, so
array indices sort as 0, 1, 2, ..., 10 rather than 0, 1, 10, 2.  All other keys
follow in a locale-style collation:

1. accent- and case-insensitive comparison ("apple" < "Banana" < "cherry"),
   with whitespace, punctuation, symbols and digits ahead of letters
   ("_b" < "~" < "a"),
2. then accents ("e" < "é"),
3. then case, lowercase first ("a" < "A"),
4. then code points, so distinct keys never tie.

Recognised numeric forms (surrounding whitespace ignored, ASCII digits only):
- decimal literals with optional sign, fraction and exponent ("-1", "2.5e3", ".5")
- unsigned ``0x``/``0o``/``0b`` integer literals ("0x1F")
- "Infinity" with an optional sign
"""

from __future__ import annotations

import math
import re
import unicodedata
from collections.abc import Iterable

from cachetools import LRUCache

__all__ = ["KeyOrder", "numeric_value"]

# Decimal literal: sign, integer and/or fraction digits, optional exponent
_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)

# Prefixed integer literal, e.g. "0x1f" -> ("x", "1f")
_RADIX = re.compile(r"0([xXoObB])([0-9a-zA-Z]+)")

_RADIX_BASES = {"x": 16, "o": 8, "b": 2}

_INFINITY = re.compile(r"([+-]?)Infinity")

CollationKey = tuple[tuple[tuple[int, str], ...], str, str, str]

SortKey = tuple[int, float, CollationKey]


def numeric_value(key: str) -> float | None:
    """Return the numeric value of ``key`` or None when it is not a number.

    Blank keys are not numbers.
    """
    text = key.strip()
    if not text:
        return None
    if _DECIMAL.fullmatch(text):
        # overflowing literals such as "1e999" become +/- infinity
        return float(text)
    radix = _RADIX.fullmatch(text)
    if radix:
        try:
            return float(int(radix.group(2), _RADIX_BASES[radix.group(1).lower()]))
        except (ValueError, OverflowError):
            return None
    infinity = _INFINITY.fullmatch(text)
    if infinity:
        return -math.inf if infinity.group(1) == "-" else math.inf
    return None


def _char_group(ch: str) -> int:
    category = unicodedata.category(ch)
    if ch.isspace() or category[0] == "Z":
        return 0
    if category[0] == "P":
        return 1
    if category[0] == "S":
        return 2
    if category[0] == "N":
        return 3
    return 4


def _collation_key(key: str) -> CollationKey:
    decomposed = unicodedata.normalize("NFD", key)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    primary = tuple((_char_group(ch), ch) for ch in base.casefold())
    # swapcase puts lowercase letters ahead of uppercase on the case level
    return (primary, decomposed.casefold(), decomposed.swapcase(), key)


class KeyOrder:
    """Sorts object keys and array indices into a stable natural order.

    Sort keys are memoised per instance in an ``LRUCache``: documents repeat
    the same property names across many objects (every element of an array
    of records), so each distinct key is classified and collated once.

    Example::

        order = KeyOrder()
        order.sort(["b", "10", "a", "2"])   # ["2", "10", "a", "b"]

    Args:
        max_size: Maximum number of memoised sort keys.  Least recently
            used entries are evicted silently.
    """

    def __init__(self, max_size: int = 1024) -> None:
        self._cache: LRUCache[str, SortKey] = LRUCache(maxsize=max_size)

    @property
    def max_size(self) -> int:
        """The maximum number of sort keys this instance memoises."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The number of sort keys currently memoised."""
        return int(self._cache.currsize)

    def sort_key(self, key: str) -> SortKey:
        """Return the tuple used to order ``key``.

        Numeric keys map to ``(0, value, collation)`` and all other keys to
        ``(1, 0.0, collation)``, so numbers always precede names.
        """
        cached = self._cache.get(key)
        if cached is not None:
            return cached
        number = numeric_value(key)
        if number is None:
            sort_key: SortKey = (1, 0.0, _collation_key(key))
        else:
            sort_key = (0, number, _collation_key(key))
        self._cache[key] = sort_key
        return sort_key

    def sort(self, keys: Iterable[str]) -> list[str]:
        """Return ``keys`` in natural order, independent of input order."""
        return sorted(keys, key=self.sort_key)

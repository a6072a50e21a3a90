"""DiffConfig: immutable configuration for the tree diff algorithm."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["DEFAULT_MAX_DEPTH", "ROOT_KEY", "DiffConfig"]

ROOT_KEY = "(root)"
DEFAULT_MAX_DEPTH = 256


@dataclass(frozen=True, slots=True)
class DiffConfig:
    """Immutable configuration for ``TreeDiffer``.

    Attributes:
        max_depth: Maximum container nesting depth.  A top-level object or
            array is depth 1.  ``None`` removes the limit (cyclic inputs then
            recurse until ``RecursionError``).
        parse_json_strings: When True, string inputs are decoded as JSON
            before diffing; undecodable strings stay scalars.
        root_key: Key used for the single node of a top-level scalar comparison.
        key_cache_size: Number of key sort keys memoised by ``KeyOrder``.
    """

    max_depth: int | None = DEFAULT_MAX_DEPTH
    parse_json_strings: bool = True
    root_key: str = ROOT_KEY
    key_cache_size: int = 1024

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 1:
            msg = f"max_depth must be >= 1 or None, got {self.max_depth}"
            raise ValueError(msg)
        if not self.root_key:
            msg = "root_key must be a non-empty string"
            raise ValueError(msg)
        if self.key_cache_size < 1:
            msg = f"key_cache_size must be >= 1, got {self.key_cache_size}"
            raise ValueError(msg)

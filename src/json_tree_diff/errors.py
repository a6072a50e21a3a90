"""Exception hierarchy for json-tree-diff.

Every error raised on purpose by the library derives from
``JsonTreeDiffError`` so callers can catch the whole family at once.
Configuration mistakes are plain ``ValueError`` (see ``DiffConfig``).
"""

from __future__ import annotations

from pathlib import Path

__all__ = ["DepthExceededError", "DocumentLoadError", "JsonTreeDiffError"]


class JsonTreeDiffError(Exception):
    """Base class for all json-tree-diff errors."""


class DepthExceededError(JsonTreeDiffError):
    """Raised when a document nests deeper than ``DiffConfig.max_depth``.

    Also the failure mode for self-referential (cyclic) inputs, which would
    otherwise recurse until the interpreter gives up.

    Attributes:
        path:      Keys from the root down to the container that broke the limit.
        max_depth: The configured nesting limit.
    """

    def __init__(self, path: tuple[str, ...], max_depth: int) -> None:
        self.path = path
        self.max_depth = max_depth
        pointer = "".join(f"/{key}" for key in path) or "/"
        super().__init__(f"nesting depth exceeds max_depth={max_depth} at {pointer!r}")


class DocumentLoadError(JsonTreeDiffError):
    """Raised by ``load_document`` when a file cannot be read or parsed.

    The original ``OSError`` or ``json.JSONDecodeError`` is chained as
    ``__cause__``.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"cannot load JSON document {str(path)!r}: {reason}")

"""Document loading helpers for callers that diff JSON files.

``load_document`` reads and decodes a UTF-8 JSON file; ``document_label``
derives a display label (the file name without its final extension).
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from json_tree_diff.errors import DocumentLoadError

__all__ = ["document_label", "load_document"]

logger = logging.getLogger(__name__)


def load_document(path: str | os.PathLike[str]) -> Any:
    """Read and decode the JSON document stored at ``path``.

    Args:
        path: Location of a UTF-8 encoded JSON file.

    Returns:
        The decoded JSON value.

    Raises:
        DocumentLoadError: If the file cannot be read, is not valid UTF-8, or
            does not contain valid JSON.  The original exception is chained.
    """
    file_path = Path(path)
    try:
        with file_path.open("r", encoding="utf-8") as fh:
            document = json.load(fh)
    except json.JSONDecodeError as exc:
        raise DocumentLoadError(file_path, f"invalid JSON: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise DocumentLoadError(file_path, f"not UTF-8 text: {exc}") from exc
    except OSError as exc:
        raise DocumentLoadError(file_path, exc.strerror or str(exc)) from exc

    logger.debug("loaded JSON document from %s", file_path)
    return document


def document_label(path: str | os.PathLike[str]) -> str:
    """Return the file name of ``path`` without its final extension.

    Dot-files keep their full name (".env" stays ".env").
    """
    name = Path(path).name
    idx = name.rfind(".")
    return name[:idx] if idx > 0 else name

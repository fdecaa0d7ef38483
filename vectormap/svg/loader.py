"""Map resource lookup — logical map name → document text.

A name without the ``.svg`` extension gets it appended. Lookup failures and
undecodable files raise distinct errors.
"""

from __future__ import annotations

import logging
from pathlib import Path

from vectormap.config import settings
from vectormap.errors import MalformedDocumentError, MissingResourceError

logger = logging.getLogger(__name__)


def resolve_map_path(name: str, search_paths: list[str | Path] | None = None) -> Path:
    """First existing file for ``name`` across ``search_paths``."""
    extension = settings.map_extension
    filename = name if extension in name else f"{name}{extension}"
    paths = [Path(p) for p in (search_paths if search_paths is not None else settings.map_search_paths)]

    candidate = Path(filename)
    if candidate.is_absolute():
        if candidate.is_file():
            return candidate
        raise MissingResourceError(name, [str(candidate.parent)])

    for base in paths:
        path = base / filename
        if path.is_file():
            logger.debug("Resolved map %r to %s", name, path)
            return path

    raise MissingResourceError(name, [str(p) for p in paths])


def load_map(name: str, search_paths: list[str | Path] | None = None) -> str:
    """Read a map document as UTF-8 text."""
    path = resolve_map_path(name, search_paths)
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise MalformedDocumentError(f"Map document {path} is not valid UTF-8: {e}") from e

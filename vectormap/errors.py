"""Raised errors and recovered-condition diagnostics."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class MapParseError(ValueError):
    """Base class for errors that stop a map from being produced at all."""


class MissingResourceError(MapParseError):
    """The named map document could not be located."""

    def __init__(self, name: str, searched: list[str] | None = None) -> None:
        self.name = name
        self.searched = searched or []
        where = ", ".join(self.searched) if self.searched else "no search paths"
        super().__init__(f"Map document not found: {name!r} (searched {where})")


class MalformedDocumentError(MapParseError):
    """The document text exists but is not a usable SVG document."""


class DiagnosticKind(str, enum.Enum):
    MALFORMED_COORDINATE = "malformed_coordinate"
    UNPAIRED_COORDINATE = "unpaired_coordinate"
    UNSUPPORTED_COMMAND = "unsupported_command"
    INCOMPLETE_CURVE = "incomplete_curve"
    MISSING_PATH_DATA = "missing_path_data"
    DUPLICATE_ID = "duplicate_id"
    DEGENERATE_BOUNDS = "degenerate_bounds"
    MISSING_CANVAS = "missing_canvas"


@dataclass(frozen=True)
class Diagnostic:
    """A condition the parser recovered from. Never raised."""

    kind: DiagnosticKind
    message: str
    region_id: str | None = None
    # Offending substring, where there is one
    detail: str = ""

    def for_region(self, region_id: str) -> Diagnostic:
        return Diagnostic(self.kind, self.message, region_id, self.detail)

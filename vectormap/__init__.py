"""vectormap — SVG map regions to normalized, canvas-fitted outlines."""

from vectormap.errors import (
    Diagnostic,
    DiagnosticKind,
    MalformedDocumentError,
    MapParseError,
    MissingResourceError,
)
from vectormap.main import configure_logging, parse_map, parse_map_file, parse_path_data
from vectormap.models.geometry import BoundingBox, Point, Size, Transform
from vectormap.models.region import MapDocument, Region

__version__ = "0.1.0"

__all__ = [
    "BoundingBox",
    "Diagnostic",
    "DiagnosticKind",
    "MalformedDocumentError",
    "MapDocument",
    "MapParseError",
    "MissingResourceError",
    "Point",
    "Region",
    "Size",
    "Transform",
    "configure_logging",
    "parse_map",
    "parse_map_file",
    "parse_path_data",
]

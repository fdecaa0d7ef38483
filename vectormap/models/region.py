"""Region and MapDocument — the values handed to the presentation layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator

from svgpathtools import Path

from vectormap.errors import Diagnostic
from vectormap.models.geometry import BoundingBox, Point, Size, Transform
from vectormap.models.map_document import MapDocumentModel
from vectormap.models.path import DrawOp, PathCommand
from vectormap.utils.geometry import point_in_geometry, to_svgpathtools


@dataclass(frozen=True, eq=False)
class Region:
    """One drawable outline of the map (e.g. a province).

    Equality and hashing use ``id`` only, so two regions from the same source
    id compare equal even when their geometry differs.
    """

    id: str
    name: str
    # Raw ``d`` attribute
    path_data: str = ""
    commands: tuple[PathCommand, ...] = ()
    # Source-space operations from the builder
    raw_outline: tuple[DrawOp, ...] = ()
    # Display-space operations (shared transform applied)
    outline: tuple[DrawOp, ...] = ()
    # Source-space bounding box; None when the region has no points
    bounds: BoundingBox | None = None
    transform: Transform | None = None
    # Display-space shapely geometry for hit testing
    polygon: Any = field(default=None, repr=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Region):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def display_bounds(self) -> BoundingBox | None:
        if self.bounds is None:
            return None
        if self.transform is None:
            return self.bounds
        return self.transform.apply_box(self.bounds)

    def to_svgpathtools(self) -> Path:
        return to_svgpathtools(self.outline or self.raw_outline)


@dataclass(frozen=True)
class MapDocument:
    """All regions of one parse plus the document bounds and shared transform."""

    regions: tuple[Region, ...] = ()
    # Union of region bounds, source space
    bounds: BoundingBox | None = None
    transform: Transform = field(default_factory=Transform.identity)
    canvas: Size | None = None
    viewbox: tuple[float, float, float, float] | None = None
    # True when no canvas could be determined and the identity mapping was used
    degraded: bool = False
    diagnostics: tuple[Diagnostic, ...] = ()
    # Stage id → error message for stages that raised
    errors: dict[str, str] = field(default_factory=dict)

    def __iter__(self) -> Iterator[Region]:
        return iter(self.regions)

    def __len__(self) -> int:
        return len(self.regions)

    @property
    def scale(self) -> float:
        return self.transform.scale

    def region(self, region_id: str) -> Region | None:
        for r in self.regions:
            if r.id == region_id:
                return r
        return None

    def region_at(self, x: float, y: float) -> Region | None:
        """Topmost region whose display polygon covers (x, y)."""
        target = Point(x, y)
        for r in reversed(self.regions):
            if point_in_geometry(r.polygon, target):
                return r
        return None

    def diagnostics_for(self, region_id: str) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.region_id == region_id]

    def to_model(self) -> MapDocumentModel:
        return MapDocumentModel.from_document(self)

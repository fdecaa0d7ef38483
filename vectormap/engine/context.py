"""MapContext — the carrier flowing through all stages.

Regions are immutable; a stage that computes something for a region replaces
the region value in ``ctx.regions`` rather than mutating it.
Cross-region results live on the context (document bounds, transform).
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Callable

from vectormap.engine.config import PipelineConfig
from vectormap.errors import Diagnostic
from vectormap.models.geometry import BoundingBox, Size, Transform
from vectormap.models.region import MapDocument, Region
from vectormap.models.svg_document import SvgDocument


@dataclass
class MapContext:
    """Shared state for one parse pass."""

    # Container attributes and elements seen by the document parser
    document: SvgDocument = field(default_factory=SvgDocument)
    # Target canvas: caller-supplied, else the container size
    canvas: Size | None = None
    # Regions in document order
    regions: tuple[Region, ...] = ()
    config: PipelineConfig = field(default_factory=PipelineConfig)

    # --- Cross-region computed state ---
    # Union of all region bounds (source space)
    document_bounds: BoundingBox | None = None
    # The one transform applied to every region
    transform: Transform | None = None
    # Identity mapping used because no canvas was available
    degraded: bool = False

    # --- Pipeline metadata ---
    diagnostics: list[Diagnostic] = field(default_factory=list)
    completed_transforms: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def num_regions(self) -> int:
        return len(self.regions)

    def get_region(self, region_id: str) -> Region | None:
        for r in self.regions:
            if r.id == region_id:
                return r
        return None

    def map_regions(self, fn: Callable[[Region], Region | dict[str, Any]]) -> None:
        """Replace every region with ``fn(region)``.

        ``fn`` may return a new Region or a dict of fields to replace.
        """
        updated: list[Region] = []
        for r in self.regions:
            result = fn(r)
            updated.append(replace(r, **result) if isinstance(result, dict) else result)
        self.regions = tuple(updated)

    def to_document(self) -> MapDocument:
        return MapDocument(
            regions=self.regions,
            bounds=self.document_bounds,
            transform=self.transform or Transform.identity(),
            canvas=self.canvas,
            viewbox=self.document.viewbox,
            degraded=self.degraded,
            diagnostics=tuple(self.diagnostics),
            errors=dict(self.errors),
        )

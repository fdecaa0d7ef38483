"""T1.02 — Document Bounds: union of every region's box."""

from __future__ import annotations

import logging

from vectormap.engine.context import MapContext
from vectormap.engine.registry import Stage, stage
from vectormap.models.geometry import BoundingBox

logger = logging.getLogger(__name__)


@stage(
    id="T1.02",
    layer=Stage.BOUNDS,
    dependencies=["T1.01"],
    description="Union region bounds into the document bounds",
    tags={"always"},
)
def document_bounds(ctx: MapContext) -> None:
    ctx.document_bounds = BoundingBox.union(r.bounds for r in ctx.regions)
    if ctx.document_bounds is None:
        logger.info("No drawable points in %d regions", ctx.num_regions)

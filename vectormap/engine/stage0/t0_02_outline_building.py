"""T0.02 — Outline Building.

Resolve relative coordinates against the running cursor and pair cubic
control points, producing each region's source-space drawing operations.
"""

from __future__ import annotations

from vectormap.engine.context import MapContext
from vectormap.engine.registry import Stage, stage
from vectormap.models.region import Region
from vectormap.svg.builder import build_outline


@stage(
    id="T0.02",
    layer=Stage.PARSING,
    dependencies=["T0.01"],
    description="Build drawing operations from commands",
    tags={"always"},
)
def outline_building(ctx: MapContext) -> None:
    def _build(region: Region) -> dict:
        result = build_outline(region.commands)
        ctx.diagnostics.extend(d.for_region(region.id) for d in result.diagnostics)
        return {"raw_outline": result.operations}

    ctx.map_regions(_build)

"""T1.01 — Region Bounds.

Extrema over every point of the raw outline: move/line endpoints plus curve
terminals and both control points. Control points make curved regions
over-estimate their visual bounds; scale decisions downstream rely on it.
"""

from __future__ import annotations

from vectormap.engine.context import MapContext
from vectormap.engine.registry import Stage, stage
from vectormap.utils.geometry import outline_bounds


@stage(
    id="T1.01",
    layer=Stage.BOUNDS,
    dependencies=["T0.02"],
    description="Compute per-region bounding boxes",
    tags={"always"},
)
def region_bounds(ctx: MapContext) -> None:
    ctx.map_regions(lambda r: {"bounds": outline_bounds(r.raw_outline)})

"""T2.03 — Region Polygons.

Sample each display outline into shapely polygons (one per subpath, unioned)
so callers can hit-test with ``MapDocument.region_at``.
"""

from __future__ import annotations

from vectormap.engine.context import MapContext
from vectormap.engine.registry import Stage, stage
from vectormap.utils.geometry import outline_polygon


@stage(
    id="T2.03",
    layer=Stage.NORMALIZATION,
    dependencies=["T2.02"],
    description="Build display-space polygons for hit testing",
    tags={"polygons"},
)
def region_polygons(ctx: MapContext) -> None:
    samples = ctx.config.samples_per_segment
    ctx.map_regions(lambda r: {"polygon": outline_polygon(r.outline, samples)})

"""T2.02 — Apply Transform.

Map every region's raw outline through the single document transform. The
same Transform instance is attached to every region.
"""

from __future__ import annotations

from vectormap.engine.context import MapContext
from vectormap.engine.registry import Stage, stage
from vectormap.models.geometry import Transform


@stage(
    id="T2.02",
    layer=Stage.NORMALIZATION,
    dependencies=["T2.01"],
    description="Apply the shared transform to every region",
    tags={"always"},
)
def apply_transform(ctx: MapContext) -> None:
    if ctx.transform is None:
        ctx.transform = Transform.identity()
    transform = ctx.transform

    ctx.map_regions(
        lambda r: {
            "outline": tuple(op.transformed(transform) for op in r.raw_outline),
            "transform": transform,
        }
    )

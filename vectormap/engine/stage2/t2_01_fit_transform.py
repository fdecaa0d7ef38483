"""T2.01 — Fit Transform.

One uniform transform for the whole document: translate the document box to
the origin, then scale by min(canvas.w / box.w, canvas.h / box.h) so neither
axis overflows. Zero width or height falls back to unit scale. Without any
canvas (caller or container) the identity mapping is used and the document
is flagged as degraded.
"""

from __future__ import annotations

import logging

from vectormap.engine.context import MapContext
from vectormap.engine.registry import Stage, stage
from vectormap.errors import Diagnostic, DiagnosticKind
from vectormap.models.geometry import BoundingBox, Size, Transform

logger = logging.getLogger(__name__)


def fit_transform(bounds: BoundingBox, canvas: Size) -> Transform:
    """Scale-to-fit transform mapping ``bounds`` onto ``canvas``."""
    if bounds.is_degenerate:
        scale = 1.0
    else:
        scale = min(canvas.width / bounds.width, canvas.height / bounds.height)
    return Transform(scale=scale, translate_x=-bounds.x, translate_y=-bounds.y)


@stage(
    id="T2.01",
    layer=Stage.NORMALIZATION,
    dependencies=["T1.02"],
    description="Derive the shared fit-to-canvas transform",
    tags={"always"},
)
def fit_to_canvas(ctx: MapContext) -> None:
    if ctx.canvas is None:
        container = ctx.document.container_size
        if container is not None:
            ctx.canvas = Size(*container)

    if ctx.canvas is None:
        ctx.transform = Transform.identity()
        ctx.degraded = True
        ctx.diagnostics.append(
            Diagnostic(DiagnosticKind.MISSING_CANVAS, "no canvas size or container size; identity mapping used")
        )
        logger.warning("No canvas size available, using identity transform")
        return

    bounds = ctx.document_bounds
    if bounds is None:
        ctx.transform = Transform.identity()
        return

    if bounds.is_degenerate:
        ctx.diagnostics.append(
            Diagnostic(
                DiagnosticKind.DEGENERATE_BOUNDS,
                "document bounds have zero width or height; unit scale used",
                detail=f"{bounds.width}x{bounds.height}",
            )
        )
        logger.warning("Degenerate document bounds %.3gx%.3g", bounds.width, bounds.height)

    ctx.transform = fit_transform(bounds, ctx.canvas)
    logger.debug("Fit transform: scale=%.4g translate=(%.4g, %.4g)",
                 ctx.transform.scale, ctx.transform.translate_x, ctx.transform.translate_y)

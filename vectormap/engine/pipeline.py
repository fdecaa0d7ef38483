"""Pipeline orchestrator — runs stages in dependency order with config gating."""

from __future__ import annotations

import logging
import time

from vectormap.engine.config import PipelineConfig
from vectormap.engine.context import MapContext
from vectormap.engine.registry import Stage, StageRegistry, StageSpec, get_registry

logger = logging.getLogger(__name__)


class Pipeline:
    """Runs registered stages over a MapContext."""

    def __init__(
        self,
        registry: StageRegistry | None = None,
        config: PipelineConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or PipelineConfig()

    def run(self, ctx: MapContext) -> MapContext:
        """Run every stage not gated off by the config."""
        start = time.perf_counter()
        ctx.config = self.config

        skip_ids = self._gate()
        requested = {s.id for s in self.registry.all()} - skip_ids
        ordered = self.registry.resolve_order(requested)

        logger.debug("Pipeline: %d stages queued (%d skipped)", len(ordered), len(skip_ids))

        for spec in ordered:
            self._run_stage(spec, ctx)

        logger.info(
            "Pipeline complete: %d/%d stages, %d regions, %d diagnostics in %.1fms",
            len(ctx.completed_transforms),
            len(ordered),
            ctx.num_regions,
            len(ctx.diagnostics),
            (time.perf_counter() - start) * 1000,
        )
        return ctx

    def run_layer(self, ctx: MapContext, layer: Stage) -> MapContext:
        """Run only the stages of one layer, in id order."""
        ctx.config = self.config
        for spec in self.registry.get_layer(layer):
            self._run_stage(spec, ctx)
        return ctx

    def _run_stage(self, spec: StageSpec, ctx: MapContext) -> None:
        t0 = time.perf_counter()
        try:
            spec.fn(ctx)
        except Exception as e:
            ctx.errors[spec.id] = str(e)
            logger.warning("  %s FAILED: %s", spec.id, e)
            return
        ctx.completed_transforms.add(spec.id)
        logger.debug("  %s completed in %.1fms", spec.id, (time.perf_counter() - t0) * 1000)

    def _gate(self) -> set[str]:
        """Stage ids switched off by the config (matched by tag)."""
        skip: set[str] = set()
        if not self.config.build_polygons:
            skip.update(s.id for s in self.registry.tagged("polygons"))
        return skip


def create_pipeline(config: PipelineConfig | None = None) -> Pipeline:
    """Factory function for creating a pipeline instance."""
    return Pipeline(config=config)

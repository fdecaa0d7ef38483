"""Tests for the pipeline orchestrator."""

from tests.conftest import PROVINCES_SVG

from vectormap.engine.config import PipelineConfig
from vectormap.engine.context import MapContext
from vectormap.engine.pipeline import Pipeline
from vectormap.engine.registry import Stage, StageRegistry, StageSpec
from vectormap.svg.parser import parse_svg


def test_pipeline_runs_stages_in_order():
    reg = StageRegistry()
    results = []

    def s1(ctx: MapContext) -> None:
        results.append("s1")

    def s2(ctx: MapContext) -> None:
        results.append("s2")

    reg.register(StageSpec(id="T0.02", layer=Stage.PARSING, fn=s2, dependencies=["T0.01"]))
    reg.register(StageSpec(id="T0.01", layer=Stage.PARSING, fn=s1))

    ctx = Pipeline(registry=reg).run(MapContext())

    assert results == ["s1", "s2"]
    assert ctx.completed_transforms == {"T0.01", "T0.02"}


def test_pipeline_records_errors_and_continues():
    reg = StageRegistry()
    ran = []

    def fail(ctx: MapContext) -> None:
        raise ValueError("test error")

    reg.register(StageSpec(id="T0.01", layer=Stage.PARSING, fn=fail))
    reg.register(StageSpec(id="T0.02", layer=Stage.PARSING, fn=lambda ctx: ran.append(True)))

    ctx = Pipeline(registry=reg).run(MapContext())

    assert "test error" in ctx.errors["T0.01"]
    assert "T0.01" not in ctx.completed_transforms
    assert ran == [True]


def test_run_layer_parsing_only():
    ctx = parse_svg(PROVINCES_SVG)
    Pipeline().run_layer(ctx, Stage.PARSING)

    assert ctx.completed_transforms == {"T0.01", "T0.02"}
    for region in ctx.regions:
        assert region.commands
        assert region.raw_outline
        assert region.bounds is None


def test_polygons_gated_by_config():
    ctx = parse_svg(PROVINCES_SVG)
    ctx.canvas = None
    Pipeline(config=PipelineConfig(build_polygons=False)).run(ctx)

    assert "T2.03" not in ctx.completed_transforms
    assert "T2.02" in ctx.completed_transforms
    assert all(r.polygon is None for r in ctx.regions)


def test_stages_replace_regions():
    ctx = parse_svg(PROVINCES_SVG)
    before = ctx.regions
    Pipeline().run(ctx)

    # Original values untouched
    assert all(r.raw_outline == () for r in before)
    assert all(r.raw_outline for r in ctx.regions)

"""Tests for the stage registry."""

import pytest

from vectormap.engine.context import MapContext
from vectormap.engine.registry import Stage, StageRegistry, StageSpec, get_registry
from vectormap.main import load_stages


def _noop(ctx: MapContext) -> None:
    pass


def test_register_and_get():
    reg = StageRegistry()
    spec = StageSpec(id="T0.01", layer=Stage.PARSING, fn=_noop)
    reg.register(spec)
    assert reg.get("T0.01") is spec
    assert reg.count == 1


def test_duplicate_id_rejected():
    reg = StageRegistry()
    reg.register(StageSpec(id="T0.01", layer=Stage.PARSING, fn=_noop))
    with pytest.raises(ValueError):
        reg.register(StageSpec(id="T0.01", layer=Stage.PARSING, fn=_noop))


def test_get_layer():
    reg = StageRegistry()
    reg.register(StageSpec(id="T0.01", layer=Stage.PARSING, fn=_noop))
    reg.register(StageSpec(id="T1.01", layer=Stage.BOUNDS, fn=_noop))
    layer0 = reg.get_layer(Stage.PARSING)
    assert [s.id for s in layer0] == ["T0.01"]


def test_resolve_order_pulls_dependencies():
    reg = StageRegistry()
    reg.register(StageSpec(id="T0.02", layer=Stage.PARSING, fn=_noop))
    reg.register(StageSpec(id="T1.01", layer=Stage.BOUNDS, fn=_noop, dependencies=["T0.02"]))
    reg.register(StageSpec(id="T2.01", layer=Stage.NORMALIZATION, fn=_noop))
    ids = [s.id for s in reg.resolve_order({"T1.01"})]
    assert ids == ["T0.02", "T1.01"]


def test_resolve_order_cycle():
    reg = StageRegistry()
    reg.register(StageSpec(id="A", layer=Stage.PARSING, fn=_noop, dependencies=["B"]))
    reg.register(StageSpec(id="B", layer=Stage.PARSING, fn=_noop, dependencies=["A"]))
    with pytest.raises(ValueError, match="Circular"):
        reg.resolve_order(None)


def test_builtin_stages_registered():
    load_stages()
    ids = [s.id for s in get_registry().resolve_order(None)]
    assert ids == ["T0.01", "T0.02", "T1.01", "T1.02", "T2.01", "T2.02", "T2.03"]


def test_unknown_dependency_rejected():
    reg = StageRegistry()
    reg.register(StageSpec(id="T1.01", layer=Stage.BOUNDS, fn=_noop, dependencies=["T0.09"]))
    with pytest.raises(ValueError, match="Unknown stage"):
        reg.resolve_order(None)


def test_ready_stages_run_by_layer_then_id():
    reg = StageRegistry()
    reg.register(StageSpec(id="A.bounds", layer=Stage.BOUNDS, fn=_noop))
    reg.register(StageSpec(id="Z.parse", layer=Stage.PARSING, fn=_noop))
    reg.register(StageSpec(id="B.bounds", layer=Stage.BOUNDS, fn=_noop, dependencies=["Z.parse"]))
    ids = [s.id for s in reg.resolve_order(None)]
    assert ids == ["Z.parse", "A.bounds", "B.bounds"]


def test_tagged():
    load_stages()
    assert [s.id for s in get_registry().tagged("polygons")] == ["T2.03"]

"""Tests for bounds and the shared fit transform."""

import pytest

from tests.conftest import BARE_SVG, PROVINCES_SVG, SQUARE_SVG, VERTICAL_SVG

from vectormap import parse_map
from vectormap.engine.stage2.t2_01_fit_transform import fit_transform
from vectormap.errors import DiagnosticKind
from vectormap.models.geometry import BoundingBox, Point, Size, Transform
from vectormap.models.path import ClosePath, CubicCurveTo, LineTo, MoveTo
from vectormap.utils.geometry import outline_bounds


def test_region_bounds_include_control_points():
    ops = (MoveTo(Point(0, 0)), CubicCurveTo(Point(10, 0), Point(2, -5), Point(8, 7)))
    assert outline_bounds(ops) == BoundingBox(0.0, -5.0, 10.0, 12.0)


def test_region_bounds_empty():
    assert outline_bounds(()) is None
    assert outline_bounds((ClosePath(),)) is None


def test_union():
    boxes = [BoundingBox(0, 0, 10, 10), None, BoundingBox(5, -5, 20, 5)]
    assert BoundingBox.union(boxes) == BoundingBox(0.0, -5.0, 25.0, 15.0)
    assert BoundingBox.union([]) is None


def test_fit_transform():
    t = fit_transform(BoundingBox(10, 20, 20, 40), Size(100, 100))
    assert t == Transform(scale=2.5, translate_x=-10, translate_y=-20)
    assert t.apply(Point(30, 60)) == Point(50.0, 100.0)


def test_fit_transform_degenerate():
    t = fit_transform(BoundingBox(5, 0, 0, 20), Size(100, 100))
    assert t.scale == 1.0


def test_square_scaled_to_canvas():
    doc = parse_map(SQUARE_SVG, (100, 100))
    region = doc.regions[0]
    assert region.bounds == BoundingBox(0.0, 0.0, 10.0, 10.0)
    assert doc.scale == 10.0
    assert region.outline == (
        MoveTo(Point(0, 0)),
        LineTo(Point(100, 0)),
        LineTo(Point(100, 100)),
        ClosePath(),
    )
    assert region.display_bounds == BoundingBox(0.0, 0.0, 100.0, 100.0)


def test_document_bounds_is_union_and_transform_is_shared():
    doc = parse_map(PROVINCES_SVG, (300, 300))
    assert doc.bounds == BoundingBox.union(r.bounds for r in doc.regions)
    assert doc.bounds == BoundingBox(0.0, 0.0, 150.0, 50.0)
    assert doc.scale == pytest.approx(min(300 / 150, 300 / 50))
    assert all(r.transform is doc.transform for r in doc.regions)


def test_relative_positions_preserved():
    doc = parse_map(PROVINCES_SVG, (300, 300))
    aydin = doc.region("TUR02")
    assert aydin.bounds == BoundingBox(50.0, 0.0, 50.0, 50.0)
    assert aydin.outline[0] == MoveTo(Point(100, 0))
    assert aydin.outline[1] == LineTo(Point(200, 0))
    curved = doc.region("TUR03")
    assert curved.outline[1] == CubicCurveTo(Point(300, 50), Point(240, 0), Point(280, 20))


def test_offset_document_translated_to_origin():
    svg = '<svg><path id="a" d="M10 20 L30 20 L30 60 Z"/></svg>'
    doc = parse_map(svg, (100, 100))
    assert doc.scale == 2.5
    assert doc.regions[0].outline[:3] == (
        MoveTo(Point(0, 0)),
        LineTo(Point(50, 0)),
        LineTo(Point(50, 100)),
    )


def test_zero_width_document():
    doc = parse_map(VERTICAL_SVG, (100, 100))
    assert doc.bounds.width == 0.0
    assert doc.scale == 1.0
    assert doc.regions[0].outline[0] == MoveTo(Point(0, 0))
    assert DiagnosticKind.DEGENERATE_BOUNDS in [d.kind for d in doc.diagnostics]


def test_canvas_from_container():
    doc = parse_map(SQUARE_SVG)
    assert doc.canvas == Size(10.0, 10.0)
    assert doc.scale == 1.0
    assert not doc.degraded


def test_identity_without_any_canvas():
    doc = parse_map(BARE_SVG)
    assert doc.degraded
    assert doc.transform.is_identity
    region = doc.regions[0]
    assert region.outline == region.raw_outline
    assert DiagnosticKind.MISSING_CANVAS in [d.kind for d in doc.diagnostics]


def test_empty_document():
    doc = parse_map("<svg></svg>", (100, 100))
    assert len(doc) == 0
    assert doc.bounds is None
    assert doc.transform.is_identity

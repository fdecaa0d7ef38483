"""Leaf-node geometry helpers over drawing operations. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import Polygon
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union
from svgpathtools import CubicBezier, Line, Path

from vectormap.models.geometry import BoundingBox, Point
from vectormap.models.path import ClosePath, CubicCurveTo, DrawOp, LineTo, MoveTo


def outline_points(operations: tuple[DrawOp, ...]) -> NDArray[np.float64]:
    """Every point that contributes to bounds, as an Nx2 array."""
    pts = [(p.x, p.y) for op in operations for p in op.points()]
    if not pts:
        return np.empty((0, 2))
    return np.array(pts, dtype=np.float64)


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def outline_bounds(operations: tuple[DrawOp, ...]) -> BoundingBox | None:
    """Bounding box over endpoints and cubic control points. None if no points."""
    pts = outline_points(operations)
    if len(pts) == 0:
        return None
    xmin, ymin, xmax, ymax = bbox(pts)
    return BoundingBox(xmin, ymin, xmax - xmin, ymax - ymin)


def split_subpaths(operations: tuple[DrawOp, ...]) -> list[Path]:
    """Convert operations to svgpathtools paths, one per subpath.

    A subpath ends at a MoveTo or a ClosePath. ClosePath adds the closing line
    and returns the pen to the subpath start, so drawing that follows without
    a MoveTo opens a new subpath there. Zero-length lines are skipped.
    """
    subpaths: list[Path] = []
    segments: list = []
    current = 0j
    start = 0j

    for op in operations:
        if isinstance(op, MoveTo):
            if segments:
                subpaths.append(Path(*segments))
            segments = []
            current = start = op.point.as_complex()
        elif isinstance(op, LineTo):
            end = op.point.as_complex()
            if end != current:
                segments.append(Line(current, end))
            current = end
        elif isinstance(op, CubicCurveTo):
            end = op.point.as_complex()
            segments.append(CubicBezier(current, op.control1.as_complex(), op.control2.as_complex(), end))
            current = end
        elif isinstance(op, ClosePath):
            if current != start:
                segments.append(Line(current, start))
            if segments:
                subpaths.append(Path(*segments))
            segments = []
            current = start
    if segments:
        subpaths.append(Path(*segments))
    return subpaths


def to_svgpathtools(operations: tuple[DrawOp, ...]) -> Path:
    """Single (possibly discontinuous) svgpathtools Path for the outline."""
    return Path(*[seg for sp in split_subpaths(operations) for seg in sp])


def _sample_subpath(path: Path, samples_per_segment: int) -> list[tuple[float, float]]:
    points: list[tuple[float, float]] = []
    for seg in path:
        if isinstance(seg, Line):
            points.append((seg.start.real, seg.start.imag))
            continue
        for t in np.linspace(0, 1, samples_per_segment, endpoint=False):
            pt = seg.point(t)
            points.append((pt.real, pt.imag))
    end = path[-1].end
    points.append((end.real, end.imag))
    return points


def outline_polygon(operations: tuple[DrawOp, ...], samples_per_segment: int = 12) -> BaseGeometry | None:
    """Filled area of the outline: one polygon per subpath, unioned."""
    polygons: list[BaseGeometry] = []
    for sp in split_subpaths(operations):
        points = _sample_subpath(sp, samples_per_segment)
        if len(set(points)) < 3:
            continue
        poly = Polygon(points)
        if not poly.is_valid:
            poly = poly.buffer(0)
        if not poly.is_empty:
            polygons.append(poly)

    if not polygons:
        return None
    if len(polygons) == 1:
        return polygons[0]
    return unary_union(polygons)


def point_in_geometry(geometry: BaseGeometry | None, point: Point) -> bool:
    if geometry is None:
        return False
    return bool(geometry.covers(ShapelyPoint(point.x, point.y)))

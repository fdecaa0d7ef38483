"""Geometry value types — points, sizes, boxes, the shared fit transform."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0

    def offset(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def as_complex(self) -> complex:
        return complex(self.x, self.y)


ORIGIN = Point(0.0, 0.0)


@dataclass(frozen=True)
class Size:
    width: float
    height: float

    @classmethod
    def coerce(cls, value: Size | tuple[float, float]) -> Size:
        if isinstance(value, Size):
            return value
        width, height = value
        return cls(float(width), float(height))


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned box: origin is (min x, min y)."""

    x: float
    y: float
    width: float
    height: float

    @property
    def origin(self) -> Point:
        return Point(self.x, self.y)

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def is_degenerate(self) -> bool:
        return self.width == 0.0 or self.height == 0.0

    @classmethod
    def union(cls, boxes: Iterable[BoundingBox | None]) -> BoundingBox | None:
        """Min of mins, max of maxes. ``None`` entries are ignored."""
        extents = np.array(
            [(b.x, b.y, b.max_x, b.max_y) for b in boxes if b is not None],
            dtype=np.float64,
        )
        if len(extents) == 0:
            return None
        xmin, ymin = extents[:, 0].min(), extents[:, 1].min()
        xmax, ymax = extents[:, 2].max(), extents[:, 3].max()
        return cls(float(xmin), float(ymin), float(xmax - xmin), float(ymax - ymin))


@dataclass(frozen=True)
class Transform:
    """Uniform scale applied after translating by (translate_x, translate_y)."""

    scale: float = 1.0
    translate_x: float = 0.0
    translate_y: float = 0.0

    @classmethod
    def identity(cls) -> Transform:
        return cls()

    @property
    def is_identity(self) -> bool:
        return self.scale == 1.0 and self.translate_x == 0.0 and self.translate_y == 0.0

    def apply(self, point: Point) -> Point:
        return Point(
            (point.x + self.translate_x) * self.scale,
            (point.y + self.translate_y) * self.scale,
        )

    def apply_box(self, box: BoundingBox) -> BoundingBox:
        origin = self.apply(box.origin)
        return BoundingBox(origin.x, origin.y, box.width * self.scale, box.height * self.scale)

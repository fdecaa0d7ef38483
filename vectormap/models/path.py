"""Path commands (lexer output) and drawing operations (builder output)."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

from vectormap.models.geometry import Point, Transform


class CommandKind(enum.Enum):
    MOVE_ABSOLUTE = "M"
    MOVE_RELATIVE = "m"
    LINE_ABSOLUTE = "L"
    LINE_RELATIVE = "l"
    CURVE_ABSOLUTE = "C"
    CURVE_RELATIVE = "c"
    CLOSE = "Z"

    @property
    def is_relative(self) -> bool:
        return self in (CommandKind.MOVE_RELATIVE, CommandKind.LINE_RELATIVE, CommandKind.CURVE_RELATIVE)

    @property
    def is_curve(self) -> bool:
        return self in (CommandKind.CURVE_ABSOLUTE, CommandKind.CURVE_RELATIVE)


# Command letters of the supported subset. V/v take a full pair, like L/l.
LETTER_KINDS: dict[str, CommandKind] = {
    "M": CommandKind.MOVE_ABSOLUTE,
    "m": CommandKind.MOVE_RELATIVE,
    "L": CommandKind.LINE_ABSOLUTE,
    "l": CommandKind.LINE_RELATIVE,
    "V": CommandKind.LINE_ABSOLUTE,
    "v": CommandKind.LINE_RELATIVE,
    "C": CommandKind.CURVE_ABSOLUTE,
    "c": CommandKind.CURVE_RELATIVE,
    "Z": CommandKind.CLOSE,
    "z": CommandKind.CLOSE,
}


@dataclass(frozen=True)
class PathCommand:
    kind: CommandKind
    x: float = 0.0
    y: float = 0.0

    @property
    def point(self) -> Point:
        return Point(self.x, self.y)

    def resolve(self, cursor: Point) -> Point:
        """Absolute point for this command given the cursor before it."""
        if self.kind.is_relative:
            return cursor.offset(self.point)
        return self.point


@dataclass(frozen=True)
class MoveTo:
    point: Point

    def points(self) -> tuple[Point, ...]:
        return (self.point,)

    def transformed(self, transform: Transform) -> MoveTo:
        return MoveTo(transform.apply(self.point))


@dataclass(frozen=True)
class LineTo:
    point: Point

    def points(self) -> tuple[Point, ...]:
        return (self.point,)

    def transformed(self, transform: Transform) -> LineTo:
        return LineTo(transform.apply(self.point))


@dataclass(frozen=True)
class CubicCurveTo:
    point: Point
    control1: Point
    control2: Point

    def points(self) -> tuple[Point, ...]:
        # Control points count toward bounds, so curved regions over-estimate.
        return (self.point, self.control1, self.control2)

    def transformed(self, transform: Transform) -> CubicCurveTo:
        return CubicCurveTo(
            transform.apply(self.point),
            transform.apply(self.control1),
            transform.apply(self.control2),
        )


@dataclass(frozen=True)
class ClosePath:
    def points(self) -> tuple[Point, ...]:
        return ()

    def transformed(self, transform: Transform) -> ClosePath:
        return self


DrawOp = Union[MoveTo, LineTo, CubicCurveTo, ClosePath]

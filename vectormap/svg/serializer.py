"""Write SVG markup from display-space region outlines."""

from __future__ import annotations

from dataclasses import dataclass
from html import escape
from typing import TYPE_CHECKING

from vectormap.models.path import ClosePath, CubicCurveTo, DrawOp, LineTo, MoveTo

if TYPE_CHECKING:
    from vectormap.models.region import MapDocument


@dataclass(frozen=True)
class MapAttributes:
    """Default presentation for a rendered map."""

    stroke_width: float = 1.2
    stroke_color: str = "black"
    background: str = "#808080"


def _fmt(value: float, precision: int) -> str:
    text = f"{value:.{precision}f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def outline_to_d(operations: tuple[DrawOp, ...], precision: int = 3) -> str:
    """Absolute path data for a sequence of drawing operations."""
    parts: list[str] = []
    for op in operations:
        if isinstance(op, MoveTo):
            parts.append(f"M{_fmt(op.point.x, precision)} {_fmt(op.point.y, precision)}")
        elif isinstance(op, LineTo):
            parts.append(f"L{_fmt(op.point.x, precision)} {_fmt(op.point.y, precision)}")
        elif isinstance(op, CubicCurveTo):
            coords = (op.control1, op.control2, op.point)
            parts.append("C" + " ".join(f"{_fmt(p.x, precision)} {_fmt(p.y, precision)}" for p in coords))
        elif isinstance(op, ClosePath):
            parts.append("Z")
    return " ".join(parts)


def serialize_map(
    document: MapDocument,
    attributes: MapAttributes | None = None,
    precision: int = 3,
    title: str = "",
) -> str:
    """Generate SVG markup for every region of a parsed map."""
    attributes = attributes or MapAttributes()
    if document.canvas is not None:
        canvas_w, canvas_h = document.canvas.width, document.canvas.height
    elif document.bounds is not None:
        box = document.transform.apply_box(document.bounds)
        canvas_w, canvas_h = box.max_x, box.max_y
    else:
        canvas_w = canvas_h = 0.0

    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="0 0 {_fmt(canvas_w, precision)} {_fmt(canvas_h, precision)}"'
        f' xmlns="http://www.w3.org/2000/svg" role="img">',
    ]
    if title:
        lines.append(f"  <title>{escape(title)}</title>")

    lines.append(
        f'  <g fill="{escape(attributes.background)}" stroke="{escape(attributes.stroke_color)}"'
        f' stroke-width="{_fmt(attributes.stroke_width, precision)}">'
    )
    for region in document.regions:
        d = outline_to_d(region.outline, precision)
        lines.append(
            f'    <path id="{escape(region.id)}" name="{escape(region.name)}" d="{d}" />'
        )
    lines.append("  </g>")
    lines.append("</svg>")
    return "\n".join(lines)

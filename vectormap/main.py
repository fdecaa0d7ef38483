"""Library entry points: logging setup and the parse facade."""

from __future__ import annotations

import logging

from dotenv import load_dotenv

from vectormap.config import settings
from vectormap.engine import create_pipeline, load_stages
from vectormap.engine.config import PipelineConfig
from vectormap.errors import Diagnostic
from vectormap.models.geometry import Size
from vectormap.models.path import DrawOp
from vectormap.models.region import MapDocument
from vectormap.svg.builder import build_outline
from vectormap.svg.lexer import lex_path
from vectormap.svg.loader import load_map
from vectormap.svg.parser import parse_svg

load_stages()


def configure_logging(level: str | None = None) -> None:
    """Load ``.env`` and configure root logging from settings."""
    load_dotenv()
    name = (level or settings.vectormap_log_level).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def parse_map(
    svg_text: str,
    canvas: Size | tuple[float, float] | None = None,
    config: PipelineConfig | None = None,
) -> MapDocument:
    """Parse a map document and fit every region onto ``canvas``.

    ``canvas`` may be omitted, in which case the container's viewBox (or
    width/height) is used. Recovered problems are reported in
    ``MapDocument.diagnostics``; only a document without an ``<svg>`` root
    raises (MalformedDocumentError).
    """
    target = None
    if canvas is not None:
        target = Size.coerce(canvas)
        if target.width <= 0 or target.height <= 0:
            raise ValueError(f"Canvas size must be positive, got {target.width}x{target.height}")

    ctx = parse_svg(svg_text)
    ctx.canvas = target
    create_pipeline(config).run(ctx)
    return ctx.to_document()


def parse_map_file(
    name: str,
    canvas: Size | tuple[float, float] | None = None,
    config: PipelineConfig | None = None,
) -> MapDocument:
    """Look a map up by name (``.svg`` optional) and parse it."""
    return parse_map(load_map(name), canvas, config)


def parse_path_data(d: str) -> tuple[tuple[DrawOp, ...], tuple[Diagnostic, ...]]:
    """Lex and build a bare path-data string (no scaling)."""
    lexed = lex_path(d)
    built = build_outline(lexed.commands)
    return built.operations, lexed.diagnostics + built.diagnostics

"""Map document parser — raw SVG text → MapContext with regions populated.

Regions are the ``<path>`` elements. Identity is resolved here, once, so the
id-based equality of a Region holds from the moment it exists.
"""

from __future__ import annotations

import html
import logging
import re
import uuid

from vectormap.engine.context import MapContext
from vectormap.errors import Diagnostic, DiagnosticKind, MalformedDocumentError
from vectormap.models.region import Region
from vectormap.models.svg_document import SvgDocument, SvgElement

logger = logging.getLogger(__name__)

_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)
_SVG_TAG_RE = re.compile(r"<svg\b[^>]*>", re.IGNORECASE)
_PATH_TAG_RE = re.compile(r"<path\b[^>]*?/?\s*>", re.IGNORECASE)
_ATTR_RE = re.compile(r"""([\w:.-]+)\s*=\s*(?:"([^"]*)"|'([^']*)')""")
_LENGTH_RE = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)\s*(px|pt)?\s*$")

UNDEFINED_NAME = "undefined"


def parse_svg(svg_text: str) -> MapContext:
    """Parse raw SVG text into a MapContext (regions without geometry yet)."""
    text = _COMMENT_RE.sub("", svg_text)

    root = _SVG_TAG_RE.search(text)
    if root is None:
        raise MalformedDocumentError("Document has no <svg> root element")

    root_attrs = _extract_attrs(root.group(0))
    doc = SvgDocument(
        viewbox=_parse_viewbox(root_attrs.get("viewBox", root_attrs.get("viewbox"))),
        width=_parse_length(root_attrs.get("width")),
        height=_parse_length(root_attrs.get("height")),
    )
    ctx = MapContext(document=doc)

    regions: list[Region] = []
    seen_ids: set[str] = set()

    for match in _PATH_TAG_RE.finditer(text, root.end()):
        tag_text = match.group(0)
        attrs = _extract_attrs(tag_text)
        d = attrs.get("d")
        doc.elements.append(SvgElement(tag="path", attributes=attrs, path_data=d))

        if d is None:
            ref = _first(attrs, "id", "name")
            logger.warning("Skipping <path> without d attribute (%s)", ref or tag_text[:60])
            ctx.diagnostics.append(
                Diagnostic(
                    DiagnosticKind.MISSING_PATH_DATA,
                    "region element has no path data",
                    region_id=ref,
                    detail=tag_text[:120],
                )
            )
            continue

        name, region_id = resolve_identity(attrs)
        if region_id in seen_ids:
            logger.warning("Duplicate region id %r", region_id)
            ctx.diagnostics.append(
                Diagnostic(DiagnosticKind.DUPLICATE_ID, "region id appears more than once", region_id=region_id)
            )
        seen_ids.add(region_id)
        regions.append(Region(id=region_id, name=name, path_data=d))

    ctx.regions = tuple(regions)
    logger.info(
        "Parsed map: %d regions (%d path elements), container %s",
        len(regions),
        len(doc.elements),
        doc.container_size,
    )
    return ctx


def resolve_identity(attrs: dict[str, str]) -> tuple[str, str]:
    """(name, id) for a region element.

    name: ``name``, else ``id``, else "undefined".
    id: ``id``, else ``name``, else a fresh uuid4 hex token.
    Blank attributes count as absent.
    """
    name = _first(attrs, "name", "id") or UNDEFINED_NAME
    region_id = _first(attrs, "id", "name") or uuid.uuid4().hex
    return name, region_id


def _first(attrs: dict[str, str], *keys: str) -> str | None:
    for key in keys:
        value = attrs.get(key)
        if value is not None and value.strip():
            return value
    return None


def _extract_attrs(tag_text: str) -> dict[str, str]:
    """Attributes of one tag; single or double quoted, any order."""
    attrs: dict[str, str] = {}
    for m in _ATTR_RE.finditer(tag_text):
        value = m.group(2) if m.group(2) is not None else m.group(3)
        attrs[m.group(1)] = html.unescape(value)
    return attrs


def _parse_viewbox(value: str | None) -> tuple[float, float, float, float] | None:
    if not value:
        return None
    parts = [p for p in re.split(r"[\s,]+", value.strip()) if p]
    if len(parts) != 4:
        logger.warning("Ignoring viewBox %r: expected 4 numbers", value)
        return None
    try:
        x, y, w, h = (float(p) for p in parts)
    except ValueError:
        logger.warning("Ignoring non-numeric viewBox %r", value)
        return None
    return (x, y, w, h)


def _parse_length(value: str | None) -> float | None:
    """Plain number with an optional px/pt suffix; anything else is ignored."""
    if not value:
        return None
    m = _LENGTH_RE.match(value)
    if m is None:
        logger.debug("Ignoring container length %r", value)
        return None
    return float(m.group(1))

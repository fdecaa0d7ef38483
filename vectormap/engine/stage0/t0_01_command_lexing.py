"""T0.01 — Command Lexing.

Lex each region's ``d`` attribute into PathCommands. Diagnostics from the
lexer are tagged with the region id; a malformed region still keeps every
command read before and after the bad payload.
"""

from __future__ import annotations

from vectormap.engine.context import MapContext
from vectormap.engine.registry import Stage, stage
from vectormap.models.region import Region
from vectormap.svg.lexer import lex_path


@stage(
    id="T0.01",
    layer=Stage.PARSING,
    description="Lex path data into commands",
    tags={"always"},
)
def command_lexing(ctx: MapContext) -> None:
    def _lex(region: Region) -> dict:
        result = lex_path(region.path_data)
        ctx.diagnostics.extend(d.for_region(region.id) for d in result.diagnostics)
        return {"commands": result.commands}

    ctx.map_regions(_lex)

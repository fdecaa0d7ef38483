"""Path builder — PathCommand sequence → drawing operations.

Carries a cursor (last absolute point, starting at the origin) and up to two
pending cubic control points. A cubic curve arrives as three consecutive
curve pairs: control1, control2, then the terminal point, at which a single
CubicCurveTo is emitted. Close does not move the cursor back to the subpath
start.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from vectormap.errors import Diagnostic, DiagnosticKind
from vectormap.models.geometry import ORIGIN, Point
from vectormap.models.path import (
    ClosePath,
    CommandKind,
    CubicCurveTo,
    DrawOp,
    LineTo,
    MoveTo,
    PathCommand,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuilderState:
    cursor: Point = ORIGIN
    control1: Point | None = None
    control2: Point | None = None

    @property
    def has_pending(self) -> bool:
        return self.control1 is not None


@dataclass(frozen=True)
class BuildResult:
    operations: tuple[DrawOp, ...] = ()
    cursor: Point = ORIGIN
    diagnostics: tuple[Diagnostic, ...] = ()


def _incomplete_curve(state: BuilderState, where: str) -> Diagnostic:
    pending = 2 if state.control2 is not None else 1
    return Diagnostic(
        DiagnosticKind.INCOMPLETE_CURVE,
        f"curve with {pending} of 3 coordinate pairs {where}",
        detail=repr(state.control2 or state.control1),
    )


def step(state: BuilderState, command: PathCommand) -> tuple[BuilderState, DrawOp | None, Diagnostic | None]:
    """Apply one command. Returns the new state, the emitted op and any diagnostic."""
    kind = command.kind

    if kind.is_curve:
        point = command.resolve(state.cursor)
        if state.control1 is None:
            return BuilderState(state.cursor, point, None), None, None
        if state.control2 is None:
            return BuilderState(state.cursor, state.control1, point), None, None
        op = CubicCurveTo(point, state.control1, state.control2)
        return BuilderState(point), op, None

    dropped = _incomplete_curve(state, f"interrupted by {kind.value}") if state.has_pending else None

    if kind is CommandKind.CLOSE:
        return BuilderState(state.cursor), ClosePath(), dropped

    point = command.resolve(state.cursor)
    if kind in (CommandKind.MOVE_ABSOLUTE, CommandKind.MOVE_RELATIVE):
        return BuilderState(point), MoveTo(point), dropped
    return BuilderState(point), LineTo(point), dropped


def build_outline(commands: tuple[PathCommand, ...] | list[PathCommand]) -> BuildResult:
    """Fold ``step`` over a region's commands."""
    state = BuilderState()
    operations: list[DrawOp] = []
    diagnostics: list[Diagnostic] = []

    for command in commands:
        state, op, diagnostic = step(state, command)
        if op is not None:
            operations.append(op)
        if diagnostic is not None:
            diagnostics.append(diagnostic)

    if state.has_pending:
        diagnostics.append(_incomplete_curve(state, "at end of path"))

    for diagnostic in diagnostics:
        logger.warning("Dropped %s", diagnostic.message)

    return BuildResult(operations=tuple(operations), cursor=state.cursor, diagnostics=tuple(diagnostics))

"""Path-data lexer — ``d`` string → ordered PathCommand sequence.

A command letter opens a context; the characters up to the next letter (or the
end of the string) are its coordinate payload, scanned only when the context
closes. ``Z``/``z`` is emitted as soon as it is read. Case is carried through
on the command kind; relative coordinates are resolved by the builder, never
here.

The scan is a fold of ``step`` over character positions with an explicit
``LexState`` record, so it holds no state between calls.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass

from vectormap.errors import Diagnostic, DiagnosticKind
from vectormap.models.path import LETTER_KINDS, CommandKind, PathCommand

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_SEPARATORS = frozenset(" ,\t\r\n\f")
_CLOSE_LETTERS = frozenset("zZ")
# Every SVG path command letter opens a context, supported or not. Any other
# letter is payload and fails number scanning; "e" stays inside exponents.
_COMMAND_LETTERS = frozenset("MmLlHhVvCcSsQqTtAaZz")


@dataclass(frozen=True)
class LexState:
    # Current command letter; None until the first letter is read
    letter: str | None = None
    # Index in the source where the current payload starts
    start: int = 0


@dataclass(frozen=True)
class LexResult:
    commands: tuple[PathCommand, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()


def scan_numbers(payload: str) -> tuple[list[float], str | None]:
    """Split a payload into numbers.

    Commas and whitespace separate values (runs collapse) and a sign starts a
    new value. Returns the values read and, if scanning hit a non-numeric
    token or a number that overflows to infinity, the unread remainder starting
    at that token.
    """
    values: list[float] = []
    pos = 0
    end = len(payload)
    while True:
        while pos < end and payload[pos] in _SEPARATORS:
            pos += 1
        if pos >= end:
            return values, None
        match = _NUMBER_RE.match(payload, pos)
        if match is None:
            return values, payload[pos:].strip()
        value = float(match.group())
        if not math.isfinite(value):
            return values, payload[pos:].strip()
        values.append(value)
        pos = match.end()


def flush(letter: str | None, payload: str) -> tuple[list[PathCommand], list[Diagnostic]]:
    """Turn one closed command context into commands, one per coordinate pair."""
    if letter is None:
        if payload.strip():
            logger.warning("Coordinates before the first command: %r", payload)
            return [], [
                Diagnostic(
                    DiagnosticKind.MALFORMED_COORDINATE,
                    "coordinates before the first command letter",
                    detail=payload.strip(),
                )
            ]
        return [], []

    if letter in _CLOSE_LETTERS:
        if payload.strip():
            logger.debug("Ignoring payload after %s: %r", letter, payload)
        return [], []

    kind = LETTER_KINDS.get(letter)
    if kind is None:
        logger.warning("Unsupported path command %r, payload discarded", letter)
        return [], [
            Diagnostic(
                DiagnosticKind.UNSUPPORTED_COMMAND,
                f"unsupported command {letter!r}",
                detail=f"{letter}{payload}".strip(),
            )
        ]

    diagnostics: list[Diagnostic] = []
    values, remainder = scan_numbers(payload)
    if remainder is not None:
        logger.warning("Invalid coordinates for %s, discarding %r", letter, remainder)
        diagnostics.append(
            Diagnostic(
                DiagnosticKind.MALFORMED_COORDINATE,
                f"invalid coordinate after {letter!r}",
                detail=remainder,
            )
        )

    commands = [PathCommand(kind, values[i], values[i + 1]) for i in range(0, len(values) - 1, 2)]

    if len(values) % 2:
        logger.warning("Unpaired coordinate %s after %s dropped", values[-1], letter)
        diagnostics.append(
            Diagnostic(
                DiagnosticKind.UNPAIRED_COORDINATE,
                f"odd number of values after {letter!r}",
                detail=repr(values[-1]),
            )
        )

    return commands, diagnostics


def step(state: LexState, d: str, index: int) -> tuple[LexState, list[PathCommand], list[Diagnostic]]:
    """Advance over ``d[index]``; returns the new state and anything emitted."""
    if d[index] not in _COMMAND_LETTERS:
        return state, [], []

    letter = d[index]
    commands, diagnostics = flush(state.letter, d[state.start:index])
    if letter in _CLOSE_LETTERS:
        commands.append(PathCommand(CommandKind.CLOSE))
    return LexState(letter=letter, start=index + 1), commands, diagnostics


def lex_path(d: str) -> LexResult:
    """Lex a full path-data string."""
    state = LexState()
    commands: list[PathCommand] = []
    diagnostics: list[Diagnostic] = []

    for index in range(len(d)):
        state, emitted, found = step(state, d, index)
        commands.extend(emitted)
        diagnostics.extend(found)

    emitted, found = flush(state.letter, d[state.start:])
    commands.extend(emitted)
    diagnostics.extend(found)

    return LexResult(commands=tuple(commands), diagnostics=tuple(diagnostics))

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ..errors import InvalidCharacter, MapError, MultipleStartPositions, NoEndPosition, NoStartPosition
from .cells import CellKind, Position, text_row_to_y
from .model import CompiledMap, CompileResult
from .normalizer import normalize
from .reachability import check_reachable
from .validator import validate_shape

logger = logging.getLogger(__name__)


def compile_grid(rows: Sequence[str], width: int, height: int) -> CompiledMap:
    """Classify every cell of an already shape-checked grid.

    The scan is row-major from the top line and fails fast: the first invalid
    character or second start aborts without looking at the rest. The returned
    map has not been checked for reachability yet.
    """
    hedges: List[Position] = []
    pickups: List[Position] = []
    ends: List[Position] = []
    start: Optional[Position] = None

    for r in range(height):
        y = text_row_to_y(r, height)
        row = rows[r]
        for x in range(width):
            ch = row[x]
            kind = CellKind.from_char(ch)
            pos = Position(x, y)
            if kind is CellKind.HEDGE:
                hedges.append(pos)
            elif kind is CellKind.PICKUP:
                pickups.append(pos)
            elif kind is CellKind.START:
                if start is not None:
                    raise MultipleStartPositions(pos)
                start = pos
            elif kind is CellKind.END:
                ends.append(pos)
            elif kind is CellKind.EMPTY:
                continue
            else:
                raise InvalidCharacter(ch, column=x, row=r)

    if start is None:
        raise NoStartPosition()
    if not ends:
        raise NoEndPosition()

    return CompiledMap(
        hedge_positions=frozenset(hedges),
        pickup_positions=frozenset(pickups),
        end_positions=frozenset(ends),
        start_position=start,
        width=width,
        height=height,
    )


def compile_map(text: str) -> CompiledMap:
    """Compile a level source into a validated :class:`CompiledMap`.

    Runs normalization, shape validation, cell classification and the
    reachability check in that order; the first failing stage raises its
    :class:`~hedgemaze.errors.MapError` subclass and nothing is returned.
    """
    rows = normalize(text)
    width, height = validate_shape(rows)
    compiled = compile_grid(rows, width, height)
    check_reachable(compiled)
    logger.debug(
        "Compiled %dx%d map: %d hedges, %d pickups, %d ends",
        width,
        height,
        len(compiled.hedge_positions),
        compiled.pickup_count,
        len(compiled.end_positions),
    )
    return compiled


def try_compile(text: str) -> CompileResult:
    """Like :func:`compile_map` but returns the classified failure instead of raising it."""
    try:
        return CompileResult(map=compile_map(text))
    except MapError as exc:
        return CompileResult(error=exc)

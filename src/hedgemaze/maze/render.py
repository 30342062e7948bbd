from __future__ import annotations

from typing import List

from .cells import CellKind, y_to_text_row
from .model import CompiledMap


def render_lines(compiled: CompiledMap) -> List[str]:
    """Convert a compiled map back to its ASCII rows (topmost line first).

    Compiling the joined rows yields a map equal to ``compiled``.
    """
    grid = [[CellKind.EMPTY.value] * compiled.width for _ in range(compiled.height)]

    def put(kind: CellKind, x: int, y: int) -> None:
        grid[y_to_text_row(y, compiled.height)][x] = kind.value

    for p in compiled.hedge_positions:
        put(CellKind.HEDGE, p.x, p.y)
    for p in compiled.pickup_positions:
        put(CellKind.PICKUP, p.x, p.y)
    for p in compiled.end_positions:
        put(CellKind.END, p.x, p.y)
    put(CellKind.START, compiled.start_position.x, compiled.start_position.y)
    return ["".join(row) for row in grid]

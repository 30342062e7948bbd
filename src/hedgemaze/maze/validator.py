from __future__ import annotations

from typing import Sequence, Tuple

from ..errors import RowWidthMismatch, UnboundedMap
from .cells import CellKind

_HEDGE = CellKind.HEDGE.value


def validate_shape(rows: Sequence[str]) -> Tuple[int, int]:
    """Check that ``rows`` form a hedge-bounded rectangle and return ``(width, height)``.

    Rows are expected to come from :func:`normalize`, so there is at least one
    and none are empty.
    """
    width = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != width:
            raise RowWidthMismatch(row_index=i, expected=width, actual=len(row))
    height = len(rows)

    # Top and bottom rows
    for x in range(width):
        if rows[0][x] != _HEDGE:
            raise UnboundedMap(column=x, row=0)
        if rows[height - 1][x] != _HEDGE:
            raise UnboundedMap(column=x, row=height - 1)

    # Left and right columns
    for r in range(height):
        if rows[r][0] != _HEDGE:
            raise UnboundedMap(column=0, row=r)
        if rows[r][width - 1] != _HEDGE:
            raise UnboundedMap(column=width - 1, row=r)

    return width, height

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class CellKind(Enum):
    """Enumeration of the map grammar.

    Each member's value is the single character that spells it in level
    sources. Any character not listed here is rejected by the compiler.
    """

    HEDGE = "#"
    PICKUP = "+"
    START = "S"
    END = "E"
    EMPTY = " "

    @classmethod
    def from_char(cls, ch: str) -> Optional["CellKind"]:
        """Return the kind spelled by ``ch`` or None if ``ch`` is not in the grammar."""
        try:
            return cls(ch)
        except ValueError:
            return None


@dataclass(frozen=True)
class Position:
    x: int
    y: int

    def neighbors4(self) -> Tuple["Position", "Position", "Position", "Position"]:
        # up, down, left, right
        return (
            Position(self.x, self.y + 1),
            Position(self.x, self.y - 1),
            Position(self.x - 1, self.y),
            Position(self.x + 1, self.y),
        )

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)


def text_row_to_y(row: int, height: int) -> int:
    """Convert a text row index (0 = topmost line) to a bottom-up y coordinate.

    Consumers place objects in a Cartesian frame whose origin is the
    bottom-left cell, so the first line of a level source is ``y = height - 1``.
    """
    return height - 1 - row


def y_to_text_row(y: int, height: int) -> int:
    """Inverse of :func:`text_row_to_y`."""
    return height - 1 - y

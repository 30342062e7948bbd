from __future__ import annotations

from typing import TYPE_CHECKING, Sequence, Tuple

if TYPE_CHECKING:  # pragma: no cover
    from .maze.cells import Position


class HedgemazeError(Exception):
    """Base exception for the hedgemaze project."""


class SettingsError(HedgemazeError):
    """Raised when configuration values cannot be validated."""


class MapError(HedgemazeError):
    """Base error for every classified map compile/lookup failure.

    Subclasses carry the structured details of the violation as attributes so
    callers can branch on them without parsing the message.
    """

    code = "map_error"


class EmptyInput(MapError):
    """Raised when the source text is empty or only whitespace."""

    code = "empty_input"

    def __init__(self) -> None:
        super().__init__("ASCII map string cannot be empty")


class NoContentRows(MapError):
    """Raised when normalization leaves no content rows."""

    code = "no_content_rows"

    def __init__(self) -> None:
        super().__init__("ASCII map must contain at least one non-empty row")


class InteriorBlankLine(MapError):
    code = "interior_blank_line"

    def __init__(self, line_index: int) -> None:
        self.line_index = line_index
        super().__init__(f"ASCII map cannot contain empty lines between non-empty lines (line {line_index})")


class RowWidthMismatch(MapError):
    code = "row_width_mismatch"

    def __init__(self, row_index: int, expected: int, actual: int) -> None:
        self.row_index = row_index
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"All rows must have the same width. Row {row_index} has length {actual}, expected {expected}"
        )


class UnboundedMap(MapError):
    """Raised when any cell of the outer ring is not a hedge.

    ``column``/``row`` are text coordinates (row 0 is the topmost line).
    """

    code = "unbounded_map"

    def __init__(self, column: int, row: int) -> None:
        self.column = column
        self.row = row
        super().__init__(f"Map must be bounded by hedges (#) on all sides; cell at column {column}, row {row} is open")


class InvalidCharacter(MapError):
    """Raised for a character outside the map grammar.

    ``column``/``row`` are text coordinates (row 0 is the topmost line), so the
    position matches what an author sees in the source.
    """

    code = "invalid_character"

    def __init__(self, char: str, column: int, row: int) -> None:
        self.char = char
        self.column = column
        self.row = row
        super().__init__(
            f"Invalid character {char!r} at column {column}, row {row}. Valid characters are: #, +, S, E, and space"
        )


class MultipleStartPositions(MapError):
    code = "multiple_start_positions"

    def __init__(self, position: "Position") -> None:
        self.position = position
        super().__init__(
            f"Map must contain exactly one start position (S); second start at ({position.x}, {position.y})"
        )


class NoStartPosition(MapError):
    code = "no_start_position"

    def __init__(self) -> None:
        super().__init__("Map must contain exactly one start position (S)")


class NoEndPosition(MapError):
    code = "no_end_position"

    def __init__(self) -> None:
        super().__init__("Map must contain at least one end position (E)")


class UnreachablePickup(MapError):
    code = "unreachable_pickup"

    def __init__(self, position: "Position", start: "Position") -> None:
        self.position = position
        self.start = start
        super().__init__(
            f"Pickup at position ({position.x}, {position.y}) is not reachable "
            f"from start position ({start.x}, {start.y})"
        )


class UnreachableEnd(MapError):
    code = "unreachable_end"

    def __init__(self, position: "Position", start: "Position") -> None:
        self.position = position
        self.start = start
        super().__init__(
            f"End goal at position ({position.x}, {position.y}) is not reachable "
            f"from start position ({start.x}, {start.y})"
        )


class UnknownLevelName(MapError):
    """Raised by the registry for names that were never successfully compiled."""

    code = "unknown_level_name"

    def __init__(self, name: str, available_names: Sequence[str]) -> None:
        self.name = name
        self.available_names: Tuple[str, ...] = tuple(available_names)
        super().__init__(f"Level '{name}' not found. Available levels: {', '.join(self.available_names)}")

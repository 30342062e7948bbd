from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Iterable, List, Optional

from ..errors import MapError
from .cells import Position


def text_order(positions: Iterable[Position]) -> List[Position]:
    """Sort positions top-to-bottom, left-to-right, i.e. the order a reader scans the source."""
    return sorted(positions, key=lambda p: (-p.y, p.x))


@dataclass(frozen=True)
class CompiledMap:
    """A validated level, ready for scene setup.

    Positions use a bottom-left origin: ``x`` is the text column and ``y``
    counts up from the last source line. Instances are only produced by
    :func:`hedgemaze.maze.compiler.compile_map` (directly or via the
    registry) and are never mutated by consumers.
    """

    hedge_positions: FrozenSet[Position]
    pickup_positions: FrozenSet[Position]
    end_positions: FrozenSet[Position]
    start_position: Position
    width: int
    height: int

    @property
    def pickup_count(self) -> int:
        return len(self.pickup_positions)

    def in_bounds(self, p: Position) -> bool:
        return 0 <= p.x < self.width and 0 <= p.y < self.height

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-friendly dict with deterministically ordered lists."""

        def pts(items: Iterable[Position]) -> List[List[int]]:
            return [[p.x, p.y] for p in text_order(items)]

        return {
            "width": self.width,
            "height": self.height,
            "start": [self.start_position.x, self.start_position.y],
            "ends": pts(self.end_positions),
            "pickups": pts(self.pickup_positions),
            "hedges": pts(self.hedge_positions),
        }


@dataclass(frozen=True)
class CompileResult:
    """Outcome of :func:`try_compile`: exactly one of ``map`` or ``error`` is set."""

    map: Optional[CompiledMap] = None
    error: Optional[MapError] = None

    def __post_init__(self) -> None:
        if (self.map is None) == (self.error is None):
            raise ValueError("CompileResult needs exactly one of map or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> CompiledMap:
        """Return the compiled map or raise the recorded error."""
        if self.error is not None:
            raise self.error
        return self.map  # type: ignore[return-value]

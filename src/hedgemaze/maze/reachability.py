"""Flood-fill reachability for compiled maps.

Movement is 4-connected (up, down, left, right) through any in-bounds cell
that is not a hedge. The reachable set is a property of graph connectivity
alone, so every frontier discipline yields the same set; BFS is the default
and DFS is kept selectable so that property stays testable.
"""
from __future__ import annotations

import logging
from collections import deque
from typing import AbstractSet, Deque, FrozenSet, Set

from ..errors import UnreachableEnd, UnreachablePickup
from .cells import Position
from .model import CompiledMap, text_order

logger = logging.getLogger(__name__)

STRATEGIES = ("bfs", "dfs")


def flood_fill(
    start: Position,
    hedges: AbstractSet[Position],
    width: int,
    height: int,
    strategy: str = "bfs",
) -> FrozenSet[Position]:
    """Return every position reachable from ``start``.

    Args:
        start: Origin of the fill; always part of the result.
        hedges: Impassable positions.
        width: Grid width; valid x are ``[0, width)``.
        height: Grid height; valid y are ``[0, height)``.
        strategy: ``"bfs"`` pops the oldest frontier entry, ``"dfs"`` the newest.
    """
    if strategy not in STRATEGIES:
        raise ValueError(f"Unknown flood fill strategy: {strategy}")
    lifo = strategy == "dfs"

    visited: Set[Position] = {start}
    frontier: Deque[Position] = deque([start])
    while frontier:
        current = frontier.pop() if lifo else frontier.popleft()
        for n in current.neighbors4():
            if not (0 <= n.x < width and 0 <= n.y < height):
                continue
            if n in hedges or n in visited:
                continue
            visited.add(n)
            frontier.append(n)
    return frozenset(visited)


def reachable_from(start: Position, hedges: AbstractSet[Position], width: int, height: int) -> FrozenSet[Position]:
    return flood_fill(start, hedges, width, height, strategy="bfs")


def check_reachable(compiled: CompiledMap) -> None:
    """Verify every pickup, then every end, is reachable from the start.

    Positions are checked in source reading order; the first unreachable one
    is reported.

    Raises:
        UnreachablePickup: a pickup lies outside the start's region.
        UnreachableEnd: an end lies outside the start's region.
    """
    reachable = reachable_from(
        compiled.start_position, compiled.hedge_positions, compiled.width, compiled.height
    )
    logger.debug(
        "Flood fill from (%d, %d) reached %d cells",
        compiled.start_position.x,
        compiled.start_position.y,
        len(reachable),
    )
    for pickup in text_order(compiled.pickup_positions):
        if pickup not in reachable:
            raise UnreachablePickup(pickup, compiled.start_position)
    for end in text_order(compiled.end_positions):
        if end not in reachable:
            raise UnreachableEnd(end, compiled.start_position)

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

from .cells import Position
from .model import CompiledMap, text_order

logger = logging.getLogger(__name__)

Vec3 = Tuple[float, float, float]

# Height above the ground plane at which pickups float so they stay visible.
PICKUP_ELEVATION = 0.5


def to_world(p: Position, elevation: float = 0.0) -> Vec3:
    """Map a grid position onto the ground plane: grid y becomes world z."""
    return (float(p.x), float(elevation), float(p.y))


@dataclass(frozen=True)
class PlacementPlan:
    """World-space anchors for every object a scene spawns from a map.

    This is the hand-off to the scene collaborator; it only describes where
    things go and how many pickups the counter should expect.
    """

    hedges: Tuple[Vec3, ...]
    pickups: Tuple[Vec3, ...]
    finishes: Tuple[Vec3, ...]
    player: Vec3
    total_pickups: int


def build_placement_plan(compiled: CompiledMap) -> PlacementPlan:
    plan = PlacementPlan(
        hedges=tuple(to_world(p) for p in text_order(compiled.hedge_positions)),
        pickups=tuple(to_world(p, PICKUP_ELEVATION) for p in text_order(compiled.pickup_positions)),
        finishes=tuple(to_world(p) for p in text_order(compiled.end_positions)),
        player=to_world(compiled.start_position),
        total_pickups=compiled.pickup_count,
    )
    logger.debug(
        "Placement plan: %d hedges, %d pickups, %d finishes",
        len(plan.hedges),
        len(plan.pickups),
        len(plan.finishes),
    )
    return plan

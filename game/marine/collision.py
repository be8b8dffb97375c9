"""
Player vs hazard / pickup collision resolution
"""

from dataclasses import dataclass
from typing import List

from .config import DiveConfig
from .entities import Hazard, Pickup, PlayerBody
from .utils import circles_overlap


@dataclass
class CollisionResult:
    hit_hazard: bool = False
    collected: int = 0


def resolve_collisions(
    player: PlayerBody,
    hazards: List[Hazard],
    pickups: List[Pickup],
    config: DiveConfig,
) -> CollisionResult:
    """
    Check hazards first, then pickups.

    The first overlapping hazard ends evaluation and leaves pickups untouched.
    Hazard hitboxes are shrunk by ``config.hazard_forgiveness``. Overlapping
    pickups are removed from ``pickups`` in place (reverse index order, so
    removal does not skew the scan).
    """
    for h in hazards:
        if circles_overlap(player.x, player.y, player.radius,
                           h.x, h.y, h.radius, slack=config.hazard_forgiveness):
            return CollisionResult(hit_hazard=True)

    collected = 0
    for i in range(len(pickups) - 1, -1, -1):
        p = pickups[i]
        if circles_overlap(player.x, player.y, player.radius, p.x, p.y, p.radius):
            del pickups[i]
            collected += 1

    return CollisionResult(collected=collected)

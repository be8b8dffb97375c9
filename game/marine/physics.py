"""
Vertical physics for the player body: buoyancy, dive thrust, speed clamp and
the surface/seabed boundary rules.
"""

from .config import DiveConfig
from .entities import PlayerBody
from .utils import clamp


def step_player(player: PlayerBody, hold_dive: bool, dt: float, config: DiveConfig) -> bool:
    """
    Integrate one tick of vertical motion in place.

    The surface is a hard stop for upward motion (no bounce). Returns True when
    the body touched the seabed, which is fatal; the caller must not run any
    further processing for this tick.
    """
    accel = config.dive_accel if hold_dive else config.buoyancy_accel
    player.vy += accel * dt
    player.vy = clamp(player.vy, -config.max_speed, config.max_speed)
    player.y += player.vy * dt

    if player.top < config.surface_y:
        player.y = config.surface_y + player.radius
        if player.vy < 0:
            player.vy = 0.0

    return player.bottom > config.seabed_y

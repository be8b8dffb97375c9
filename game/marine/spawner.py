"""
Entity store: owns the drifting hazards and pickups.

Each tick the store accumulates elapsed time, spawns at most one entity at the
right edge, moves everything left and culls what has drifted past the left
edge. Survivors keep their insertion order.
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Protocol

import numpy as np

from .config import DiveConfig
from .entities import Hazard, Pickup

logger = logging.getLogger(__name__)


class UniformSource(Protocol):
    """Anything with ``random() -> float`` in [0, 1), e.g. numpy's Generator"""

    def random(self) -> float: ...


class EntityStore:
    """Ordered collections of active hazards and pickups"""

    def __init__(self, config: DiveConfig, rng: Optional[UniformSource] = None):
        self.config = config
        self.rng = rng if rng is not None else np.random.default_rng()

        self.hazards: List[Hazard] = []
        self.pickups: List[Pickup] = []
        self.spawn_accumulator = 0.0  # ms

    def clear(self):
        self.hazards = []
        self.pickups = []
        self.spawn_accumulator = 0.0

    def __len__(self) -> int:
        return len(self.hazards) + len(self.pickups)

    # ----------------------------
    # Per-tick steps
    # ----------------------------

    def update(self, dt: float):
        """Spawn, advance and cull, in that order"""
        if self.accumulate(dt):
            self.spawn()
        self.advance(dt)
        self.cull()

    def accumulate(self, dt: float) -> bool:
        """Add elapsed time; True when the spawn interval has been reached"""
        self.spawn_accumulator += dt * 1000.0
        if self.spawn_accumulator >= self.config.spawn_interval_ms:
            self.spawn_accumulator = 0.0
            return True
        return False

    def spawn(self):
        """Spawn one hazard or pickup just past the right edge"""
        cfg = self.config
        band = cfg.seabed_y - cfg.surface_y - 2 * cfg.spawn_margin
        y = float(math.floor(cfg.surface_y + cfg.spawn_margin + float(self.rng.random()) * band))
        x = cfg.width + cfg.spawn_x_offset

        if float(self.rng.random()) < cfg.hazard_probability:
            phase = float(self.rng.random()) * math.pi * 2
            self.hazards.append(Hazard(x=x, y=y, radius=cfg.hazard_radius, phase=phase))
            logger.debug("Spawned hazard at y=%.0f", y)
        else:
            self.pickups.append(Pickup(x=x, y=y, radius=cfg.pickup_radius))
            logger.debug("Spawned pickup at y=%.0f", y)

    def advance(self, dt: float):
        cfg = self.config
        for h in self.hazards:
            h.x -= cfg.hazard_speed * dt
            h.phase += cfg.bob_rate * dt
            h.y += math.sin(h.phase) * cfg.bob_amplitude * dt

        for p in self.pickups:
            p.x -= cfg.pickup_speed * dt

    def cull(self):
        """Drop entities whose right edge is past -cull_margin"""
        limit = -self.config.cull_margin
        self.hazards = [h for h in self.hazards if h.x + h.radius > limit]
        self.pickups = [p for p in self.pickups if p.x + p.radius > limit]

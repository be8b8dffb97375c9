"""
Game entity dataclasses
"""

from dataclasses import dataclass


@dataclass
class PlayerBody:
    """The buoyant player (turtle); only vertical motion is simulated"""
    x: float
    y: float
    radius: float = 20.0
    vy: float = 0.0  # px/s, positive is down

    @property
    def top(self) -> float:
        return self.y - self.radius

    @property
    def bottom(self) -> float:
        return self.y + self.radius


@dataclass
class Hazard:
    """Drifting jellyfish; contact ends the episode"""
    x: float
    y: float
    radius: float = 24.0
    phase: float = 0.0  # bob oscillator, radians


@dataclass
class Pickup:
    """Drifting pearl; contact scores a point and removes it"""
    x: float
    y: float
    radius: float = 10.0

"""
Tunable constants for the marine dive game.

Defaults describe an 800x450 internal field. The hazard
forgiveness and the hazard/pickup spawn split are balancing knobs kept as
named values.
"""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class DiveConfig:
    """Simulation parameters; distances in px, speeds in px/s"""

    # Field
    width: float = 800.0
    height: float = 450.0
    surface_y: float = 40.0
    seabed_offset: float = 60.0  # seabed line sits this far above the bottom

    # Player
    player_radius: float = 20.0
    spawn_x: float = 140.0
    spawn_y: float = 280.0
    buoyancy_accel: float = -500.0  # upward while not diving
    dive_accel: float = 900.0
    max_speed: float = 520.0

    # Entities
    hazard_speed: float = 180.0
    pickup_speed: float = 220.0
    hazard_radius: float = 24.0
    pickup_radius: float = 10.0
    bob_rate: float = 2.5  # rad/s
    bob_amplitude: float = 18.0
    spawn_interval_ms: float = 1100.0
    spawn_x_offset: float = 40.0
    spawn_margin: float = 40.0
    hazard_probability: float = 0.55
    cull_margin: float = 20.0

    # Collisions
    hazard_forgiveness: float = 2.0

    # Timing
    max_dt: float = 0.033  # seconds

    # Persistence
    display_name_max: int = 16
    default_display_name: str = "Anonymous"

    def __post_init__(self):
        if not 0.0 <= self.hazard_probability <= 1.0:
            raise ValueError(f"hazard_probability must be in [0, 1], got {self.hazard_probability}")
        if self.seabed_y <= self.surface_y:
            raise ValueError("seabed line must lie below the surface line")
        if self.max_dt <= 0:
            raise ValueError(f"max_dt must be positive, got {self.max_dt}")

    @property
    def seabed_y(self) -> float:
        return self.height - self.seabed_offset

    def with_overrides(self, **kwargs) -> "DiveConfig":
        """Copy of this config with some fields replaced"""
        return replace(self, **kwargs)


DEFAULT_CONFIG = DiveConfig()

"""
Planet — fixed description of a body on a circular orbit.

Each body of the scene (Sun included) is a Planet. Planets never change
after construction: the per-frame position and spin live on the scene-graph
node that renders the planet, and are recomputed by the frame updater.

Units are scene units (not AU) and radians per second of scene time.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class Planet:
    """
    A body on a circular orbit around the origin.

    Attributes:
        name           : unique key, also the button label
        color          : 0xRRGGBB
        radius         : sphere radius (scene units)
        orbit_distance : radius of the circular path, 0 for the central body
        angular_speed  : radians per second
        emissive       : 0xRRGGBB self-illumination (Sun)
    """
    name: str
    color: int
    radius: float
    orbit_distance: float
    angular_speed: float
    emissive: int = 0x000000

    def __post_init__(self):
        if not self.name:
            raise ValueError("Planet name must not be empty")
        if self.orbit_distance < 0:
            raise ValueError(
                f"{self.name}: orbit distance must be >= 0, got {self.orbit_distance}")
        if self.radius <= 0:
            raise ValueError(f"{self.name}: radius must be > 0, got {self.radius}")

    @property
    def orbits(self) -> bool:
        """True for bodies that move (distance > 0)."""
        return self.orbit_distance > 0

    @property
    def period_s(self) -> Optional[float]:
        """Seconds of scene time for one revolution (None for fixed bodies)."""
        if not self.orbits or self.angular_speed == 0:
            return None
        return 2.0 * math.pi / abs(self.angular_speed)

    @property
    def is_emissive(self) -> bool:
        return self.emissive != 0


# ---------------------------------------------------------------------------
# Default catalogue
# ---------------------------------------------------------------------------

#   name        color     radius  distance  speed  emissive
_SOLAR_SYSTEM_DATA: List[Tuple[str, int, float, float, float, int]] = [
    ("sun",     0xFDB813, 40.0,   0.0, 0.00, 0xFDB813),
    ("mercury", 0xB1B1B1,  5.0,  70.0, 0.80, 0x000000),
    ("venus",   0xEEDC82,  7.0, 100.0, 0.60, 0x000000),
    ("earth",   0x1E90FF,  8.0, 130.0, 0.50, 0x000000),
    ("mars",    0xB22222,  6.0, 160.0, 0.45, 0x000000),
    ("jupiter", 0xC48E5C, 20.0, 210.0, 0.30, 0x000000),
    ("saturn",  0xD8C078, 18.0, 270.0, 0.25, 0x000000),
    ("uranus",  0xAFEEEE, 14.0, 330.0, 0.20, 0x000000),
    ("neptune", 0x355CFF, 14.0, 400.0, 0.18, 0x000000),
]

RINGED_PLANET = "saturn"


def build_solar_system() -> List[Planet]:
    """Return the default bodies, Sun first, ordered by orbit distance."""
    return [Planet(*row) for row in _SOLAR_SYSTEM_DATA]


def planets_by_name(planets: List[Planet]) -> Dict[str, Planet]:
    """Index planets by name; duplicate names raise ValueError."""
    index: Dict[str, Planet] = {}
    for p in planets:
        if p.name in index:
            raise ValueError(f"Duplicate planet name: {p.name}")
        index[p.name] = p
    return index

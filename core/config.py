"""
Viewer configuration.

All tunable numbers of the solar system viewer live here: window, projection,
camera poses, lerp fractions and scene population sizes. Defaults reproduce
the original scene; a JSON file can override any field.
"""

from __future__ import annotations
import json
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Tuple


Vec3 = Tuple[float, float, float]

# Window settings
WIDTH, HEIGHT = 1200, 800
FPS = 60
TITLE = "Solar System"


@dataclass
class ViewerConfig:
    """Configuration for window, camera and scene generation"""
    # Window
    width: int = WIDTH
    height: int = HEIGHT
    fps: int = FPS
    fullscreen: bool = False

    # Projection
    fov_deg: float = 75.0
    near: float = 0.1
    far: float = 8000.0

    # Camera poses and blending (fractions are per frame)
    default_camera_pos: Vec3 = (0.0, 200.0, 500.0)
    default_target: Vec3 = (0.0, 0.0, 0.0)
    follow_offset: Vec3 = (50.0, 30.0, 70.0)
    overview_lerp: float = 0.05
    follow_lerp: float = 0.02
    target_lerp: float = 0.05

    # Orbit controls
    damping: float = 0.05
    rotate_speed: float = 0.005
    zoom_step: float = 0.95
    min_distance: float = 20.0
    max_distance: float = 4000.0

    # Scene population
    star_count: int = 7000
    star_spread: float = 8000.0
    asteroid_count: int = 300
    belt_inner: float = 230.0
    belt_width: float = 20.0
    belt_thickness: float = 10.0
    seed: int = 42

    # Lights
    ambient_intensity: float = 0.6
    sun_intensity: float = 3.0

    # Per-frame spin increments (radians)
    planet_spin: float = 0.01
    star_spin: Vec3 = (0.0001, 0.0003, 0.0)
    belt_spin: float = 0.0008

    def validate(self) -> "ViewerConfig":
        """Raise ValueError on settings the viewer cannot run with."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Window size must be positive, got {self.width}x{self.height}")
        if self.fps <= 0:
            raise ValueError(f"FPS must be positive, got {self.fps}")
        if not 0.0 < self.fov_deg < 180.0:
            raise ValueError(f"fov_deg must be in (0, 180), got {self.fov_deg}")
        if not 0.0 < self.near < self.far:
            raise ValueError(f"Need 0 < near < far, got near={self.near} far={self.far}")
        for name in ("overview_lerp", "follow_lerp", "target_lerp", "damping"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be in [0, 1], got {value}")
        if not 0.0 < self.zoom_step:
            raise ValueError(f"zoom_step must be positive, got {self.zoom_step}")
        if self.rotate_speed < 0.0:
            raise ValueError(f"rotate_speed must be >= 0, got {self.rotate_speed}")
        if not 0.0 < self.min_distance <= self.max_distance:
            raise ValueError(f"Need 0 < min_distance <= max_distance, got "
                             f"{self.min_distance}, {self.max_distance}")
        if self.star_count < 0 or self.asteroid_count < 0:
            raise ValueError("Population sizes must be >= 0")
        return self

    @property
    def aspect(self) -> float:
        return self.width / self.height

    @classmethod
    def from_json(cls, filepath) -> "ViewerConfig":
        """
        Load configuration overrides from a JSON file

        Args:
            filepath: Path to a JSON object whose keys are field names

        Returns:
            Validated ViewerConfig (defaults for missing keys)
        """
        path = Path(filepath)
        with open(path, 'r') as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Config {path} must contain a JSON object")

        return cls().with_overrides(**data)

    def with_overrides(self, **overrides) -> "ViewerConfig":
        """Return a copy with the given fields replaced (unknown keys are skipped)."""
        known = {f.name: f for f in fields(self)}
        accepted = {}
        for key, value in overrides.items():
            if key not in known:
                print(f"Warning: unknown config key '{key}' ignored")
                continue
            if value is None:
                continue
            accepted[key] = self._coerce(key, getattr(self, key), value)
        return replace(self, **accepted).validate()

    @staticmethod
    def _coerce(key: str, current, value):
        """Convert an override to the type of the field's current value."""
        if isinstance(current, bool):
            if not isinstance(value, bool):
                raise ValueError(f"{key} must be true or false, got {value!r}")
            return value
        try:
            if isinstance(current, tuple):
                if isinstance(value, (str, bytes)) or len(value) != 3:
                    raise ValueError(f"{key} must have 3 components, got {value!r}")
                return tuple(float(v) for v in value)
            if isinstance(current, int):
                if isinstance(value, float) and not value.is_integer():
                    raise ValueError(f"{key} must be an integer, got {value!r}")
                return int(value)
            if isinstance(current, float):
                return float(value)
        except TypeError as e:
            raise ValueError(f"Bad value for {key}: {value!r} ({e})") from e
        return value

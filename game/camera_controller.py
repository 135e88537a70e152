"""
Camera Controller

Two-state machine deciding where the camera heads each frame:

    OVERVIEW          camera → default pose, target → origin
    FOLLOWING(name)   camera → planet + follow offset, target → planet

Transitions happen only on button clicks (toggle_follow). The per-frame
blend (update_camera) lerps the rig a fixed fraction toward the goal, so
changing mode never snaps the camera.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

import numpy as np

from core.config import ViewerConfig
from core.vecmath import lerp, vec3


class CameraModeKind(Enum):
    OVERVIEW = "overview"
    FOLLOWING = "following"


@dataclass(frozen=True)
class CameraMode:
    """Active camera mode. FOLLOWING always carries a planet name."""
    kind: CameraModeKind = CameraModeKind.OVERVIEW
    planet: Optional[str] = None

    def __post_init__(self):
        if self.kind == CameraModeKind.FOLLOWING and not self.planet:
            raise ValueError("FOLLOWING mode needs a planet name")
        if self.kind == CameraModeKind.OVERVIEW and self.planet is not None:
            raise ValueError("OVERVIEW mode has no planet")

    @classmethod
    def overview(cls) -> "CameraMode":
        return cls()

    @classmethod
    def following(cls, planet: str) -> "CameraMode":
        return cls(CameraModeKind.FOLLOWING, planet)

    @property
    def is_overview(self) -> bool:
        return self.kind == CameraModeKind.OVERVIEW

    def is_following(self, planet: Optional[str] = None) -> bool:
        """True when following (a specific planet, if given)."""
        if self.kind != CameraModeKind.FOLLOWING:
            return False
        return planet is None or self.planet == planet

    @property
    def label(self) -> str:
        return "OVERVIEW" if self.is_overview else f"FOLLOW {self.planet.upper()}"


def toggle_follow(mode: CameraMode, planet: str) -> CameraMode:
    """
    Mode after clicking the button of planet.

    Clicking the followed planet returns to overview; any other click goes
    straight to following that planet.
    """
    if mode.is_following(planet):
        return CameraMode.overview()
    return CameraMode.following(planet)


@dataclass
class CameraRig:
    """Camera position and look-target in world space."""
    position: np.ndarray = field(default_factory=lambda: vec3(0.0, 200.0, 500.0))
    target: np.ndarray = field(default_factory=vec3)

    @classmethod
    def from_config(cls, config: ViewerConfig) -> "CameraRig":
        return cls(np.array(config.default_camera_pos, dtype=np.float64),
                   np.array(config.default_target, dtype=np.float64))

    @property
    def distance(self) -> float:
        return float(np.linalg.norm(self.position - self.target))


def update_camera(rig: CameraRig, mode: CameraMode, scene,
                  config: ViewerConfig) -> None:
    """
    Blend the rig one frame toward the goal of the current mode.

    Args:
        rig: Camera rig, mutated in place
        mode: Current camera mode
        scene: Anything with planet_position(name) -> Optional[ndarray]
        config: Default pose, follow offset and lerp fractions
    """
    if mode.is_overview:
        lerp(rig.position, config.default_camera_pos, config.overview_lerp)
        lerp(rig.target, config.default_target, config.target_lerp)
        return

    planet_pos = scene.planet_position(mode.planet)
    if planet_pos is None:
        # Unknown planet: leave the camera where it is
        return
    desired = planet_pos + np.asarray(config.follow_offset, dtype=np.float64)
    lerp(rig.position, desired, config.follow_lerp)
    lerp(rig.target, planet_pos, config.target_lerp)

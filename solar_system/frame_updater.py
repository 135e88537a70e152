"""
Frame updater — advances the scene to elapsed time t.

Planet positions are a pure function of t (cos/sin of t * speed), never
accumulated. Spin of planets, stars and asteroid belt is incremented by a
fixed amount per call, so it is frame-rate dependent.
"""

from __future__ import annotations
import math

import numpy as np

from core.config import ViewerConfig
from .planet import Planet
from .scene_graph import SolarScene


def orbit_position(planet: Planet, t: float) -> np.ndarray:
    """Position of planet on its circular orbit in the XZ plane at time t."""
    if not planet.orbits:
        return np.zeros(3)
    angle = t * planet.angular_speed
    d = planet.orbit_distance
    return np.array([math.cos(angle) * d, 0.0, math.sin(angle) * d])


def update_frame(scene: SolarScene, t: float, config: ViewerConfig) -> None:
    """
    Advance every animated node for one frame.

    Args:
        scene: Scene to mutate in place
        t: Elapsed scene time in seconds
        config: Supplies the per-frame spin increments
    """
    sx, sy, sz = config.star_spin
    scene.stars.rotation += (sx, sy, sz)
    scene.asteroid_belt.rotation[1] += config.belt_spin

    sun = scene.planet_node("sun")
    if sun is not None:
        scene.sun_light.position[:] = sun.position

    for node in scene.planet_nodes.values():
        planet = node.planet
        if planet is None or not planet.orbits:
            continue
        pos = orbit_position(planet, t)
        node.position[0] = pos[0]
        node.position[2] = pos[2]
        node.rotation[1] += config.planet_spin

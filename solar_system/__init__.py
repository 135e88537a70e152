"""
Solar system module — bodies, scene graph and per-frame animation.

Usage:
    from solar_system import build_solar_system, build_scene, update_frame
    scene = build_scene(config, build_solar_system())

    # every frame
    update_frame(scene, elapsed, config)
    pos = scene.planet_position("earth")
"""

from .planet import (
    Planet,
    RINGED_PLANET,
    build_solar_system,
    planets_by_name,
)
from .scene_graph import (
    NodeKind,
    SceneNode,
    SolarScene,
    AmbientLight,
    PointLight,
    build_scene,
    iter_world,
)
from .frame_updater import orbit_position, update_frame

__all__ = [
    "Planet",
    "RINGED_PLANET",
    "build_solar_system",
    "planets_by_name",
    "NodeKind",
    "SceneNode",
    "SolarScene",
    "AmbientLight",
    "PointLight",
    "build_scene",
    "iter_world",
    "orbit_position",
    "update_frame",
]

"""
Scene graph — the geometry of the solar system, built once at startup.

Architecture
------------
The scene is an owning tree of SceneNode objects. A node owns its children
(plain list); children hold no reference back to their parent, so the tree
has no cycles and world transforms are computed top-down by iter_world().

    root (GROUP)
      ├── stars           (POINTS, 7000 points)
      ├── asteroid_belt   (INSTANCES, 300 small spheres)
      ├── orbit:<planet>  (RING, one per orbiting planet, lies in XZ)
      └── <planet>        (SPHERE, one per catalogue entry)
              └── saturn_ring (RING, child of Saturn only)

Lights are not nodes: the ambient light is global and the point light is
repositioned on the Sun each frame by the frame updater.
"""

from __future__ import annotations
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np

from core.config import ViewerConfig
from core.vecmath import compose, vec3
from .planet import Planet, RINGED_PLANET, planets_by_name


ORBIT_RING_COLOR = 0x666666
ASTEROID_COLOR = 0x888888
ASTEROID_RADIUS = 0.8
STAR_COLOR = 0xFFFFFF

ORBIT_RING_SEGMENTS = 128
SATURN_RING_INNER = 20.0
SATURN_RING_OUTER = 30.0
SATURN_RING_SEGMENTS = 64
SATURN_RING_TILT = math.pi / 3


class NodeKind(Enum):
    GROUP = "group"
    POINTS = "points"          # point cloud (stars)
    INSTANCES = "instances"    # many small spheres sharing one radius (asteroids)
    SPHERE = "sphere"          # planet
    RING = "ring"              # flat annulus in the node's local XY plane


@dataclass
class SceneNode:
    """Single node of the scene tree."""
    name: str
    kind: NodeKind = NodeKind.GROUP
    position: np.ndarray = field(default_factory=vec3)
    rotation: np.ndarray = field(default_factory=vec3)   # euler XYZ, radians
    scale: float = 1.0

    color: int = 0xFFFFFF
    emissive: int = 0x000000

    # Geometry payload (meaning depends on kind)
    radius: float = 0.0                      # SPHERE / INSTANCES
    inner: float = 0.0                       # RING
    outer: float = 0.0                       # RING
    segments: int = 0                        # RING
    points: Optional[np.ndarray] = None      # POINTS / INSTANCES, (N,3) local

    planet: Optional[Planet] = None
    line: bool = False                       # RING drawn as a thin outline
    visible: bool = True
    children: List["SceneNode"] = field(default_factory=list)

    def add(self, child: "SceneNode") -> "SceneNode":
        if child is self:
            raise ValueError("A node cannot be its own child")
        self.children.append(child)
        return child

    def local_matrix(self) -> np.ndarray:
        return compose(self.position, self.rotation, self.scale)

    def find(self, name: str) -> Optional["SceneNode"]:
        """Depth-first lookup by name."""
        if self.name == name:
            return self
        for child in self.children:
            hit = child.find(name)
            if hit is not None:
                return hit
        return None

    def walk(self) -> Iterator["SceneNode"]:
        yield self
        for child in self.children:
            yield from child.walk()


def iter_world(node: SceneNode,
               parent: Optional[np.ndarray] = None) -> Iterator[Tuple[SceneNode, np.ndarray]]:
    """Yield (node, world_matrix) for every visible node below and including node."""
    if not node.visible:
        return
    world = node.local_matrix() if parent is None else parent @ node.local_matrix()
    yield node, world
    for child in node.children:
        yield from iter_world(child, world)


@dataclass
class AmbientLight:
    color: int = 0xFFFFFF
    intensity: float = 0.6


@dataclass
class PointLight:
    color: int = 0xFFFFFF
    intensity: float = 3.0
    distance: float = 8000.0
    position: np.ndarray = field(default_factory=vec3)


@dataclass
class SolarScene:
    """Built scene: the tree plus direct handles to the nodes the updater animates."""
    root: SceneNode
    stars: SceneNode
    asteroid_belt: SceneNode
    planet_nodes: Dict[str, SceneNode]
    orbit_rings: Dict[str, SceneNode]
    ambient: AmbientLight
    sun_light: PointLight
    saturn_ring: Optional[SceneNode] = None

    def planet_node(self, name: str) -> Optional[SceneNode]:
        """Node for planet name, or None if the scene has no such planet."""
        return self.planet_nodes.get(name)

    def planet_position(self, name: str) -> Optional[np.ndarray]:
        node = self.planet_nodes.get(name)
        if node is None:
            return None
        return node.position

    @property
    def planet_names(self) -> List[str]:
        return list(self.planet_nodes)


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------

def build_stars(rng: np.random.Generator, count: int, spread: float) -> SceneNode:
    """Background star cloud: each coordinate uniform in [-spread/2, spread/2)."""
    pts = (rng.random((count, 3)) - 0.5) * spread
    return SceneNode("stars", NodeKind.POINTS, color=STAR_COLOR, points=pts)


def build_asteroid_belt(rng: np.random.Generator, count: int,
                        inner: float, width: float, thickness: float) -> SceneNode:
    """Ring of small rocks between inner and inner+width, slightly scattered in Y."""
    angle = rng.random(count) * 2.0 * math.pi
    radius = inner + rng.random(count) * width
    y = (rng.random(count) - 0.5) * thickness
    pts = np.column_stack([np.cos(angle) * radius, y, np.sin(angle) * radius])
    return SceneNode("asteroid_belt", NodeKind.INSTANCES, color=ASTEROID_COLOR,
                     radius=ASTEROID_RADIUS, points=pts)


def build_orbit_ring(planet: Planet) -> SceneNode:
    """Thin ring at the planet's orbit distance, rotated into the XZ plane."""
    d = planet.orbit_distance
    return SceneNode(f"orbit:{planet.name}", NodeKind.RING,
                     rotation=vec3(math.pi / 2, 0.0, 0.0),
                     color=ORBIT_RING_COLOR,
                     inner=d - 1.0, outer=d + 1.0,
                     segments=ORBIT_RING_SEGMENTS, line=True)


def build_planet(planet: Planet) -> SceneNode:
    # Planets start at their t=0 position; the updater moves them from there
    return SceneNode(planet.name, NodeKind.SPHERE,
                     position=vec3(planet.orbit_distance, 0.0, 0.0),
                     color=planet.color, emissive=planet.emissive,
                     radius=planet.radius, planet=planet)


def build_saturn_ring(color: int) -> SceneNode:
    return SceneNode("saturn_ring", NodeKind.RING,
                     rotation=vec3(SATURN_RING_TILT, 0.0, 0.0),
                     color=color, emissive=color,
                     inner=SATURN_RING_INNER, outer=SATURN_RING_OUTER,
                     segments=SATURN_RING_SEGMENTS)


def build_scene(config: ViewerConfig, planets: List[Planet]) -> SolarScene:
    """
    Construct the complete scene graph.

    Args:
        config: Viewer configuration (population sizes, seed, light intensities)
        planets: Bodies to place; names must be unique

    Returns:
        SolarScene with every node in place
    """
    index = planets_by_name(planets)
    rng = np.random.default_rng(config.seed)

    root = SceneNode("root")
    stars = root.add(build_stars(rng, config.star_count, config.star_spread))
    belt = root.add(build_asteroid_belt(rng, config.asteroid_count, config.belt_inner,
                                        config.belt_width, config.belt_thickness))

    planet_nodes: Dict[str, SceneNode] = {}
    orbit_rings: Dict[str, SceneNode] = {}
    for planet in index.values():
        planet_nodes[planet.name] = root.add(build_planet(planet))
        if planet.orbits:
            orbit_rings[planet.name] = root.add(build_orbit_ring(planet))

    saturn_ring = None
    ringed = planet_nodes.get(RINGED_PLANET)
    if ringed is not None:
        saturn_ring = ringed.add(build_saturn_ring(ringed.color))

    scene = SolarScene(
        root=root,
        stars=stars,
        asteroid_belt=belt,
        planet_nodes=planet_nodes,
        orbit_rings=orbit_rings,
        ambient=AmbientLight(intensity=config.ambient_intensity),
        sun_light=PointLight(intensity=config.sun_intensity, distance=config.far),
        saturn_ring=saturn_ring,
    )
    print(f"Scene built: {len(planet_nodes)} bodies, {config.star_count} stars, "
          f"{config.asteroid_count} asteroids")
    return scene

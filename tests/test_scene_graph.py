import math

import numpy as np
import pytest

from core.vecmath import transform_points
from solar_system import NodeKind, Planet, build_scene, iter_world, update_frame


def test_scene_contents(scene, config, planets):
    assert scene.planet_names == [p.name for p in planets]
    assert scene.stars.points.shape == (config.star_count, 3)
    assert scene.asteroid_belt.points.shape == (config.asteroid_count, 3)
    # every planet but the sun has an orbit ring
    assert set(scene.orbit_rings) == {p.name for p in planets if p.orbits}


def test_star_and_belt_bounds(scene, config):
    half = config.star_spread / 2
    assert np.all(np.abs(scene.stars.points) <= half)

    belt = scene.asteroid_belt.points
    r = np.hypot(belt[:, 0], belt[:, 2])
    assert np.all(r >= config.belt_inner)
    assert np.all(r < config.belt_inner + config.belt_width)
    assert np.all(np.abs(belt[:, 1]) <= config.belt_thickness / 2)


def test_same_seed_same_scene(config, planets):
    a = build_scene(config, planets)
    b = build_scene(config, planets)
    assert np.array_equal(a.stars.points, b.stars.points)


def test_orbit_ring_lies_in_xz_plane(scene):
    ring = scene.orbit_rings["earth"]
    assert ring.kind == NodeKind.RING
    assert ring.line
    assert (ring.inner, ring.outer) == (129.0, 131.0)
    # local +Y of the ring maps onto world Z
    p = transform_points(ring.local_matrix(), [[0.0, 130.0, 0.0]])[0]
    assert p[1] == pytest.approx(0.0, abs=1e-9)
    assert abs(p[2]) == pytest.approx(130.0)


def test_saturn_ring_is_child_of_saturn(scene, config):
    saturn = scene.planet_node("saturn")
    assert scene.saturn_ring in saturn.children
    assert scene.saturn_ring not in scene.root.children

    update_frame(scene, 7.0, config)
    worlds = {node.name: world for node, world in iter_world(scene.root)}
    assert np.allclose(worlds["saturn_ring"][:3, 3], saturn.position)
    assert scene.saturn_ring.rotation[0] == pytest.approx(math.pi / 3)


def test_tree_has_no_shared_nodes(scene):
    seen = set()
    for node in scene.root.walk():
        assert id(node) not in seen
        seen.add(id(node))


def test_find_and_self_child(scene):
    assert scene.root.find("saturn_ring") is scene.saturn_ring
    assert scene.root.find("pluto") is None
    with pytest.raises(ValueError):
        scene.root.add(scene.root)


def test_scene_without_saturn(config):
    scene = build_scene(config, [Planet("sun", 0xFFFFFF, 10.0, 0.0, 0.0)])
    assert scene.saturn_ring is None
    assert scene.orbit_rings == {}


def test_duplicate_planets_rejected(config):
    p = Planet("earth", 0x0000FF, 8.0, 130.0, 0.5)
    with pytest.raises(ValueError):
        build_scene(config, [p, p])

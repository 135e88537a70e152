import math

import numpy as np
import pytest

from solar_system import orbit_position, update_frame


@pytest.mark.parametrize("t", [0.0, 0.016, 1.0, 12.5, 333.3, 1e5])
def test_orbit_radius_matches_distance(planets, t):
    for planet in planets:
        if not planet.orbits:
            continue
        pos = orbit_position(planet, t)
        assert np.linalg.norm(pos) == pytest.approx(planet.orbit_distance, rel=1e-9)
        assert pos[1] == 0.0


def test_all_planets_on_positive_x_at_t0(scene, config):
    update_frame(scene, 0.0, config)
    for name, node in scene.planet_nodes.items():
        planet = node.planet
        assert node.position[0] == pytest.approx(planet.orbit_distance)
        assert node.position[1] == 0.0
        assert node.position[2] == pytest.approx(0.0)


def test_position_is_stateless_in_time(scene, config):
    for t in (5.0, 90.0, 2.0):
        update_frame(scene, t, config)
    earth = scene.planet_node("earth")
    expected = orbit_position(earth.planet, 2.0)
    assert np.allclose(earth.position, expected)


def test_quarter_turn(planets):
    earth = next(p for p in planets if p.name == "earth")
    t = (math.pi / 2) / earth.angular_speed
    pos = orbit_position(earth, t)
    assert pos[0] == pytest.approx(0.0, abs=1e-9)
    assert pos[2] == pytest.approx(earth.orbit_distance)


def test_sun_stays_at_origin(scene, config):
    update_frame(scene, 42.0, config)
    assert np.allclose(scene.planet_position("sun"), 0.0)
    assert np.allclose(scene.sun_light.position, 0.0)


def test_spin_increments_per_frame(scene, config):
    for _ in range(3):
        update_frame(scene, 1.0, config)
    assert scene.planet_node("mars").rotation[1] == pytest.approx(3 * config.planet_spin)
    assert scene.planet_node("sun").rotation[1] == 0.0
    assert scene.asteroid_belt.rotation[1] == pytest.approx(3 * config.belt_spin)
    assert scene.stars.rotation[0] == pytest.approx(3 * config.star_spin[0])
    assert scene.stars.rotation[1] == pytest.approx(3 * config.star_spin[1])


@pytest.mark.parametrize("t", [0.0, 3.7, 250.0])
def test_update_frame_places_planets_at_orbit_position(scene, config, t):
    update_frame(scene, t, config)
    for node in scene.planet_nodes.values():
        assert np.allclose(node.position, orbit_position(node.planet, t))

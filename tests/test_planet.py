import math

import pytest

from solar_system import Planet, build_solar_system, planets_by_name


def test_default_catalogue():
    planets = build_solar_system()
    names = [p.name for p in planets]
    assert names[0] == "sun"
    assert names[-1] == "neptune"
    assert len(names) == 9
    distances = [p.orbit_distance for p in planets]
    assert distances == sorted(distances)


def test_sun_is_fixed_and_emissive():
    sun = planets_by_name(build_solar_system())["sun"]
    assert not sun.orbits
    assert sun.is_emissive
    assert sun.period_s is None


def test_period():
    earth = planets_by_name(build_solar_system())["earth"]
    assert earth.period_s == pytest.approx(2 * math.pi / 0.5)


@pytest.mark.parametrize("kwargs", [
    dict(orbit_distance=-1.0),
    dict(radius=0.0),
    dict(name=""),
])
def test_invalid_planet(kwargs):
    args = dict(name="x", color=0, radius=1.0, orbit_distance=10.0, angular_speed=0.1)
    args.update(kwargs)
    with pytest.raises(ValueError):
        Planet(**args)


def test_planet_is_immutable():
    p = Planet("x", 0, 1.0, 10.0, 0.1)
    with pytest.raises(AttributeError):
        p.orbit_distance = 20.0

import math

import numpy as np
import pygame
import pytest

from game.camera_controller import CameraRig
from game.orbit_controls import OrbitControls


def test_idle_controls_do_nothing(config):
    rig = CameraRig.from_config(config)
    before = rig.position.copy()
    assert not OrbitControls(config).update(rig)
    assert np.allclose(rig.position, before)


def test_rotation_keeps_distance_and_damps(config):
    controls = OrbitControls(config)
    rig = CameraRig.from_config(config)
    dist = rig.distance
    controls.rotate(0.5, 0.0)
    assert controls.update(rig)
    assert rig.distance == pytest.approx(dist)
    assert controls._delta_azimuth == pytest.approx(0.5 * (1 - config.damping))


def test_dolly_clamped(config):
    controls = OrbitControls(config)
    rig = CameraRig.from_config(config)
    controls.dolly(500)
    controls.update(rig)
    assert rig.distance == pytest.approx(config.min_distance)


def test_polar_clamped(config):
    controls = OrbitControls(config)
    rig = CameraRig.from_config(config)
    controls.damping = 0.0
    controls.rotate(0.0, -10.0)
    controls.update(rig)
    assert rig.position[1] > 0
    assert rig.distance == pytest.approx(math.hypot(200.0, 500.0))


def test_drag_events(config):
    controls = OrbitControls(config)
    down = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(100, 100))
    move = pygame.event.Event(pygame.MOUSEMOTION, pos=(120, 100), rel=(20, 0), buttons=(1, 0, 0))
    up = pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=(120, 100))
    assert controls.handle_event(down)
    assert controls.dragging
    assert controls.handle_event(move)
    assert controls.handle_event(up)
    assert not controls.dragging
    assert controls._delta_azimuth == pytest.approx(-20 * config.rotate_speed)


def test_validated_zoom_step_survives_wheel(config):
    with pytest.raises(ValueError):
        config.with_overrides(zoom_step=0)
    controls = OrbitControls(config.with_overrides(zoom_step=0.5))
    controls.handle_event(pygame.event.Event(pygame.MOUSEWHEEL, x=0, y=-1))
    assert controls._scale > 0

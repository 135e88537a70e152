import numpy as np

from game.camera_controller import CameraMode, CameraRig
from game.state_manager import StateManager, ViewerState, step_frame


def test_click_planet_updates_mode():
    state = ViewerState()
    assert state.click_planet("earth") == CameraMode.following("earth")
    assert state.click_planet("mars") == CameraMode.following("mars")
    assert state.click_planet("mars").is_overview


def test_step_frame_moves_planets_and_camera(scene, config):
    state = ViewerState(rig=CameraRig.from_config(config))
    state.click_planet("earth")
    start = state.rig.position.copy()

    elapsed = step_frame(state, scene, None, 1.0, config)
    assert elapsed == 1.0
    earth = scene.planet_position("earth")
    assert np.allclose(earth, [np.cos(0.5) * 130, 0.0, np.sin(0.5) * 130])
    assert not np.allclose(state.rig.position, start)


def test_paused_frame_keeps_planets(scene, config):
    state = ViewerState(rig=CameraRig.from_config(config))
    step_frame(state, scene, None, 1.0, config)
    before = scene.planet_position("mars").copy()
    spin = scene.planet_node("mars").rotation[1]

    state.clock.toggle_pause()
    step_frame(state, scene, None, 1.0, config)
    assert np.allclose(scene.planet_position("mars"), before)
    assert scene.planet_node("mars").rotation[1] == spin


def test_unregistered_screen_warns(config, capsys):
    sm = StateManager(config)
    sm.switch_to("NOPE")
    assert sm.current_screen is None
    assert "not registered" in capsys.readouterr().out

import numpy as np

from game.camera_controller import CameraRig
from rendering.perspective import PerspectiveCamera
from rendering.scene_renderer import SceneRenderer
from solar_system import update_frame


def test_render_smoke(display, scene, config):
    update_frame(scene, 3.0, config)
    camera = PerspectiveCamera(config.fov_deg, 320, 240, config.near, config.far)
    renderer = SceneRenderer(camera)
    renderer.render(display, scene, CameraRig.from_config(config))
    assert renderer.drawn_bodies > 0

    # the sun sits at the look-target, i.e. the centre of the screen
    assert tuple(display.get_at((160, 120)))[:3] == (0xFD, 0xB8, 0x13)


def test_render_from_inside_sun(display, scene, config):
    camera = PerspectiveCamera(config.fov_deg, 320, 240, config.near, config.far)
    rig = CameraRig(np.array([0.0, 0.0, 0.0]), np.array([0.0, 0.0, -1.0]))
    SceneRenderer(camera).render(display, scene, rig)

import json

import pytest

import main_app
from core.config import ViewerConfig


def write_config(tmp_path, data):
    path = tmp_path / "viewer.json"
    path.write_text(json.dumps(data))
    return str(path)


def test_cli_flags_override_config_file(tmp_path):
    path = write_config(tmp_path, {"width": 640, "height": 480, "seed": 3})
    cfg = main_app.build_config(main_app.parse_args(["--config", path, "--width", "900"]))
    assert cfg.width == 900
    assert cfg.height == 480
    assert cfg.seed == 3
    assert cfg.fullscreen is False


def test_no_flags_gives_defaults():
    cfg = main_app.build_config(main_app.parse_args([]))
    assert cfg == ViewerConfig()


def test_fullscreen_flag():
    cfg = main_app.build_config(main_app.parse_args(["--fullscreen"]))
    assert cfg.fullscreen is True


@pytest.mark.parametrize("data", [
    {"follow_offset": 5},
    {"width": [1]},
    {"zoom_step": 0},
])
def test_bad_config_exits_with_message(tmp_path, data):
    path = write_config(tmp_path, data)
    with pytest.raises(SystemExit) as exc:
        main_app.main(["--config", path])
    assert "Invalid configuration" in str(exc.value)


def test_leaving_fullscreen_restores_last_window_size(display):
    app = main_app.SolarSystemApp(ViewerConfig(width=400, height=300,
                                               star_count=50, asteroid_count=5))
    app.handle_resize(500, 350)
    app.fullscreen = True
    app.toggle_fullscreen()
    assert not app.fullscreen
    assert app.screen.get_size() == (500, 350)
    screen = app.state_manager.screens["SOLAR_SYSTEM"]
    assert (screen.camera.width, screen.camera.height) == (500, 350)

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from core.config import ViewerConfig
from solar_system import build_scene, build_solar_system


@pytest.fixture
def config():
    return ViewerConfig(star_count=200, asteroid_count=20, seed=7)


@pytest.fixture
def planets():
    return build_solar_system()


@pytest.fixture
def scene(config, planets):
    return build_scene(config, planets)


@pytest.fixture
def display():
    pygame.init()
    pygame.display.set_mode((320, 240))
    yield pygame.Surface((320, 240), depth=32)
    pygame.quit()

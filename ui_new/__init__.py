"""
UI Module - Overlay Components and Screens
"""
from .theme import get_theme, Colors, Fonts
from .base_screen import BaseScreen
from .components import Button
from .planet_buttons import PlanetButtonBar
from .screen_solar_system import SolarSystemScreen

__all__ = [
    "get_theme", "Colors", "Fonts",
    "BaseScreen",
    "Button",
    "PlanetButtonBar",
    "SolarSystemScreen",
]

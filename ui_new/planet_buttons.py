"""
Planet button bar — binds one button per planet to the camera mode.

Each button carries its planet name in `data`. A click hands the name to
the on_click callback (the viewer state's click_planet), which applies the
follow/overview toggle. After every click the bar re-latches the button of
the followed planet, if any.
"""

import pygame
from typing import Callable, Dict, List, Optional

from game.camera_controller import CameraMode
from .components import Button

BUTTON_WIDTH = 92
BUTTON_GAP = 6


class PlanetButtonBar:
    """
    Row of planet buttons along the top edge of the window.

    Usage:
        bar = PlanetButtonBar(names, on_click=state.click_planet)
        # in game loop:
        bar.handle_event(event)
        bar.sync(state.mode)
        bar.draw(surface)
    """

    def __init__(self, planet_names: List[str],
                 on_click: Callable[[str], CameraMode],
                 x: int = 10, y: int = 10, height: int = 30):
        self._on_click = on_click
        self._x = x
        self._y = y
        self._height = height
        self.buttons: Dict[str, Button] = {}
        for name in planet_names:
            self.buttons[name] = Button(0, y, BUTTON_WIDTH, height, name.upper(),
                                        callback=lambda n=name: self.click(n),
                                        data=name)
        self.layout(None)

    def layout(self, width: Optional[int]):
        """
        Place the buttons left to right, wrapping onto a new row when the
        window is narrower than the bar.
        """
        x, y = self._x, self._y
        for btn in self.buttons.values():
            if width is not None and x + BUTTON_WIDTH > width - self._x and x > self._x:
                x = self._x
                y += self._height + BUTTON_GAP
            btn.rect.topleft = (x, y)
            x += BUTTON_WIDTH + BUTTON_GAP

    @property
    def bottom(self) -> int:
        return max((b.rect.bottom for b in self.buttons.values()), default=self._y)

    def click(self, planet: str) -> CameraMode:
        """Dispatch a click on the button of planet."""
        mode = self._on_click(planet)
        self.sync(mode)
        return mode

    def sync(self, mode: CameraMode):
        """Latch the button of the followed planet, release the others."""
        for name, btn in self.buttons.items():
            btn.set_active(mode.is_following(name))

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Returns:
            True if one of the buttons took the event
        """
        for btn in self.buttons.values():
            if btn.handle_event(event):
                return True
        return False

    def update(self, mouse_pos):
        for btn in self.buttons.values():
            btn.update(mouse_pos)

    def draw(self, surface: pygame.Surface):
        for btn in self.buttons.values():
            btn.draw(surface)

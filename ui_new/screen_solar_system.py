"""
Solar System Screen

The animated scene with its overlay:
  - planet buttons (top)       → follow / back to overview
  - status line (below buttons)→ camera mode, scene time, pause state
  - footer (bottom)            → key hints

Mouse drag and wheel outside the buttons orbit/zoom the camera.

Keys:
  SPACE → pause / resume the scene clock
  H     → back to overview
  ESC   → quit
"""

import pygame
from typing import Optional

from game.state_manager import StateManager, step_frame
from rendering.perspective import PerspectiveCamera
from rendering.scene_renderer import SceneRenderer
from .base_screen import BaseScreen
from .planet_buttons import PlanetButtonBar

FOOTER_HEIGHT = 30


class SolarSystemScreen(BaseScreen):
    """
    Main viewer screen.

    Owns the renderer and the button bar; the simulation state itself lives
    in the StateManager and is passed to step_frame() every update.
    """

    def __init__(self, state_manager: StateManager):
        super().__init__("SOLAR_SYSTEM")
        self._sm = state_manager
        cfg = state_manager.config
        self.camera = PerspectiveCamera(cfg.fov_deg, cfg.width, cfg.height,
                                        near=cfg.near, far=cfg.far)
        self.renderer = SceneRenderer(self.camera)
        self.buttons = PlanetButtonBar(state_manager.scene.planet_names,
                                       on_click=state_manager.state.click_planet)
        self.buttons.layout(cfg.width)
        self.elapsed = 0.0

    def on_enter(self) -> None:
        super().on_enter()
        self.buttons.sync(self._sm.state.mode)

    def on_exit(self) -> None:
        super().on_exit()

    def on_resize(self, width: int, height: int):
        self.camera.set_viewport(width, height)
        self.buttons.layout(width)

    def handle_input(self, events: list) -> Optional[str]:
        state = self._sm.state
        self.buttons.update(pygame.mouse.get_pos())

        for event in events:
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    pygame.event.post(pygame.event.Event(pygame.QUIT))
                elif event.key == pygame.K_SPACE:
                    state.clock.toggle_pause()
                elif event.key == pygame.K_h:
                    state.go_overview()
                    self.buttons.sync(state.mode)
                continue

            if self.buttons.handle_event(event):
                continue
            self._sm.controls.handle_event(event)

        return None

    def update(self, dt: float) -> None:
        self.elapsed = step_frame(self._sm.state, self._sm.scene, self._sm.controls,
                                  dt, self._sm.config)

    def render(self, surface: pygame.Surface) -> None:
        W, H = surface.get_width(), surface.get_height()
        state = self._sm.state

        self.renderer.render(surface, self._sm.scene, state.rig)
        self.buttons.draw(surface)

        colors = self.theme.colors
        status = f"{state.mode.label}   t = {self.elapsed:8.1f} s"
        self.theme.draw_text(surface, self.theme.fonts.small(),
                             10, self.buttons.bottom + 8, status, colors.FG_DIM)
        if state.clock.paused:
            self.theme.draw_text(surface, self.theme.fonts.title(),
                                 W // 2, self.buttons.bottom + 30,
                                 "PAUSED", colors.ACCENT_ORANGE, align='center')

        footer = pygame.Rect(0, H - FOOTER_HEIGHT, W, FOOTER_HEIGHT)
        self.draw_footer(surface, footer,
                         "[CLICK PLANET] Follow/Overview  [DRAG] Orbit  [WHEEL] Zoom  "
                         "[SPACE] Pause  [H] Overview  [F11] Fullscreen  [ESC] Quit")

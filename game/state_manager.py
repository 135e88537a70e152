"""
Viewer State Manager

Holds the explicit per-frame state of the viewer and the screen registry.
The frame step takes the state as an argument; nothing lives in module
globals.
"""

import pygame
from typing import Optional, Dict
from dataclasses import dataclass, field

from core.clock import SceneClock
from core.config import ViewerConfig
from solar_system import SolarScene, build_scene, build_solar_system, update_frame
from .camera_controller import CameraMode, CameraRig, toggle_follow, update_camera
from .orbit_controls import OrbitControls


@dataclass
class ViewerState:
    """Everything that changes from frame to frame"""
    mode: CameraMode = field(default_factory=CameraMode.overview)
    rig: CameraRig = field(default_factory=CameraRig)
    clock: SceneClock = field(default_factory=SceneClock)

    def click_planet(self, planet: str) -> CameraMode:
        """Apply a planet button click and return the new mode."""
        self.mode = toggle_follow(self.mode, planet)
        return self.mode

    def go_overview(self) -> None:
        self.mode = CameraMode.overview()


def step_frame(state: ViewerState, scene: SolarScene, controls: Optional[OrbitControls],
               dt: float, config: ViewerConfig) -> float:
    """
    Run one frame of simulation

    Args:
        state: Viewer state (mode, camera rig, clock)
        scene: Scene to animate
        controls: Mouse orbit controls, applied after the camera blend
        dt: Wall-clock seconds since last frame
        config: Viewer configuration

    Returns:
        Elapsed scene time used for this frame
    """
    was_paused = state.clock.paused
    elapsed = state.clock.step(dt)
    if not was_paused:
        update_frame(scene, elapsed, config)
    update_camera(state.rig, state.mode, scene, config)
    if controls is not None:
        controls.update(state.rig)
    return elapsed


class StateManager:
    """
    Manages viewer state and screen navigation

    Responsibilities:
    - Scene and state ownership
    - Screen registration and lifecycle
    - Navigation between screens
    """

    def __init__(self, config: Optional[ViewerConfig] = None):
        """Initialize state manager"""
        self.config = config or ViewerConfig()
        self.planets = build_solar_system()
        self.scene = build_scene(self.config, self.planets)
        self.state = ViewerState(rig=CameraRig.from_config(self.config))
        self.controls = OrbitControls(self.config)

        self.screens: Dict[str, 'BaseScreen'] = {}
        self.current_screen: Optional[str] = None

    def register_screen(self, name: str, screen: 'BaseScreen'):
        """
        Register a screen

        Args:
            name: Screen identifier
            screen: Screen instance
        """
        self.screens[name] = screen
        print(f"Registered screen: {name}")

    def switch_to(self, screen_name: str):
        """
        Switch to a screen

        Args:
            screen_name: Name of screen to switch to
        """
        if screen_name not in self.screens:
            print(f"Warning: Screen '{screen_name}' not registered!")
            return

        if self.current_screen:
            self.screens[self.current_screen].on_exit()

        self.current_screen = screen_name
        self.screens[screen_name].on_enter()

        print(f"Switched to screen: {screen_name}")

    def update(self, dt: float):
        """
        Update current screen

        Args:
            dt: Delta time in seconds
        """
        if self.current_screen:
            self.screens[self.current_screen].update(dt)

    def render(self, surface: pygame.Surface):
        """
        Render current screen

        Args:
            surface: Display surface
        """
        if self.current_screen:
            self.screens[self.current_screen].render(surface)

    def handle_input(self, events: list[pygame.event.Event]):
        """
        Handle input for current screen

        Args:
            events: List of pygame events
        """
        if not self.current_screen:
            return

        next_screen = self.screens[self.current_screen].handle_input(events)
        if next_screen:
            self.switch_to(next_screen)

    def resize(self, width: int, height: int):
        """Propagate a new window size to every screen"""
        for screen in self.screens.values():
            screen.on_resize(width, height)

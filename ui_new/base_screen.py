"""
Base Screen Class

Abstract base class for all viewer screens.
Provides common functionality and enforces screen interface.
"""

import pygame
from abc import ABC, abstractmethod
from typing import Optional
from .theme import get_theme


class BaseScreen(ABC):
    """
    Abstract base class for all screens

    Screens receive the frame's events, advance their own logic and draw
    themselves onto the display surface.
    """

    def __init__(self, screen_name: str):
        """
        Initialize base screen

        Args:
            screen_name: Unique identifier for this screen
        """
        self.screen_name = screen_name
        self.active = False
        self.theme = get_theme()

    @abstractmethod
    def on_enter(self):
        """Called when screen becomes active"""
        self.active = True

    @abstractmethod
    def on_exit(self):
        """Called when screen becomes inactive"""
        self.active = False

    def on_resize(self, width: int, height: int):
        """Called after the window changes size"""
        pass

    @abstractmethod
    def handle_input(self, events: list[pygame.event.Event]) -> Optional[str]:
        """
        Handle input events

        Args:
            events: List of pygame events for this frame

        Returns:
            Name of screen to switch to, or None to stay on current screen
        """
        pass

    @abstractmethod
    def update(self, dt: float):
        """
        Update screen logic

        Args:
            dt: Delta time in seconds since last update
        """
        pass

    @abstractmethod
    def render(self, surface: pygame.Surface):
        """
        Render screen

        Args:
            surface: Main display surface to render to
        """
        pass

    # Utility methods (available to all screens)

    def draw_footer(self, surface: pygame.Surface, rect: pygame.Rect,
                    controls: str):
        """
        Draw standard footer with controls

        Args:
            surface: Target surface
            rect: Footer rectangle
            controls: Control hints (e.g., "[ESC] Quit")
        """
        self.theme.draw_panel(surface, rect)
        self.theme.draw_text(surface, self.theme.fonts.small(),
                             rect.x + 12, rect.y + 8,
                             controls, self.theme.colors.FG_DIM)

"""
UI Components - Reusable UI Elements

- Button: Interactive button with hover/click/active states
"""

import pygame
from typing import Optional, Callable, Tuple
from dataclasses import dataclass
from .theme import get_theme


@dataclass
class ButtonState:
    """Button state"""
    hovered: bool = False
    pressed: bool = False
    active: bool = False


class Button:
    """
    Interactive button component

    Fires its callback on release inside the button. The `active` flag
    marks a latched button (e.g. the planet being followed).
    """

    def __init__(self, x: int, y: int, width: int, height: int,
                 text: str, callback: Optional[Callable] = None,
                 data: Optional[str] = None):
        """
        Initialize button

        Args:
            x, y: Position
            width, height: Size
            text: Button text
            callback: Function to call when clicked
            data: Free payload carried by the button (planet name)
        """
        self.rect = pygame.Rect(x, y, width, height)
        self.text = text
        self.callback = callback
        self.data = data
        self.state = ButtonState()
        self.theme = get_theme()

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle input event

        Args:
            event: Pygame event

        Returns:
            True if event was handled
        """
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.state.pressed = True
                return True

        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            if self.state.pressed and self.rect.collidepoint(event.pos):
                self.state.pressed = False
                if self.callback:
                    self.callback()
                return True
            self.state.pressed = False

        return False

    def update(self, mouse_pos: Tuple[int, int]):
        """Update hover state based on mouse position"""
        self.state.hovered = self.rect.collidepoint(mouse_pos)

    def set_active(self, active: bool):
        self.state.active = active

    def draw(self, surface: pygame.Surface):
        """Draw button"""
        colors = self.theme.colors
        if self.state.pressed:
            bg_color, fg_color, border_color = (
                colors.ACCENT_YELLOW, colors.BG_DARK, colors.ACCENT_YELLOW)
        elif self.state.active:
            bg_color, fg_color, border_color = (
                colors.BG_PANEL_LIGHT, colors.BUTTON_ACTIVE, colors.BUTTON_ACTIVE)
        elif self.state.hovered:
            bg_color, fg_color, border_color = (
                colors.BG_PANEL_LIGHT, colors.BUTTON_HOVER, colors.BORDER_FOCUS)
        else:
            bg_color, fg_color, border_color = (
                colors.BG_PANEL, colors.BUTTON_NORMAL, colors.BORDER_NORMAL)

        pygame.draw.rect(surface, bg_color, self.rect)
        pygame.draw.rect(surface, border_color, self.rect, 2)

        font = self.theme.fonts.small()
        self.theme.draw_text(surface, font,
                             self.rect.centerx,
                             self.rect.centery - font.get_height() // 2,
                             self.text, fg_color, align='center')


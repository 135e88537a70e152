"""
UI Theme - Retro Console Style

Defines colors, fonts, and visual style for the viewer overlay
(planet buttons, status line and footer drawn on top of the 3D scene).
"""

import pygame
from typing import Optional, Tuple
from dataclasses import dataclass


class Colors:
    """
    Color palette for the overlay

    Phosphor green text on translucent-looking dark panels, with cyan
    for hover and yellow for the planet currently followed.
    """

    # Background colors
    BG_DARK = (0, 0, 0)            # Space
    BG_PANEL = (0, 20, 15)         # Dark teal panel
    BG_PANEL_LIGHT = (0, 28, 20)   # Hovered panel

    # Foreground colors
    FG_PRIMARY = (0, 255, 120)     # Bright green (main text)
    FG_DIM = (0, 180, 80)          # Secondary text

    # Accent colors
    ACCENT_CYAN = (0, 255, 255)    # Hover
    ACCENT_YELLOW = (255, 255, 0)  # Active / pressed
    ACCENT_ORANGE = (255, 160, 0)  # Paused indicator

    # UI element colors
    BUTTON_NORMAL = FG_PRIMARY
    BUTTON_HOVER = ACCENT_CYAN
    BUTTON_ACTIVE = ACCENT_YELLOW

    BORDER_NORMAL = FG_PRIMARY
    BORDER_FOCUS = ACCENT_CYAN


@dataclass
class FontConfig:
    """Font configuration"""
    family: str = "Consolas"
    size_title: int = 22
    size_normal: int = 16
    size_small: int = 13
    bold_title: bool = True


class Fonts:
    """
    Font manager

    Loads and caches monospaced fonts; falls back to pygame's default font.
    """

    _initialized = False
    _fonts: dict = {}
    _config = FontConfig()

    @classmethod
    def initialize(cls, config: Optional[FontConfig] = None):
        """
        Initialize fonts

        Args:
            config: Font configuration (optional)
        """
        if config is not None:
            cls._config = config

        pygame.font.init()

        families = [cls._config.family, "Courier New", "Courier", "monospace"]
        for family in families:
            try:
                cls._fonts['title'] = pygame.font.SysFont(
                    family, cls._config.size_title, bold=cls._config.bold_title
                )
                cls._fonts['normal'] = pygame.font.SysFont(family, cls._config.size_normal)
                cls._fonts['small'] = pygame.font.SysFont(family, cls._config.size_small)
                cls._initialized = True
                break
            except (OSError, pygame.error):
                continue

        if not cls._initialized:
            cls._fonts['title'] = pygame.font.Font(None, cls._config.size_title)
            cls._fonts['normal'] = pygame.font.Font(None, cls._config.size_normal)
            cls._fonts['small'] = pygame.font.Font(None, cls._config.size_small)
            cls._initialized = True

    @classmethod
    def get(cls, size: str = 'normal') -> pygame.font.Font:
        """
        Get font by size name

        Args:
            size: 'title', 'normal' or 'small'
        """
        if not cls._initialized:
            cls.initialize()
        return cls._fonts.get(size, cls._fonts['normal'])

    @classmethod
    def title(cls) -> pygame.font.Font:
        return cls.get('title')

    @classmethod
    def small(cls) -> pygame.font.Font:
        return cls.get('small')


class Theme:
    """
    Complete theme configuration

    Bundles colors, fonts, and spacing into single object.
    """

    def __init__(self):
        self.colors = Colors()
        self.fonts = Fonts()

        self.border_width = 2

    def draw_panel(self, surface: pygame.Surface, rect: pygame.Rect,
                   fg_color: Optional[Tuple[int, int, int]] = None,
                   bg_color: Optional[Tuple[int, int, int]] = None):
        """
        Draw panel with border

        Args:
            surface: Target surface
            rect: Panel rectangle
            fg_color: Border color (None = use default)
            bg_color: Fill color (None = use default)
        """
        if fg_color is None:
            fg_color = self.colors.BORDER_NORMAL
        if bg_color is None:
            bg_color = self.colors.BG_PANEL

        pygame.draw.rect(surface, bg_color, rect)
        pygame.draw.rect(surface, fg_color, rect, self.border_width)

    def draw_text(self, surface: pygame.Surface, font: pygame.font.Font,
                  x: int, y: int, text: str, color: Tuple[int, int, int],
                  align: str = 'left'):
        """
        Draw text (no antialiasing)

        Args:
            align: 'left', 'center', or 'right'
        """
        rendered = font.render(text, False, color)

        if align == 'center':
            x -= rendered.get_width() // 2
        elif align == 'right':
            x -= rendered.get_width()

        surface.blit(rendered, (x, y))


# Global theme instance
_theme = None

def get_theme() -> Theme:
    """Get global theme instance"""
    global _theme
    if _theme is None:
        _theme = Theme()
        _theme.fonts.initialize()
    return _theme

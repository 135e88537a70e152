"""
Solar System Viewer - Main Application

Desktop window hosting the animated solar system:
- Window creation, fullscreen toggle and resize handling
- Main loop at a fixed frame cap
- Screen coordination through the state manager
"""

import argparse
import sys
from typing import Optional

import pygame

from core.config import TITLE, ViewerConfig
from game.state_manager import StateManager
from ui_new.theme import get_theme
from ui_new.screen_solar_system import SolarSystemScreen


class SolarSystemApp:
    """
    Main viewer application

    Manages the window, the main loop and screen coordination.
    """

    def __init__(self, config: Optional[ViewerConfig] = None):
        """Initialize window, state and screens"""
        self.config = config or ViewerConfig()

        pygame.init()

        self.fullscreen = False
        self.windowed_size = (self.config.width, self.config.height)
        self.screen = pygame.display.set_mode((self.config.width, self.config.height),
                                              pygame.RESIZABLE)
        pygame.display.set_caption(TITLE)
        self.clock = pygame.time.Clock()

        self.theme = get_theme()
        self.state_manager = StateManager(self.config)
        self.state_manager.register_screen('SOLAR_SYSTEM', SolarSystemScreen(self.state_manager))
        self.state_manager.switch_to('SOLAR_SYSTEM')

        if self.config.fullscreen:
            self.toggle_fullscreen()

        self.running = True
        print(f"\n{TITLE}")
        print("=" * 60)
        print("Initialized successfully!")
        print("=" * 60)

    def run(self):
        """Main loop"""
        print("\nStarting main loop...")
        print("Press ESC to quit\n")

        while self.running:
            dt = self.clock.tick(self.config.fps) / 1000.0

            events = pygame.event.get()
            for event in events:
                if event.type == pygame.QUIT:
                    self.running = False

                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_F11:
                        self.toggle_fullscreen()

                elif event.type == pygame.VIDEORESIZE:
                    self.handle_resize(event.w, event.h)

            self.state_manager.handle_input(events)
            self.state_manager.update(dt)

            self.screen.fill(self.theme.colors.BG_DARK)
            self.state_manager.render(self.screen)

            pygame.display.flip()

        self.quit()

    def toggle_fullscreen(self):
        """Toggle between fullscreen and windowed mode"""
        self.fullscreen = not self.fullscreen

        if self.fullscreen:
            display_info = pygame.display.Info()
            width, height = display_info.current_w, display_info.current_h
            self.screen = pygame.display.set_mode((width, height), pygame.FULLSCREEN)
            print(f"Switched to fullscreen: {width}x{height}")
        else:
            width, height = self.windowed_size
            self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
            print(f"Switched to windowed: {width}x{height}")
        self.state_manager.resize(width, height)

    def handle_resize(self, width: int, height: int):
        """Handle window resize event"""
        if not self.fullscreen:
            self.windowed_size = (width, height)
            self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
            self.state_manager.resize(width, height)
            print(f"Window resized to: {width}x{height}")

    def quit(self):
        """Cleanup and quit"""
        print("\nShutting down...")
        pygame.quit()
        sys.exit(0)


def parse_args(argv=None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Animated solar system viewer")
    ap.add_argument("--config", default=None, help="JSON file overriding viewer settings")
    ap.add_argument("--width", type=int, default=None)
    ap.add_argument("--height", type=int, default=None)
    ap.add_argument("--fps", type=int, default=None)
    ap.add_argument("--seed", type=int, default=None, help="Seed for stars and asteroid placement")
    ap.add_argument("--fullscreen", action="store_true", default=None)
    return ap.parse_args(argv)


def build_config(args: argparse.Namespace) -> ViewerConfig:
    """Defaults, then the JSON file, then command-line flags."""
    config = ViewerConfig.from_json(args.config) if args.config else ViewerConfig()
    return config.with_overrides(width=args.width, height=args.height, fps=args.fps,
                                 seed=args.seed, fullscreen=args.fullscreen)


def main(argv=None):
    """Entry point"""
    try:
        config = build_config(parse_args(argv))
    except (OSError, ValueError) as e:
        raise SystemExit(f"Invalid configuration: {e}")

    try:
        app = SolarSystemApp(config)
        app.run()
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        pygame.quit()
        sys.exit(0)
    except Exception as e:
        print(f"\n\nFATAL ERROR: {e}")
        import traceback
        traceback.print_exc()
        pygame.quit()
        sys.exit(1)


if __name__ == "__main__":
    main()

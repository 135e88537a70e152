"""
Orbit Controls

Mouse-driven orbiting around the camera's look-target, with damping:
drag rotates (azimuth/polar), wheel dollies. Pending rotation decays by the
damping factor every update, so a drag keeps gliding for a few frames.

The controls run after the camera controller in each frame and only move the
camera on the sphere around the current target.
"""

from __future__ import annotations
import math
from typing import Tuple

import pygame

from core.config import ViewerConfig
from core.vecmath import cart_to_spherical, clamp, spherical_to_cart

POLAR_EPS = 1e-3


class OrbitControls:
    """
    Orbit camera controls with damping

    Usage:
        controls = OrbitControls(config)
        # in game loop:
        controls.handle_event(event)
        controls.update(rig)
    """

    def __init__(self, config: ViewerConfig):
        self.damping = config.damping
        self.rotate_speed = config.rotate_speed
        self.zoom_step = config.zoom_step
        self.min_distance = config.min_distance
        self.max_distance = config.max_distance

        self._delta_azimuth = 0.0
        self._delta_polar = 0.0
        self._scale = 1.0
        self._dragging = False
        self._last_pos: Tuple[int, int] = (0, 0)

    @property
    def dragging(self) -> bool:
        return self._dragging

    def rotate(self, d_azimuth: float, d_polar: float):
        """Queue a rotation (radians)."""
        self._delta_azimuth += d_azimuth
        self._delta_polar += d_polar

    def dolly(self, steps: int):
        """Queue a dolly; positive steps move closer."""
        self._scale *= self.zoom_step ** steps

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle mouse input

        Returns:
            True if event was consumed
        """
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._dragging = True
            self._last_pos = event.pos
            return True

        if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            was = self._dragging
            self._dragging = False
            return was

        if event.type == pygame.MOUSEMOTION and self._dragging:
            dx = event.pos[0] - self._last_pos[0]
            dy = event.pos[1] - self._last_pos[1]
            self._last_pos = event.pos
            self.rotate(-dx * self.rotate_speed, -dy * self.rotate_speed)
            return True

        if event.type == pygame.MOUSEWHEEL:
            self.dolly(event.y)
            return True

        return False

    def update(self, rig) -> bool:
        """
        Apply pending rotation/dolly to the rig.

        Returns:
            True if the camera moved
        """
        offset = rig.position - rig.target
        radius, polar, azimuth = cart_to_spherical(offset)
        if radius == 0.0:
            return False

        has_rotation = abs(self._delta_azimuth) > 1e-7 or abs(self._delta_polar) > 1e-7
        if not has_rotation and self._scale == 1.0:
            return False

        if self.damping > 0.0:
            azimuth += self._delta_azimuth * self.damping
            polar += self._delta_polar * self.damping
        else:
            azimuth += self._delta_azimuth
            polar += self._delta_polar
        polar = clamp(polar, POLAR_EPS, math.pi - POLAR_EPS)
        radius = clamp(radius * self._scale, self.min_distance, self.max_distance)

        rig.position[:] = rig.target + spherical_to_cart(radius, polar, azimuth)

        if self.damping > 0.0:
            self._delta_azimuth *= 1.0 - self.damping
            self._delta_polar *= 1.0 - self.damping
        else:
            self._delta_azimuth = 0.0
            self._delta_polar = 0.0
        self._scale = 1.0
        return True

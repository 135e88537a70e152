"""
Perspective camera — world points to screen pixels.

Symmetric pinhole projection with a vertical field of view, matching a
standard OpenGL perspective camera: the camera looks down its -Z axis,
points closer than `near` or beyond `far` are dropped.
"""

from __future__ import annotations
import math
from typing import Tuple

import numpy as np

from core.vecmath import look_at, transform_points


class PerspectiveCamera:
    """
    Projection state for one viewport.

    Parameters
    ----------
    fov_deg : vertical field of view
    width, height : viewport size in pixels
    near, far : clip distances
    """

    def __init__(self, fov_deg: float, width: int, height: int,
                 near: float = 0.1, far: float = 8000.0):
        self.fov_deg = fov_deg
        self.near = near
        self.far = far
        self.width = width
        self.height = height
        self.view = np.eye(4)

    @property
    def aspect(self) -> float:
        return self.width / self.height

    @property
    def focal_px(self) -> float:
        """Distance (pixels) of the image plane for the vertical FOV."""
        return (self.height / 2.0) / math.tan(math.radians(self.fov_deg) / 2.0)

    def set_viewport(self, width: int, height: int):
        self.width = max(1, int(width))
        self.height = max(1, int(height))

    def look(self, eye, target):
        """Place the camera at eye looking at target (Y up)."""
        self.view = look_at(eye, target)

    def to_view(self, pts: np.ndarray) -> np.ndarray:
        return transform_points(self.view, pts)

    def project(self, pts: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Project world points.

        Args:
            pts: (N,3) world coordinates

        Returns:
            (xy, depth, visible): (N,2) pixel coords, (N,) distance along the
            view axis, (N,) bool mask of points inside near/far
        """
        v = self.to_view(pts)
        depth = -v[:, 2]
        visible = (depth > self.near) & (depth < self.far)
        safe = np.where(visible, depth, 1.0)
        f = self.focal_px
        xy = np.empty((len(v), 2))
        xy[:, 0] = self.width / 2.0 + v[:, 0] * f / safe
        xy[:, 1] = self.height / 2.0 - v[:, 1] * f / safe
        return xy, depth, visible

    def project_point(self, p) -> Tuple[float, float, float, bool]:
        xy, depth, visible = self.project(np.asarray(p, dtype=np.float64).reshape(1, 3))
        return float(xy[0, 0]), float(xy[0, 1]), float(depth[0]), bool(visible[0])

    def projected_radius(self, radius: float, depth: float) -> float:
        """Screen radius of a sphere of world radius at view depth."""
        if depth <= self.near:
            return 0.0
        return radius * self.focal_px / depth

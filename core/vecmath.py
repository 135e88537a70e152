from __future__ import annotations
import math
import numpy as np


def vec3(x: float = 0.0, y: float = 0.0, z: float = 0.0) -> np.ndarray:
    return np.array([x, y, z], dtype=np.float64)


def lerp(a: np.ndarray, b, t: float) -> np.ndarray:
    """Move a toward b by fraction t, in place. Returns a."""
    a += (np.asarray(b, dtype=np.float64) - a) * t
    return a


def clamp(x: float, lo: float, hi: float) -> float:
    return lo if x < lo else hi if x > hi else x


def normalize(v: np.ndarray) -> np.ndarray:
    n = np.linalg.norm(v)
    if n < 1e-12:
        return np.zeros_like(v)
    return v / n


def rotation_matrix(rx: float, ry: float, rz: float) -> np.ndarray:
    """3x3 rotation for euler angles applied in XYZ order (R = Rx @ Ry @ Rz)."""
    cx, sx = math.cos(rx), math.sin(rx)
    cy, sy = math.cos(ry), math.sin(ry)
    cz, sz = math.cos(rz), math.sin(rz)
    Rx = np.array([[1, 0, 0], [0, cx, -sx], [0, sx, cx]], dtype=np.float64)
    Ry = np.array([[cy, 0, sy], [0, 1, 0], [-sy, 0, cy]], dtype=np.float64)
    Rz = np.array([[cz, -sz, 0], [sz, cz, 0], [0, 0, 1]], dtype=np.float64)
    return Rx @ Ry @ Rz


def compose(position, rotation, scale: float = 1.0) -> np.ndarray:
    """4x4 local transform: translate * rotate * scale."""
    m = np.eye(4, dtype=np.float64)
    m[:3, :3] = rotation_matrix(*rotation) * scale
    m[:3, 3] = position
    return m


def transform_points(m: np.ndarray, pts: np.ndarray) -> np.ndarray:
    """Apply a 4x4 affine transform to an (N,3) array of points."""
    pts = np.asarray(pts, dtype=np.float64).reshape(-1, 3)
    return pts @ m[:3, :3].T + m[:3, 3]


def look_at(eye, target, up=(0.0, 1.0, 0.0)) -> np.ndarray:
    """
    World -> view matrix for a camera at eye looking at target.
    Camera looks down its own -Z axis (OpenGL convention).
    """
    eye = np.asarray(eye, dtype=np.float64)
    target = np.asarray(target, dtype=np.float64)
    up = np.asarray(up, dtype=np.float64)

    z = normalize(eye - target)
    if not z.any():
        z = np.array([0.0, 0.0, 1.0])
    x = np.cross(up, z)
    if np.linalg.norm(x) < 1e-9:
        # up parallel to view direction
        x = np.cross(np.array([0.0, 0.0, 1.0]), z)
    x = normalize(x)
    y = np.cross(z, x)

    m = np.eye(4, dtype=np.float64)
    m[0, :3], m[1, :3], m[2, :3] = x, y, z
    m[:3, 3] = -m[:3, :3] @ eye
    return m


def cart_to_spherical(v) -> tuple[float, float, float]:
    """(radius, polar, azimuth) with Y up; polar measured from +Y, azimuth from +Z toward +X."""
    x, y, z = (float(c) for c in v)
    r = math.sqrt(x*x + y*y + z*z)
    if r < 1e-12:
        return 0.0, 0.0, 0.0
    polar = math.acos(clamp(y / r, -1.0, 1.0))
    azimuth = math.atan2(x, z)
    return r, polar, azimuth


def spherical_to_cart(r: float, polar: float, azimuth: float) -> np.ndarray:
    s = math.sin(polar)
    return vec3(r * s * math.sin(azimuth), r * math.cos(polar), r * s * math.cos(azimuth))


def hex_to_rgb(value: int) -> tuple[int, int, int]:
    """0xRRGGBB -> (r, g, b)"""
    return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

"""
scene_renderer.py
=================
Draws a SolarScene onto a pygame surface through a PerspectiveCamera.

Draw order (painter's algorithm):
  1. Stars:        single pixels, always behind everything
  2. Orbit rings:  thin polylines at mid radius
  3. Bodies:       planets, asteroids and Saturn's ring quads sorted far → near

Shading is a cheap stand-in for a lit standard material: every sphere gets
an ambient-dimmed base disk plus a brighter disk pushed toward the point
light (the Sun). Emissive bodies are drawn at full colour.
"""
from __future__ import annotations
import math
from typing import Callable, List, Tuple

import numpy as np
import pygame

from core.vecmath import hex_to_rgb, normalize, transform_points
from solar_system.scene_graph import NodeKind, SceneNode, SolarScene, iter_world
from .perspective import PerspectiveCamera

RGB = Tuple[int, int, int]

BACKGROUND = (0, 0, 0)
MIN_DISK_PX = 1.5
ORBIT_LINE_WIDTH = 1


def _scale_rgb(rgb: RGB, k: float) -> RGB:
    return tuple(max(0, min(255, int(c * k))) for c in rgb)


def _ring_outline(radius: float, segments: int) -> np.ndarray:
    """Closed circle in the local XY plane, (segments+1, 3)."""
    theta = np.linspace(0.0, 2.0 * math.pi, segments + 1)
    return np.column_stack([np.cos(theta) * radius, np.sin(theta) * radius,
                            np.zeros_like(theta)])


def _ring_quads(inner: float, outer: float, segments: int) -> np.ndarray:
    """Annulus as quads in local XY, (segments, 4, 3)."""
    theta = np.linspace(0.0, 2.0 * math.pi, segments + 1)
    c, s = np.cos(theta), np.sin(theta)
    quads = np.empty((segments, 4, 3))
    quads[:, 0] = np.column_stack([c[:-1] * inner, s[:-1] * inner, np.zeros(segments)])
    quads[:, 1] = np.column_stack([c[:-1] * outer, s[:-1] * outer, np.zeros(segments)])
    quads[:, 2] = np.column_stack([c[1:] * outer, s[1:] * outer, np.zeros(segments)])
    quads[:, 3] = np.column_stack([c[1:] * inner, s[1:] * inner, np.zeros(segments)])
    return quads


class SceneRenderer:
    """
    Software renderer for the solar system scene.

    Geometry that never changes shape (ring outlines, ring quads) is built
    once per node and cached by node name.
    """

    def __init__(self, camera: PerspectiveCamera):
        self.camera = camera
        self._outline_cache: dict[str, np.ndarray] = {}
        self._quad_cache: dict[str, np.ndarray] = {}
        self.drawn_bodies = 0

    def render(self, surface: pygame.Surface, scene: SolarScene, rig) -> None:
        cam = self.camera
        cam.set_viewport(surface.get_width(), surface.get_height())
        cam.look(rig.position, rig.target)

        surface.fill(BACKGROUND)

        ambient = scene.ambient.intensity
        light_pos = scene.sun_light.position

        items: List[Tuple[float, Callable[[], None]]] = []
        for node, world in iter_world(scene.root):
            if node.kind == NodeKind.POINTS:
                self._draw_points(surface, node, world)
            elif node.kind == NodeKind.RING and node.line:
                self._draw_orbit(surface, node, world)
            elif node.kind == NodeKind.RING:
                items.extend(self._ring_items(surface, node, world, ambient))
            elif node.kind == NodeKind.SPHERE:
                items.extend(self._sphere_items(surface, node, world, ambient, light_pos))
            elif node.kind == NodeKind.INSTANCES:
                items.extend(self._instance_items(surface, node, world, ambient))

        items.sort(key=lambda it: it[0], reverse=True)
        for _, draw in items:
            draw()
        self.drawn_bodies = len(items)

    # ── Background ───────────────────────────────────────────────────────────

    def _draw_points(self, surface: pygame.Surface, node: SceneNode, world: np.ndarray):
        if node.points is None or len(node.points) == 0:
            return
        xy, _, visible = self.camera.project(transform_points(world, node.points))
        W, H = surface.get_width(), surface.get_height()
        xs = xy[visible, 0].astype(np.int32)
        ys = xy[visible, 1].astype(np.int32)
        inside = (xs >= 0) & (xs < W) & (ys >= 0) & (ys < H)
        if not inside.any():
            return
        px = pygame.surfarray.pixels3d(surface)
        px[xs[inside], ys[inside]] = hex_to_rgb(node.color)
        del px  # unlock surface

    def _draw_orbit(self, surface: pygame.Surface, node: SceneNode, world: np.ndarray):
        pts = self._outline_cache.get(node.name)
        if pts is None:
            pts = _ring_outline((node.inner + node.outer) / 2.0, node.segments)
            self._outline_cache[node.name] = pts
        xy, _, visible = self.camera.project(transform_points(world, pts))
        color = hex_to_rgb(node.color)
        for i in range(len(pts) - 1):
            if visible[i] and visible[i + 1]:
                pygame.draw.line(surface, color, tuple(xy[i]), tuple(xy[i + 1]), ORBIT_LINE_WIDTH)

    # ── Depth-sorted bodies ──────────────────────────────────────────────────

    def _sphere_items(self, surface, node: SceneNode, world: np.ndarray,
                      ambient: float, light_pos: np.ndarray):
        center = world[:3, 3]
        x, y, depth, visible = self.camera.project_point(center)
        if not visible:
            return []
        scale = float(np.linalg.norm(world[:3, 0]))
        r = max(MIN_DISK_PX, self.camera.projected_radius(node.radius * scale, depth))
        base = hex_to_rgb(node.color)

        if node.emissive:
            def draw():
                pygame.draw.circle(surface, base, (x, y), r)
            return [(depth, draw)]

        # Light direction in view space (z toward the camera)
        to_light = normalize(np.asarray(light_pos) - center)
        lv = self.camera.view[:3, :3] @ to_light
        facing = (1.0 + lv[2]) / 2.0           # 1 = fully lit face toward us
        lit_r = r * max(0.15, 0.85 * facing)
        lxy = np.array([lv[0], -lv[1]])
        ox, oy = (float(c) for c in (r - lit_r) * lxy)
        dark = _scale_rgb(base, ambient * 0.6)
        lit = _scale_rgb(base, min(1.0, ambient + 0.4))

        def draw():
            pygame.draw.circle(surface, dark, (x, y), r)
            if r >= 2.0:
                pygame.draw.circle(surface, lit, (x + ox, y + oy), lit_r)
        return [(depth, draw)]

    def _instance_items(self, surface, node: SceneNode, world: np.ndarray, ambient: float):
        if node.points is None or len(node.points) == 0:
            return []
        xy, depth, visible = self.camera.project(transform_points(world, node.points))
        color = _scale_rgb(hex_to_rgb(node.color), ambient + 0.2)
        items = []
        for i in np.flatnonzero(visible):
            r = max(1.0, self.camera.projected_radius(node.radius, depth[i]))
            cx, cy = float(xy[i, 0]), float(xy[i, 1])

            def draw(cx=cx, cy=cy, r=r):
                pygame.draw.circle(surface, color, (cx, cy), r)
            items.append((float(depth[i]), draw))
        return items

    def _ring_items(self, surface, node: SceneNode, world: np.ndarray, ambient: float):
        quads = self._quad_cache.get(node.name)
        if quads is None:
            quads = _ring_quads(node.inner, node.outer, node.segments)
            self._quad_cache[node.name] = quads
        n = len(quads)
        xy, depth, visible = self.camera.project(transform_points(world, quads.reshape(-1, 3)))
        xy = xy.reshape(n, 4, 2)
        depth = depth.reshape(n, 4)
        visible = visible.reshape(n, 4).all(axis=1)
        glow = 0.2 if node.emissive else 0.0
        color = _scale_rgb(hex_to_rgb(node.color), min(1.0, ambient + glow))

        items = []
        for i in np.flatnonzero(visible):
            poly = [tuple(p) for p in xy[i]]

            def draw(poly=poly):
                pygame.draw.polygon(surface, color, poly)
            items.append((float(depth[i].mean()), draw))
        return items

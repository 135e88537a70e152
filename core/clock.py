"""
SceneClock — elapsed scene time shared by the frame updater.

The clock is advanced once per frame with the wall-clock delta returned by
pygame's Clock.tick(). Elapsed time only moves forward; pausing freezes it.

Controls:
    clock.toggle_pause()
    clock.step(dt_wall_seconds)  — called every frame, returns elapsed seconds
"""

from __future__ import annotations


class SceneClock:
    """
    Monotonic scene time in seconds since start.

    Parameters
    ----------
    start : initial elapsed time (default 0.0)
    """

    def __init__(self, start: float = 0.0):
        self._elapsed = max(0.0, float(start))
        self._paused = False
        self._frames = 0

    # ── Properties ───────────────────────────────────────────────────────────

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def frames(self) -> int:
        """Frames stepped while running."""
        return self._frames

    # ── Controls ─────────────────────────────────────────────────────────────

    def toggle_pause(self):
        self._paused = not self._paused

    def reset(self):
        self._elapsed = 0.0
        self._frames = 0

    # ── Frame update ─────────────────────────────────────────────────────────

    def step(self, dt_wall: float) -> float:
        """
        Advance by dt_wall real seconds (ignored while paused or negative).
        Returns the updated elapsed time.
        """
        if not self._paused and dt_wall > 0.0:
            self._elapsed += dt_wall
            self._frames += 1
        return self._elapsed

"""Zoom and pan state driven by pointer input.

View state is independent of routing: wheel and drag events may arrive at
any time, including mid-animation, and never touch the route session.
"""

from __future__ import annotations

from typing import Optional, Tuple

from .config import Config

Point = Tuple[int, int]


class ViewState:
    """Zoom factor clamped to ``[zoom_min, zoom_max]`` plus an integer pan offset."""

    def __init__(
        self,
        *,
        zoom_min: Optional[float] = None,
        zoom_max: Optional[float] = None,
        zoom_step: Optional[float] = None,
    ) -> None:
        self.zoom_min = zoom_min if zoom_min is not None else Config.ZOOM_MIN
        self.zoom_max = zoom_max if zoom_max is not None else Config.ZOOM_MAX
        self.zoom_step = zoom_step if zoom_step is not None else Config.ZOOM_STEP
        if self.zoom_min <= 0 or self.zoom_min > self.zoom_max:
            raise ValueError(f"invalid zoom bounds [{self.zoom_min}, {self.zoom_max}]")
        self.zoom = self._clamp(1.0)
        self.pan_x = 0
        self.pan_y = 0
        self._last_point: Optional[Point] = None

    @property
    def pan(self) -> Point:
        return (self.pan_x, self.pan_y)

    @property
    def dragging(self) -> bool:
        return self._last_point is not None

    def wheel(self, delta: float) -> float:
        """Scale zoom by ``(1 + zoom_step) ** -delta``; positive delta zooms out."""
        self.zoom = self._clamp(self.zoom * (1.0 + self.zoom_step) ** (-delta))
        return self.zoom

    def drag_start(self, point: Point) -> None:
        self._last_point = (int(point[0]), int(point[1]))

    def drag_move(self, point: Point) -> Point:
        """Translate pan by the pointer delta since the last recorded point."""
        if self._last_point is None:
            # No button held
            return self.pan
        x, y = int(point[0]), int(point[1])
        self.pan_x += x - self._last_point[0]
        self.pan_y += y - self._last_point[1]
        self._last_point = (x, y)
        return self.pan

    def drag_end(self) -> None:
        self._last_point = None

    def to_screen(self, x: float, y: float) -> Tuple[float, float]:
        """Map a world coordinate to screen space (translate by pan, then scale)."""
        return (self.pan_x + x * self.zoom, self.pan_y + y * self.zoom)

    def _clamp(self, zoom: float) -> float:
        return max(self.zoom_min, min(self.zoom_max, zoom))

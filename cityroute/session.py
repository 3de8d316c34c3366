"""Route session: the active route and how far the marker has travelled along it."""

from __future__ import annotations

from typing import List, Optional, Tuple

from .network import RoutePath


class RouteSession:
    """Holds at most one ``RoutePath`` plus its playback position.

    ``start`` supersedes whatever was there; ``clear`` drops everything. Both
    bump ``generation`` so a driver that captured an older generation can tell
    the route it was animating is gone.
    """

    def __init__(self) -> None:
        self._path: Optional[RoutePath] = None
        self._index = 0
        self._progress = 0.0
        self._generation = 0

    @property
    def path(self) -> Optional[RoutePath]:
        return self._path

    @property
    def playback_index(self) -> int:
        return self._index

    @property
    def segment_progress(self) -> float:
        return self._progress

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def is_empty(self) -> bool:
        return self._path is None

    def start(self, path: RoutePath) -> None:
        self._path = path
        self._index = 0
        self._progress = 0.0
        self._generation += 1

    def clear(self) -> None:
        self._path = None
        self._index = 0
        self._progress = 0.0
        self._generation += 1

    def seek(self, index: int, progress: float) -> None:
        """Move the playback position. Used by the animation driver."""
        if self._path is None:
            raise ValueError("Cannot seek an empty route session")
        last = len(self._path) - 1
        if not 0 <= index <= last:
            raise ValueError(f"playback index {index} outside [0, {last}]")
        if not 0.0 <= progress < 1.0:
            raise ValueError(f"segment progress {progress} outside [0, 1)")
        if index == last and progress != 0.0:
            raise ValueError("segment progress must be 0 at the final node")
        self._index = index
        self._progress = progress

    def current_position(self) -> Optional[Tuple[float, float]]:
        """Interpolated marker coordinate, or ``None`` when no route is held."""
        if self._path is None:
            return None
        nodes = self._path.nodes
        a = nodes[self._index]
        if self._index >= len(nodes) - 1:
            return (float(a.x), float(a.y))
        b = nodes[self._index + 1]
        t = self._progress
        return (a.x + (b.x - a.x) * t, a.y + (b.y - a.y) * t)

    def is_complete(self) -> bool:
        return self._path is not None and self._index == len(self._path) - 1

    def traversed_segments(self) -> List[bool]:
        """One flag per route segment; segments before the playback index are traversed."""
        if self._path is None:
            return []
        return [i < self._index for i in range(len(self._path) - 1)]

"""Animation driver: moves the route marker along the active route.

State machine:

    IDLE ──start()──▶ RUNNING ──last node reached──▶ COMPLETED
      ▲                  │                               │
      └──stop()/reset()──┘◀────────────start()───────────┘

Each scheduled tick advances segment progress by a fixed step, so every road
segment takes the same number of ticks regardless of its length. The driver
owns at most one timer. ``start`` always stops the previous timer before
installing a new one, so two timers never advance the same session.
"""

from __future__ import annotations

from typing import Callable, Optional

from .config import Config
from .logging_utils import log_animation, log_error, log_success
from .scheduler import Scheduler, TimerHandle
from .schemas import DriverState, RouteSummary
from .session import RouteSession

# 25 steps of 0.04 sum to 0.9999999999999999
_PROGRESS_EPSILON = 1e-9

RedrawCallback = Callable[[], None]
CompleteCallback = Callable[[RouteSummary], None]


class AnimationDriver:
    """Timed stepper over a ``RouteSession``.

    Args:
        session: Session whose playback fields this driver advances.
        scheduler: Provides the repeating timer (manual or asyncio).
        tick_interval_s: Seconds between ticks. Defaults to ``Config``.
        segment_step: Progress added per tick, in (0, 1]. Defaults to ``Config``.
        on_redraw: Called after every tick that moved the marker.
        on_complete: Called exactly once per route with its summary.
    """

    def __init__(
        self,
        session: RouteSession,
        scheduler: Scheduler,
        *,
        tick_interval_s: Optional[float] = None,
        segment_step: Optional[float] = None,
        on_redraw: Optional[RedrawCallback] = None,
        on_complete: Optional[CompleteCallback] = None,
    ) -> None:
        self.session = session
        self.scheduler = scheduler
        self.tick_interval_s = tick_interval_s if tick_interval_s is not None else Config.tick_interval_s()
        self.segment_step = segment_step if segment_step is not None else Config.SEGMENT_STEP
        if self.tick_interval_s <= 0:
            raise ValueError("tick_interval_s must be > 0")
        if not 0.0 < self.segment_step <= 1.0:
            raise ValueError("segment_step must be in (0, 1]")
        self.on_redraw = on_redraw
        self.on_complete = on_complete

        self._state = DriverState.IDLE
        self._timer: Optional[TimerHandle] = None
        # Identity of the installed timer. Callbacks carrying another token are stale.
        self._token: Optional[object] = None
        self._generation: Optional[int] = None
        self._ticks = 0
        self._summary: Optional[RouteSummary] = None

    @property
    def state(self) -> DriverState:
        return self._state

    @property
    def ticks_elapsed(self) -> int:
        return self._ticks

    @property
    def summary(self) -> Optional[RouteSummary]:
        return self._summary

    @property
    def is_running(self) -> bool:
        return self._state is DriverState.RUNNING

    def start(self) -> None:
        """Animate the session's current route from its first node."""
        self.stop()
        path = self.session.path
        if path is None:
            raise ValueError("Cannot animate an empty route session")

        self._generation = self.session.generation
        self._ticks = 0
        self._summary = None

        # Single-node route: nothing to traverse, no timer, no zero-length segment.
        if len(path) == 1:
            self._complete()
            return

        token = object()
        self._token = token
        self._state = DriverState.RUNNING
        self._timer = self.scheduler.call_every(self.tick_interval_s, lambda: self._on_timer(token))
        log_animation(
            f"[Driver] Animating {len(path) - 1} segment(s) every {self.tick_interval_s * 1000:.0f}ms"
        )

    def stop(self) -> None:
        """Cancel the timer. Safe to call any number of times."""
        if self._timer is not None:
            self._timer.cancel()
        self._timer = None
        self._token = None
        if self._state is DriverState.RUNNING:
            self._state = DriverState.IDLE

    def reset(self) -> None:
        """Stop and forget the last run, including a completed one."""
        self.stop()
        self._state = DriverState.IDLE
        self._generation = None
        self._ticks = 0
        self._summary = None

    def tick(self) -> bool:
        """Advance one step. Returns ``False`` when there was nothing to advance."""
        if self._state is not DriverState.RUNNING:
            return False
        if self.session.generation != self._generation or self.session.path is None:
            # Session was cleared or restarted behind our back; never touch the new route.
            log_error("[Driver] Route session changed while animating; stopping stale driver")
            self.stop()
            return False

        session = self.session
        last = len(session.path) - 1
        index = session.playback_index
        progress = session.segment_progress + self.segment_step
        if progress >= 1.0 - _PROGRESS_EPSILON:
            index += 1
            progress = 0.0
        session.seek(index, progress)
        self._ticks += 1

        if Config.debug_enabled():
            log_animation(f"[Driver] tick {self._ticks}: index={index} progress={progress:.2f}")

        if index >= last:
            self._complete()
        self._redraw()
        return True

    def _on_timer(self, token: object) -> None:
        if token is not self._token:
            return
        self.tick()

    def _complete(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
        self._timer = None
        self._token = None
        self._state = DriverState.COMPLETED

        if self._summary is not None:
            return
        path = self.session.path
        self._summary = RouteSummary(
            source=path.source.name,
            destination=path.destination.name,
            route=path.names,
            total_distance=path.total_distance,
        )
        log_success(
            f"[Driver] Arrived at {path.destination.name} after {self._ticks} tick(s), "
            f"{path.total_distance} km"
        )
        if self.on_complete is not None:
            try:
                self.on_complete(self._summary)
            except Exception as exc:  # pragma: no cover - diagnostic hook
                log_error(f"[Driver] Completion listener failed: {exc}")

    def _redraw(self) -> None:
        if self.on_redraw is None:
            return
        try:
            self.on_redraw()
        except Exception as exc:  # pragma: no cover - diagnostic hook
            log_error(f"[Driver] Redraw listener failed: {exc}")

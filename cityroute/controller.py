"""
Route controller.

Owns the route session, the animation driver and the view state, and is the
single entry point for the user command surface:

1. Selection (source, destination) is validated against the network
2. A route request resets the previous route, runs the shortest-path engine,
   stores the result in the session and starts the driver
3. Pointer events update the view state
4. Each frame, ``render_frame`` assembles the render feed

Dependencies (network, scheduler) are injected; nothing here reads files.
"""

from typing import Callable, List, Optional

from .animation import AnimationDriver
from .config import Config
from .errors import NoPathError, SelectionError, UnknownNodeError
from .logging_utils import log_error, log_info, log_routing, log_success
from .network import RoadNetwork, RoutePath, iter_segments, shortest_path
from .scheduler import Scheduler
from .schemas import (
    DriverState,
    EdgeView,
    MarkerView,
    NodeHighlight,
    NodeView,
    RenderFrame,
    RouteSummary,
    SegmentView,
)
from .session import RouteSession
from .view import Point, ViewState

RouteFinder = Callable[[RoadNetwork, str, str], RoutePath]


class RouteController:
    """Coordinates routing, animation and view interaction for one map view.

    A new route request supersedes any route still animating: the old driver
    timer is cancelled and the session replaced before the new one starts.
    """

    def __init__(
        self,
        network: RoadNetwork,
        scheduler: Scheduler,
        *,
        tick_interval_s: Optional[float] = None,
        segment_step: Optional[float] = None,
        view: Optional[ViewState] = None,
        route_finder: RouteFinder = shortest_path,
        redraw_listeners: Optional[List[Callable[[], None]]] = None,
        summary_listeners: Optional[List[Callable[[RouteSummary], None]]] = None,
    ):
        """Initialize controller with its collaborators.

        Args:
            network: Read-only road network shared by every request
            scheduler: Timer source for the animation driver
            tick_interval_s: Optional override of the animation cadence
            segment_step: Optional override of progress per tick
            view: Optional pre-built view state (defaults from Config)
            route_finder: Shortest-path function; swap in
                ``shortest_path_linear`` for the heap-free variant
            redraw_listeners: Callables invoked whenever the frame changed
            summary_listeners: Callables invoked once per completed route
        """
        self.network = network
        self.session = RouteSession()
        self.view = view or ViewState()
        self.route_finder = route_finder
        self.redraw_listeners = redraw_listeners or []
        self.summary_listeners = summary_listeners or []
        self.driver = AnimationDriver(
            self.session,
            scheduler,
            tick_interval_s=tick_interval_s,
            segment_step=segment_step,
            on_redraw=self._notify_redraw,
            on_complete=self._notify_summary,
        )

        self.source: Optional[str] = None
        self.destination: Optional[str] = None
        self.summary: Optional[RouteSummary] = None
        self.last_error: Optional[Exception] = None

    @classmethod
    def from_config(cls, network: RoadNetwork, scheduler: Scheduler) -> "RouteController":
        Config.validate()
        return cls(
            network,
            scheduler,
            tick_interval_s=Config.tick_interval_s(),
            segment_step=Config.SEGMENT_STEP,
        )

    # =============================
    # User command surface
    # =============================

    def select_source(self, name: str) -> None:
        if not self.network.has_node(name):
            raise UnknownNodeError(name)
        self.source = name
        self._notify_redraw()

    def select_destination(self, name: str) -> None:
        if not self.network.has_node(name):
            raise UnknownNodeError(name)
        self.destination = name
        self._notify_redraw()

    def request_route(self) -> RoutePath:
        """Compute and animate the route between the selected cities.

        Raises:
            SelectionError: source or destination not selected
            NoPathError: destination unreachable; the session stays cleared
        """
        missing = [
            label
            for label, value in (("source", self.source), ("destination", self.destination))
            if value is None
        ]
        if missing:
            raise SelectionError(missing)

        # Supersede whatever is running before computing the new route.
        self.reset_route()

        log_routing(f"[Router] Finding shortest route {self.source} -> {self.destination}...")
        try:
            path = self.route_finder(self.network, self.source, self.destination)
        except NoPathError as exc:
            self.last_error = exc
            log_error(f"[Router] No route from {self.source} to {self.destination}")
            self._notify_redraw()
            raise

        self.last_error = None
        log_success(f"[Router] Route found: {' -> '.join(path.names)} ({path.total_distance} km)")
        self.session.start(path)
        self.driver.start()
        self._notify_redraw()
        return path

    def reset_route(self) -> None:
        """Stop the animation and drop the route. Idempotent."""
        was_active = not self.session.is_empty
        self.driver.reset()
        self.session.clear()
        self.summary = None
        if was_active:
            log_info("[Router] Route reset")
        self._notify_redraw()

    def pointer_wheel(self, delta: float) -> None:
        self.view.wheel(delta)
        self._notify_redraw()

    def pointer_drag_start(self, point: Point) -> None:
        self.view.drag_start(point)

    def pointer_drag_move(self, point: Point) -> None:
        if self.view.dragging:
            self.view.drag_move(point)
            self._notify_redraw()

    def pointer_drag_end(self) -> None:
        self.view.drag_end()

    # =============================
    # Render feed
    # =============================

    @property
    def driver_state(self) -> DriverState:
        return self.driver.state

    def render_frame(self) -> RenderFrame:
        """Snapshot of the network, the route, the marker and the view."""
        edges = []
        for edge in self.network.edges():
            a = self.network.node(edge.a)
            b = self.network.node(edge.b)
            edges.append(
                EdgeView(a=a.name, b=b.name, ax=a.x, ay=a.y, bx=b.x, by=b.y, weight=edge.weight)
            )

        segments = []
        path = self.session.path
        if path is not None:
            flags = self.session.traversed_segments()
            for (a, b), traversed in zip(iter_segments(path), flags):
                segments.append(
                    SegmentView(
                        start=a.name, end=b.name, sx=a.x, sy=a.y, ex=b.x, ey=b.y, traversed=traversed
                    )
                )

        marker = None
        position = self.session.current_position()
        if position is not None:
            marker = MarkerView(x=position[0], y=position[1])

        # Highlight the active route's endpoints; fall back to the current selection.
        if path is not None:
            source, destination = path.source.name, path.destination.name
        else:
            source, destination = self.source, self.destination

        nodes = []
        for node in self.network.nodes.values():
            if node.name == source:
                highlight = NodeHighlight.SOURCE
            elif node.name == destination:
                highlight = NodeHighlight.DESTINATION
            else:
                highlight = NodeHighlight.DEFAULT
            nodes.append(NodeView(name=node.name, x=node.x, y=node.y, highlight=highlight))

        return RenderFrame(
            edges=edges,
            segments=segments,
            marker=marker,
            nodes=nodes,
            zoom=self.view.zoom,
            pan_x=self.view.pan_x,
            pan_y=self.view.pan_y,
            driver_state=self.driver.state,
        )

    # =============================
    # Listener fan-out
    # =============================

    def _notify_redraw(self) -> None:
        for listener in self.redraw_listeners:
            try:
                listener()
            except Exception as exc:  # pragma: no cover - diagnostic hook
                log_error(f"[View] Redraw listener failed: {exc}")

    def _notify_summary(self, summary: RouteSummary) -> None:
        self.summary = summary
        for listener in self.summary_listeners:
            try:
                listener(summary)
            except Exception as exc:  # pragma: no cover - diagnostic hook
                log_error(f"[Summary] Listener failed: {exc}")

"""
cityroute - shortest-path routing over a city road network, animated.

Pick a source and destination, compute the minimum-distance route with
Dijkstra, and step a marker along it on a pannable/zoomable view.

The core has no window, widget or pixel code. Timers come from an injected
scheduler; drawing goes to any surface implementing ``DrawingSurface``.
"""

__version__ = "0.1.0"

# Main coordination
from .controller import RouteController

# Road network and routing
from .network import (
    CityNode,
    RoadEdge,
    RoadNetwork,
    RoadNetworkState,
    RoutePath,
    build_network,
    path_distance,
    shortest_path,
    shortest_path_linear,
)

# Playback
from .session import RouteSession
from .animation import AnimationDriver
from .scheduler import AsyncioScheduler, ManualScheduler, Scheduler, TimerHandle
from .view import ViewState

# Feeds and rendering
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
from .rendering import DEFAULT_PALETTE, DrawingSurface, Palette, RecordingSurface, paint_frame

# Loading and configuration
from .scenario import NetworkLoader
from .config import Config

from .errors import (
    DuplicateNodeError,
    InvalidWeightError,
    NoPathError,
    RoutingError,
    SelectionError,
    UnknownNodeError,
)

__all__ = [
    "RouteController",
    "CityNode",
    "RoadEdge",
    "RoadNetwork",
    "RoadNetworkState",
    "RoutePath",
    "build_network",
    "path_distance",
    "shortest_path",
    "shortest_path_linear",
    "RouteSession",
    "AnimationDriver",
    "AsyncioScheduler",
    "ManualScheduler",
    "Scheduler",
    "TimerHandle",
    "ViewState",
    "DriverState",
    "EdgeView",
    "MarkerView",
    "NodeHighlight",
    "NodeView",
    "RenderFrame",
    "RouteSummary",
    "SegmentView",
    "DEFAULT_PALETTE",
    "DrawingSurface",
    "Palette",
    "RecordingSurface",
    "paint_frame",
    "NetworkLoader",
    "Config",
    "DuplicateNodeError",
    "InvalidWeightError",
    "NoPathError",
    "RoutingError",
    "SelectionError",
    "UnknownNodeError",
]

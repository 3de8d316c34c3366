"""Road network store and shortest-path routing."""

from .graph import CityNode, RoadEdge, RoadNetwork
from .schemas import CityNodeState, RoadEdgeState, RoadNetworkState
from .helpers import (
    RoutePath,
    build_network,
    iter_segments,
    path_distance,
    shortest_path,
    shortest_path_linear,
)

__all__ = [
    "CityNode",
    "RoadEdge",
    "RoadNetwork",
    "CityNodeState",
    "RoadEdgeState",
    "RoadNetworkState",
    "RoutePath",
    "build_network",
    "iter_segments",
    "path_distance",
    "shortest_path",
    "shortest_path_linear",
]

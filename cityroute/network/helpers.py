"""Routing utilities for road networks."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from math import inf
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..errors import NoPathError, UnknownNodeError
from .graph import CityNode, RoadNetwork
from .schemas import RoadNetworkState


@dataclass(frozen=True)
class RoutePath:
    """Ordered walk from source to destination plus its total distance (km)."""

    nodes: Tuple[CityNode, ...]
    total_distance: int

    def __post_init__(self) -> None:
        if not self.nodes:
            raise ValueError("RoutePath requires at least one node")

    @property
    def names(self) -> List[str]:
        return [node.name for node in self.nodes]

    @property
    def source(self) -> CityNode:
        return self.nodes[0]

    @property
    def destination(self) -> CityNode:
        return self.nodes[-1]

    def __len__(self) -> int:
        return len(self.nodes)


def build_network(state: RoadNetworkState) -> RoadNetwork:
    """Turn a validated network definition into a ``RoadNetwork``.

    Errors are raised on the first bad declaration; nothing is skipped.
    """

    network = RoadNetwork()
    for node in state.nodes:
        network.add_node(node.name, node.x, node.y)
    for edge in state.edges:
        network.connect(edge.a, edge.b, edge.weight)
    return network


def shortest_path(network: RoadNetwork, source: str, destination: str) -> RoutePath:
    """Return the minimum-distance route from ``source`` to ``destination``.

    Dijkstra over non-negative distances with a binary heap. Raises
    ``UnknownNodeError`` for names outside the network and ``NoPathError``
    when the destination is unreachable.
    """

    _require_nodes(network, source, destination)

    # Trivial case: already at destination.
    if source == destination:
        return RoutePath(nodes=(network.node(source),), total_distance=0)

    dist: Dict[str, float] = {name: inf for name in network.nodes}
    dist[source] = 0
    prev: Dict[str, str] = {}
    # Heap entries are (distance, insertion counter, name). The counter keeps
    # ordering total without comparing names.
    counter = 0
    heap: List[Tuple[float, int, str]] = [(0, counter, source)]

    while heap:
        d, _, u = heapq.heappop(heap)
        # A node is reinserted every time its distance improves; older entries are stale.
        if d > dist[u]:
            continue
        for v, weight in network.adjacency[u]:
            candidate = d + weight
            if candidate < dist[v]:
                dist[v] = candidate
                prev[v] = u
                counter += 1
                heapq.heappush(heap, (candidate, counter, v))

    return _reconstruct(network, source, destination, dist, prev)


def shortest_path_linear(network: RoadNetwork, source: str, destination: str) -> RoutePath:
    """Dijkstra with a linear scan for the next node instead of a heap.

    O(V^2), kept for small networks and as a cross-check of ``shortest_path``;
    distances are identical, the chosen route may differ on ties.
    """

    _require_nodes(network, source, destination)
    if source == destination:
        return RoutePath(nodes=(network.node(source),), total_distance=0)

    dist: Dict[str, float] = {name: inf for name in network.nodes}
    dist[source] = 0
    prev: Dict[str, str] = {}
    unvisited = set(network.nodes)

    while unvisited:
        u = min(unvisited, key=lambda name: dist[name])
        if dist[u] == inf:
            # Everything left is disconnected from the source
            break
        unvisited.discard(u)
        for v, weight in network.adjacency[u]:
            candidate = dist[u] + weight
            if candidate < dist[v]:
                dist[v] = candidate
                prev[v] = u

    return _reconstruct(network, source, destination, dist, prev)


def path_distance(network: RoadNetwork, names: Sequence[str]) -> int:
    """Sum road distances along ``names``.

    Consecutive cities must be directly connected; parallel roads count with
    their shortest distance. Raises ``NoPathError`` on a missing road.
    """

    if not names:
        raise ValueError("path_distance requires at least one city")
    _require_nodes(network, *names)
    total = 0
    for a, b in zip(names, names[1:]):
        weight = network.edge_weight(a, b)
        if weight is None:
            raise NoPathError(a, b)
        total += weight
    return total


def _require_nodes(network: RoadNetwork, *names: str) -> None:
    for name in names:
        if not network.has_node(name):
            raise UnknownNodeError(name)


def _reconstruct(
    network: RoadNetwork,
    source: str,
    destination: str,
    dist: Dict[str, float],
    prev: Dict[str, str],
) -> RoutePath:
    if dist[destination] == inf:
        raise NoPathError(source, destination)

    names: List[str] = []
    at: Optional[str] = destination
    while at is not None:
        names.append(at)
        at = prev.get(at)
    names.reverse()

    return RoutePath(
        nodes=tuple(network.node(name) for name in names),
        total_distance=int(dist[destination]),
    )


def iter_segments(path: RoutePath) -> Iterable[Tuple[CityNode, CityNode]]:
    """Yield consecutive (from, to) node pairs along ``path``."""
    return zip(path.nodes, path.nodes[1:])

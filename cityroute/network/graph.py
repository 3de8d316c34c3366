"""Road network store.

Cities live in an arena keyed by name. Adjacency lists hold neighbor names
and distances rather than node objects, so nodes never reference each other.
The network is built once at startup and only read afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from ..errors import DuplicateNodeError, InvalidWeightError, UnknownNodeError


@dataclass(frozen=True)
class CityNode:
    """A named city with fixed planar layout coordinates."""

    name: str
    x: int
    y: int

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)


@dataclass(frozen=True)
class RoadEdge:
    """Undirected road between two cities, distance in km."""

    a: str
    b: str
    weight: int


@dataclass
class RoadNetwork:
    """Symmetric weighted graph of cities.

    Every ``connect`` inserts the road in both directions with the same
    distance, so ``neighbors`` is always consistent from either endpoint.
    """

    nodes: Dict[str, CityNode] = field(default_factory=dict)
    adjacency: Dict[str, List[Tuple[str, int]]] = field(default_factory=dict)
    # Undirected roads in declaration order, one entry per connect() call.
    _edges: List[RoadEdge] = field(default_factory=list, repr=False)

    def add_node(self, name: str, x: int, y: int) -> CityNode:
        if name in self.nodes:
            raise DuplicateNodeError(name)
        node = CityNode(name=name, x=int(x), y=int(y))
        self.nodes[name] = node
        self.adjacency[name] = []
        return node

    def connect(self, a: str, b: str, weight: int) -> RoadEdge:
        for name in (a, b):
            if name not in self.nodes:
                raise UnknownNodeError(name)
        # bool is an int subclass; True is not a distance
        if isinstance(weight, bool) or not isinstance(weight, int) or weight <= 0:
            raise InvalidWeightError(a, b, weight)
        self.adjacency[a].append((b, weight))
        self.adjacency[b].append((a, weight))
        edge = RoadEdge(a=a, b=b, weight=weight)
        self._edges.append(edge)
        return edge

    def neighbors(self, name: str) -> List[Tuple[str, int]]:
        if name not in self.adjacency:
            raise UnknownNodeError(name)
        return list(self.adjacency[name])

    def has_node(self, name: str) -> bool:
        return name in self.nodes

    def node(self, name: str) -> CityNode:
        node = self.nodes.get(name)
        if node is None:
            raise UnknownNodeError(name)
        return node

    def node_names(self) -> List[str]:
        return list(self.nodes)

    def edges(self) -> Iterator[RoadEdge]:
        return iter(self._edges)

    def edge_weight(self, a: str, b: str) -> Optional[int]:
        """Shortest direct road between ``a`` and ``b``, or ``None`` if not adjacent."""
        weights = [weight for neighbor, weight in self.neighbors(a) if neighbor == b]
        return min(weights) if weights else None

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, name: object) -> bool:
        return name in self.nodes

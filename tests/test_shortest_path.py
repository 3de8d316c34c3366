"""Tests for the shortest-path engine."""

import random
from typing import Dict, List, Optional

import pytest

from cityroute.errors import NoPathError, UnknownNodeError
from cityroute.network import (
    RoadNetwork,
    path_distance,
    shortest_path,
    shortest_path_linear,
)
from cityroute.scenario import NetworkLoader


def make_triangle() -> RoadNetwork:
    network = RoadNetwork()
    network.add_node("A", 0, 0)
    network.add_node("B", 10, 0)
    network.add_node("C", 20, 0)
    network.connect("A", "B", 5)
    network.connect("B", "C", 5)
    network.connect("A", "C", 20)
    return network


def random_network(seed: int, size: int = 7, edge_chance: float = 0.4) -> RoadNetwork:
    rng = random.Random(seed)
    network = RoadNetwork()
    names = [f"n{i}" for i in range(size)]
    for i, name in enumerate(names):
        network.add_node(name, i * 10, rng.randint(0, 100))
    for i, a in enumerate(names):
        for b in names[i + 1:]:
            if rng.random() < edge_chance:
                network.connect(a, b, rng.randint(1, 30))
    return network


def brute_force_distance(network: RoadNetwork, source: str, destination: str) -> Optional[int]:
    """Minimum over every simple path; fine for a handful of nodes."""
    best: Optional[int] = None

    def walk(node: str, seen: List[str], total: int) -> None:
        nonlocal best
        if node == destination:
            best = total if best is None else min(best, total)
            return
        for neighbor, weight in network.neighbors(node):
            if neighbor not in seen:
                walk(neighbor, seen + [neighbor], total + weight)

    walk(source, [source], 0)
    return best


def test_prefers_two_short_roads_over_one_long_road():
    path = shortest_path(make_triangle(), "A", "C")
    assert path.names == ["A", "B", "C"]
    assert path.total_distance == 10


def test_same_source_and_destination_is_single_node():
    network = make_triangle()
    for name in network.node_names():
        path = shortest_path(network, name, name)
        assert path.names == [name]
        assert path.total_distance == 0


def test_disconnected_destination_raises_no_path():
    network = make_triangle()
    network.add_node("island", 99, 99)
    network.add_node("island2", 120, 99)
    network.connect("island", "island2", 4)

    with pytest.raises(NoPathError) as excinfo:
        shortest_path(network, "A", "island2")
    assert excinfo.value.source == "A"
    assert excinfo.value.destination == "island2"

    with pytest.raises(NoPathError):
        shortest_path_linear(network, "A", "island2")


def test_unknown_endpoints_raise():
    network = make_triangle()
    with pytest.raises(UnknownNodeError):
        shortest_path(network, "A", "nowhere")
    with pytest.raises(UnknownNodeError):
        shortest_path(network, "nowhere", "A")


def test_path_is_source_to_destination_and_adjacent():
    path = shortest_path(make_triangle(), "C", "A")
    assert path.source.name == "C"
    assert path.destination.name == "A"
    assert path.names == ["C", "B", "A"]


@pytest.mark.parametrize("seed", range(12))
def test_random_networks_are_optimal(seed):
    network = random_network(seed)
    names = network.node_names()
    for source in names:
        for destination in names:
            expected = brute_force_distance(network, source, destination)
            if expected is None:
                with pytest.raises(NoPathError):
                    shortest_path(network, source, destination)
                continue

            path = shortest_path(network, source, destination)
            # Reported distance matches the walk it returns
            assert path_distance(network, path.names) == path.total_distance
            # And no other walk is shorter
            assert path.total_distance == expected
            # Heap-free variant agrees on distance (ties may pick another walk)
            assert shortest_path_linear(network, source, destination).total_distance == expected


def test_path_distance_rejects_non_adjacent_steps():
    network = make_triangle()
    network.add_node("D", 30, 0)
    with pytest.raises(NoPathError):
        path_distance(network, ["A", "D"])
    assert path_distance(network, ["A"]) == 0
    assert path_distance(network, ["A", "B", "C"]) == 10


def test_gujarat_reference_routes():
    network = NetworkLoader().load("gujarat")

    direct = shortest_path(network, "Ahmedabad", "Vadodara")
    assert direct.names == ["Ahmedabad", "Vadodara"]
    assert direct.total_distance == 100

    patan = shortest_path(network, "Ahmedabad", "Patan")
    assert patan.names == ["Ahmedabad", "Kalol", "Mahesana", "Unjha", "Patan"]
    assert patan.total_distance == 115

    # Two equally short walks exist; only the distance is fixed.
    dhanera = shortest_path(network, "Ahmedabad", "Dhanera")
    assert dhanera.total_distance == 185
    assert path_distance(network, dhanera.names) == 185


def test_distances_symmetric_on_reference_network():
    network = NetworkLoader().load("gujarat")
    names: List[str] = network.node_names()
    forward: Dict[tuple, int] = {}
    for a in names:
        for b in names:
            forward[(a, b)] = shortest_path(network, a, b).total_distance
    for a in names:
        for b in names:
            assert forward[(a, b)] == forward[(b, a)]

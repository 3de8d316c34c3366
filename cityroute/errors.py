"""Error kinds raised by the road network, the routing engine and the controller.

Graph construction errors (unknown node, duplicate node, invalid weight) are
fatal while a network is being built. ``NoPathError`` is recoverable: the
controller leaves the route session cleared and re-raises it to the caller.
"""

from __future__ import annotations

from typing import Iterable


class RoutingError(Exception):
    """Base class for every error raised by cityroute."""


class UnknownNodeError(RoutingError, KeyError):
    """Raised when a city name is not present in the road network."""

    def __init__(self, name: str) -> None:
        self.name = name
        message = (
            f"Unknown city '{name}'.\n\n"
            "Remediation tips:\n"
            "  - Check the spelling against the network's node names\n"
            "  - Make sure the city is declared in the nodes block before edges reference it"
        )
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class DuplicateNodeError(RoutingError, ValueError):
    """Raised when a city name is added to the network twice."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"City '{name}' already exists in the road network.")


class InvalidWeightError(RoutingError, ValueError):
    """Raised when a road is declared with a non-positive distance."""

    def __init__(self, a: str, b: str, weight: object) -> None:
        self.a = a
        self.b = b
        self.weight = weight
        super().__init__(
            f"Road {a} - {b} has invalid distance {weight!r}; distances must be positive integers (km)."
        )


class NoPathError(RoutingError):
    """Raised when the destination cannot be reached from the source."""

    def __init__(self, source: str, destination: str) -> None:
        self.source = source
        self.destination = destination
        message = (
            f"No route from '{source}' to '{destination}'.\n\n"
            "The destination lies in a part of the network that is not connected "
            "to the source. Pick another pair of cities."
        )
        super().__init__(message)


class SelectionError(RoutingError):
    """Raised when a route is requested before source and destination are chosen."""

    def __init__(self, missing: Iterable[str]) -> None:
        self.missing = tuple(missing)
        super().__init__(
            "Cannot request a route: no " + " or ".join(self.missing) + " selected."
        )

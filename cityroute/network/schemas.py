"""Pydantic schemas for road network definitions.

These models mirror the dataclasses in ``graph.py`` but describe the JSON
input a network file provides. Validation here covers shape and types; graph
invariants (unique names, known endpoints, positive distances) are enforced
when the definition is turned into a ``RoadNetwork``.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class CityNodeState(BaseModel):
    """A city declaration: unique name plus layout coordinates."""

    name: str = Field(..., min_length=1)
    x: int
    y: int


class RoadEdgeState(BaseModel):
    """A road declaration between two named cities."""

    a: str
    b: str
    weight: int = Field(..., description="Distance in km; must be positive")


class RoadNetworkState(BaseModel):
    """Complete network definition as loaded from disk."""

    name: str = ""
    description: str = ""
    nodes: List[CityNodeState] = Field(
        default_factory=list,
        description="Cities in declaration order",
    )
    edges: List[RoadEdgeState] = Field(
        default_factory=list,
        description="Undirected roads in declaration order",
    )

"""
Pydantic schemas for the render feed and the route summary.

The controller produces one ``RenderFrame`` per frame; a rendering
collaborator consumes it without reaching into the session, the driver or
the view state. ``RouteSummary`` is published once per completed route.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


ROUTE_SEPARATOR = " → "


class DriverState(str, Enum):
    """Animation driver lifecycle."""

    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"


class NodeHighlight(str, Enum):
    SOURCE = "source"
    DESTINATION = "destination"
    DEFAULT = "default"


class RouteSummary(BaseModel):
    """Structured record of a finished route for textual display."""

    source: str
    destination: str
    route: List[str] = Field(..., description="City names from source to destination")
    total_distance: int = Field(..., description="Sum of road distances in km")

    def format_text(self) -> str:
        """Four-line info block shown once the marker arrives."""
        lines = [
            f"Source         : {self.source}",
            f"Destination    : {self.destination}",
            f"Route          : {ROUTE_SEPARATOR.join(self.route)}",
            f"Total Distance : {self.total_distance} km",
        ]
        return "\n".join(lines)


class EdgeView(BaseModel):
    """A road as drawn on the static map layer."""

    a: str
    b: str
    ax: int
    ay: int
    bx: int
    by: int
    weight: int


class SegmentView(BaseModel):
    """One leg of the active route; legs before the playback index are traversed."""

    start: str
    end: str
    sx: int
    sy: int
    ex: int
    ey: int
    traversed: bool


class NodeView(BaseModel):
    name: str
    x: int
    y: int
    highlight: NodeHighlight = NodeHighlight.DEFAULT


class MarkerView(BaseModel):
    x: float
    y: float


class RenderFrame(BaseModel):
    """Everything a renderer needs to draw one frame."""

    edges: List[EdgeView] = Field(default_factory=list)
    segments: List[SegmentView] = Field(default_factory=list)
    marker: Optional[MarkerView] = None
    nodes: List[NodeView] = Field(default_factory=list)
    zoom: float = 1.0
    pan_x: int = 0
    pan_y: int = 0
    driver_state: DriverState = DriverState.IDLE

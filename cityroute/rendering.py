"""Turn a ``RenderFrame`` into drawing commands.

Real pixel drawing belongs to whatever toolkit hosts the map. This module
only needs a surface that understands a handful of primitives, and issues
them in painter's order: roads, the route, the marker, then the cities on
top.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Protocol, Tuple

from .schemas import NodeHighlight, RenderFrame

RGB = Tuple[int, int, int]

NODE_RADIUS = 15
MARKER_RADIUS = 7
ROUTE_STROKE = 3
EDGE_LABEL_OFFSET = (6, -6)
NODE_LABEL_OFFSET = (-22, 28)


class DrawingSurface(Protocol):
    def translate(self, dx: float, dy: float) -> None: ...

    def scale(self, sx: float, sy: float) -> None: ...

    def set_color(self, color: RGB) -> None: ...

    def set_stroke(self, width: float) -> None: ...

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None: ...

    def draw_text(self, text: str, x: float, y: float) -> None: ...

    def fill_oval(self, x: float, y: float, width: float, height: float) -> None: ...


@dataclass(frozen=True)
class Palette:
    edge: RGB = (128, 128, 128)
    label: RGB = (255, 255, 255)
    traversed: RGB = (255, 255, 0)
    pending: RGB = (255, 0, 0)
    marker: RGB = (255, 200, 0)
    source: RGB = (0, 255, 0)
    destination: RGB = (0, 255, 255)
    node: RGB = (192, 192, 192)


DEFAULT_PALETTE = Palette()


class RecordingSurface:
    """Surface that stores every command as a tuple ``(name, *args)``."""

    def __init__(self) -> None:
        self.commands: List[Tuple[Any, ...]] = []

    def translate(self, dx: float, dy: float) -> None:
        self.commands.append(("translate", dx, dy))

    def scale(self, sx: float, sy: float) -> None:
        self.commands.append(("scale", sx, sy))

    def set_color(self, color: RGB) -> None:
        self.commands.append(("set_color", color))

    def set_stroke(self, width: float) -> None:
        self.commands.append(("set_stroke", width))

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self.commands.append(("draw_line", x1, y1, x2, y2))

    def draw_text(self, text: str, x: float, y: float) -> None:
        self.commands.append(("draw_text", text, x, y))

    def fill_oval(self, x: float, y: float, width: float, height: float) -> None:
        self.commands.append(("fill_oval", x, y, width, height))

    def named(self, name: str) -> List[Tuple[Any, ...]]:
        return [command for command in self.commands if command[0] == name]


def paint_frame(surface: DrawingSurface, frame: RenderFrame, palette: Palette = DEFAULT_PALETTE) -> None:
    """Issue the drawing commands for one frame onto ``surface``."""

    surface.translate(frame.pan_x, frame.pan_y)
    surface.scale(frame.zoom, frame.zoom)

    # Roads with their distance label at the midpoint
    surface.set_stroke(1)
    for edge in frame.edges:
        surface.set_color(palette.edge)
        surface.draw_line(edge.ax, edge.ay, edge.bx, edge.by)
        mx = (edge.ax + edge.bx) // 2
        my = (edge.ay + edge.by) // 2
        surface.set_color(palette.label)
        surface.draw_text(f"{edge.weight} km", mx + EDGE_LABEL_OFFSET[0], my + EDGE_LABEL_OFFSET[1])

    surface.set_stroke(ROUTE_STROKE)
    for segment in frame.segments:
        surface.set_color(palette.traversed if segment.traversed else palette.pending)
        surface.draw_line(segment.sx, segment.sy, segment.ex, segment.ey)

    if frame.marker is not None:
        surface.set_color(palette.marker)
        surface.fill_oval(
            frame.marker.x - MARKER_RADIUS,
            frame.marker.y - MARKER_RADIUS,
            2 * MARKER_RADIUS,
            2 * MARKER_RADIUS,
        )

    for node in frame.nodes:
        if node.highlight is NodeHighlight.SOURCE:
            surface.set_color(palette.source)
        elif node.highlight is NodeHighlight.DESTINATION:
            surface.set_color(palette.destination)
        else:
            surface.set_color(palette.node)
        surface.fill_oval(node.x - NODE_RADIUS, node.y - NODE_RADIUS, 2 * NODE_RADIUS, 2 * NODE_RADIUS)
        surface.set_color(palette.label)
        surface.draw_text(node.name, node.x + NODE_LABEL_OFFSET[0], node.y + NODE_LABEL_OFFSET[1])

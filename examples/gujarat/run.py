"""
Gujarat Route Demo
==================

WHAT THIS SHOWS:
- Loading the fixed road network from examples/networks/gujarat.json
- Computing the shortest route between two cities (Dijkstra)
- Animating the marker on the asyncio scheduler at the configured cadence
- Painting frames onto a recording surface and printing the route summary

RUN:
    uv run python -m examples.gujarat.run --source Ahmedabad --destination Dhanera
    uv run python -m examples.gujarat.run --list
"""

import argparse
import asyncio

from cityroute import (
    AsyncioScheduler,
    Config,
    NetworkLoader,
    NoPathError,
    RecordingSurface,
    RouteController,
    RouteSummary,
    paint_frame,
)
from cityroute.logging_utils import colored, Color


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Shortest route animation over a city network")
    parser.add_argument("--network", default=Config.DEFAULT_NETWORK, help="Network file name (without .json)")
    parser.add_argument("--source", default="Ahmedabad", help="Source city")
    parser.add_argument("--destination", default="Dhanera", help="Destination city")
    parser.add_argument("--list", action="store_true", help="List the cities in the network and exit")
    parser.add_argument(
        "--frames-every",
        type=int,
        default=25,
        help="Print the marker position every N redraws (0 disables)",
    )
    return parser.parse_args()


async def run_route(args: argparse.Namespace) -> RouteSummary | None:
    network = NetworkLoader().load(args.network)

    if args.list:
        for name in network.node_names():
            node = network.node(name)
            print(f"  {name:<12} ({node.x}, {node.y})")
        return None

    print(Config.display())
    print()

    done = asyncio.Event()
    redraws = 0

    def on_summary(summary: RouteSummary) -> None:
        done.set()

    controller = RouteController.from_config(network, AsyncioScheduler())
    controller.summary_listeners.append(on_summary)

    def on_redraw() -> None:
        nonlocal redraws
        redraws += 1
        if args.frames_every and redraws % args.frames_every == 0:
            frame = controller.render_frame()
            surface = RecordingSurface()
            paint_frame(surface, frame)
            traversed = sum(1 for segment in frame.segments if segment.traversed)
            if frame.marker is not None:
                print(
                    f"  frame {redraws:>4}: marker=({frame.marker.x:.0f}, {frame.marker.y:.0f}) "
                    f"segments {traversed}/{len(frame.segments)} "
                    f"draw commands={len(surface.commands)}"
                )

    controller.redraw_listeners.append(on_redraw)

    controller.select_source(args.source)
    controller.select_destination(args.destination)
    try:
        controller.request_route()
    except NoPathError as exc:
        print(colored(str(exc), Color.RED))
        return None

    await done.wait()
    return controller.summary


def main() -> None:
    args = parse_args()
    summary = asyncio.run(run_route(args))
    if summary is not None:
        print()
        print(colored(summary.format_text(), Color.GREEN, bold=True))


if __name__ == "__main__":
    main()

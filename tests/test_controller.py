"""Tests for the route controller (user command surface and render feed)."""

import contextlib
import io

import pytest

from cityroute.controller import RouteController
from cityroute.errors import NoPathError, SelectionError, UnknownNodeError
from cityroute.network import RoadNetwork, shortest_path_linear
from cityroute.scheduler import ManualScheduler
from cityroute.schemas import DriverState, NodeHighlight, RouteSummary


def make_network() -> RoadNetwork:
    network = RoadNetwork()
    for i, name in enumerate(["A", "B", "C", "D", "E"]):
        network.add_node(name, i * 100, 0)
    for a, b in [("A", "B"), ("B", "C"), ("C", "D"), ("D", "E")]:
        network.connect(a, b, 10)
    network.connect("A", "E", 100)
    network.add_node("island", 0, 300)
    return network


def make_controller(step: float = 0.5):
    scheduler = ManualScheduler()
    summaries: list[RouteSummary] = []
    controller = RouteController(
        make_network(),
        scheduler,
        tick_interval_s=0.03,
        segment_step=step,
        summary_listeners=[summaries.append],
    )
    return controller, scheduler, summaries


def test_route_request_animates_to_summary():
    controller, scheduler, summaries = make_controller()
    controller.select_source("A")
    controller.select_destination("D")

    path = controller.request_route()
    assert path.names == ["A", "B", "C", "D"]
    assert controller.driver_state is DriverState.RUNNING

    scheduler.run_until_idle()
    assert controller.driver_state is DriverState.COMPLETED
    assert controller.summary is not None
    assert controller.summary.route == ["A", "B", "C", "D"]
    assert controller.summary.total_distance == 30
    assert summaries == [controller.summary]


def test_selection_of_unknown_city_raises():
    controller, _, _ = make_controller()
    with pytest.raises(UnknownNodeError):
        controller.select_source("Z")
    with pytest.raises(UnknownNodeError):
        controller.select_destination("Z")
    assert controller.source is None and controller.destination is None


def test_request_without_selection_raises():
    controller, _, _ = make_controller()
    controller.select_source("A")
    with pytest.raises(SelectionError) as excinfo:
        controller.request_route()
    assert excinfo.value.missing == ("destination",)


def test_unreachable_destination_leaves_session_cleared():
    controller, scheduler, summaries = make_controller()
    controller.select_source("A")
    controller.select_destination("C")
    controller.request_route()
    scheduler.advance(2)

    controller.select_destination("island")
    buf = io.StringIO()
    with contextlib.redirect_stdout(buf):
        with pytest.raises(NoPathError):
            controller.request_route()

    assert "No route from A to island" in buf.getvalue()
    assert controller.session.is_empty
    assert controller.driver_state is DriverState.IDLE
    assert isinstance(controller.last_error, NoPathError)
    assert scheduler.active_timers == []

    scheduler.advance(10)
    assert summaries == []
    assert controller.render_frame().marker is None


def test_same_source_and_destination_completes_immediately():
    controller, scheduler, summaries = make_controller()
    controller.select_source("B")
    controller.select_destination("B")
    controller.request_route()

    assert controller.driver_state is DriverState.COMPLETED
    assert controller.driver.ticks_elapsed == 0
    assert scheduler.active_timers == []
    assert [s.route for s in summaries] == [["B"]]


def test_new_request_supersedes_route_in_progress():
    controller, scheduler, summaries = make_controller(step=0.5)
    controller.select_source("A")
    controller.select_destination("E")
    first = controller.request_route()
    assert len(first) == 5

    # Two full segments in: playback index 2 of 5
    scheduler.advance(4)
    assert controller.session.playback_index == 2

    controller.select_source("E")
    controller.select_destination("C")
    controller.request_route()
    assert controller.session.playback_index == 0
    assert controller.session.segment_progress == 0.0
    assert len(scheduler.active_timers) == 1

    scheduler.run_until_idle()
    assert controller.session.path.names == ["E", "D", "C"]
    assert [s.destination for s in summaries] == ["C"]


def test_reset_route_is_idempotent_and_stops_driver():
    controller, scheduler, summaries = make_controller()
    controller.select_source("A")
    controller.select_destination("C")
    controller.request_route()
    scheduler.advance()

    controller.reset_route()
    controller.reset_route()

    assert controller.session.is_empty
    assert controller.summary is None
    assert controller.driver_state is DriverState.IDLE
    assert scheduler.active_timers == []
    scheduler.advance(10)
    assert summaries == []


def test_reset_after_completion_clears_summary():
    controller, scheduler, _ = make_controller()
    controller.select_source("A")
    controller.select_destination("B")
    controller.request_route()
    scheduler.run_until_idle()
    assert controller.summary is not None

    controller.reset_route()
    assert controller.summary is None
    assert controller.driver_state is DriverState.IDLE


def test_pointer_input_mid_animation_leaves_route_alone():
    controller, scheduler, _ = make_controller(step=0.25)
    controller.select_source("A")
    controller.select_destination("C")
    controller.request_route()
    scheduler.advance(3)
    before = (controller.session.playback_index, controller.session.segment_progress)

    controller.pointer_wheel(-2)
    controller.pointer_drag_start((0, 0))
    controller.pointer_drag_move((25, 40))
    controller.pointer_drag_end()

    assert (controller.session.playback_index, controller.session.segment_progress) == before
    assert controller.view.pan == (25, 40)
    assert controller.view.zoom > 1.0

    # View survives a reset
    controller.reset_route()
    assert controller.view.pan == (25, 40)


def test_render_frame_contents():
    controller, scheduler, _ = make_controller(step=0.5)
    frame = controller.render_frame()
    assert len(frame.edges) == 5
    assert frame.segments == []
    assert frame.marker is None
    assert all(node.highlight is NodeHighlight.DEFAULT for node in frame.nodes)

    controller.select_source("A")
    controller.select_destination("C")
    controller.request_route()
    scheduler.advance(3)

    frame = controller.render_frame()
    assert [(s.start, s.end, s.traversed) for s in frame.segments] == [
        ("A", "B", True),
        ("B", "C", False),
    ]
    assert (frame.marker.x, frame.marker.y) == (150.0, 0.0)
    highlights = {node.name: node.highlight for node in frame.nodes}
    assert highlights["A"] is NodeHighlight.SOURCE
    assert highlights["C"] is NodeHighlight.DESTINATION
    assert highlights["B"] is NodeHighlight.DEFAULT
    assert frame.driver_state is DriverState.RUNNING
    assert frame.zoom == 1.0


def test_highlight_follows_selection_without_route():
    controller, _, _ = make_controller()
    controller.select_source("D")
    frame = controller.render_frame()
    highlights = {node.name: node.highlight for node in frame.nodes}
    assert highlights["D"] is NodeHighlight.SOURCE


def test_redraw_listeners_fire_on_ticks():
    controller, scheduler, _ = make_controller(step=0.5)
    redraws = []
    controller.redraw_listeners.append(lambda: redraws.append(1))
    controller.select_source("A")
    controller.select_destination("B")
    controller.request_route()
    count_after_request = len(redraws)

    scheduler.run_until_idle()
    assert len(redraws) == count_after_request + 2


def test_linear_route_finder_can_be_injected():
    controller = RouteController(
        make_network(),
        ManualScheduler(),
        tick_interval_s=0.03,
        segment_step=0.5,
        route_finder=shortest_path_linear,
    )
    controller.select_source("A")
    controller.select_destination("E")
    assert controller.request_route().total_distance == 40

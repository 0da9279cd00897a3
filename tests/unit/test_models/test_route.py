"""
Unit tests for route and journey models.
"""

from railpath.core.models.journey import JourneyMode, JourneyResult, RailSegment, WalkSegment
from railpath.core.models.route import PathResult, PathStep, Route, RouteSegment
from railpath.core.models.station import Coordinate

ORIGIN = Coordinate(0, 0, 0)


def segment(line_id, *stations):
    return RouteSegment(line_id, tuple(stations), ORIGIN, ORIGIN)


class TestPathResult:
    """Test PathResult model."""

    def test_not_found_is_empty(self):
        result = PathResult.not_found()

        assert not result.found
        assert result.path == ()
        assert result.transfers == 0
        assert result.total_distance == 0.0
        assert result.lines == frozenset()

    def test_line_order_and_names(self):
        result = PathResult(
            found=True,
            path=(
                PathStep("A", "L1", ORIGIN),
                PathStep("B", "L1", ORIGIN),
                PathStep("B", "L2", ORIGIN),
                PathStep("C", "L2", ORIGIN),
            ),
            transfers=1,
            total_distance=20.0,
            lines=frozenset({"L1", "L2"}),
        )

        assert result.line_order == ["L1", "L2"]
        assert result.station_names == ["A", "B", "B", "C"]
        assert result.to_dict()["lines"] == ["L1", "L2"]


class TestRoute:
    """Test Route model."""

    def test_not_found_route(self):
        route = Route(PathResult.not_found())

        assert not route.found
        assert not route.is_direct
        assert route.get_distance_display() == "Unknown"
        assert route.get_route_description() == "No route found"

    def test_direct_route(self):
        route = Route(
            PathResult(found=True, transfers=0, total_distance=640.4),
            (segment("R-1", "A", "B", "C"),),
        )

        assert route.is_direct
        assert route.interchange_stations == []
        assert route.get_distance_display() == "640m"
        assert route.get_route_description() == "Direct service on R-1"

    def test_single_change(self):
        route = Route(
            PathResult(found=True, transfers=1, total_distance=2300.0),
            (segment("R-1", "A", "B"), segment("H-2", "B", "D")),
        )

        assert route.interchange_stations == ["B"]
        assert route.get_distance_display() == "2.3km"
        assert route.get_route_description() == "Change once - via R-1 then H-2"

    def test_multiple_changes(self):
        route = Route(
            PathResult(found=True, transfers=2, total_distance=10.0),
            (segment("L1", "A", "B"), segment("L2", "B", "C"), segment("L3", "C", "D")),
        )

        assert route.get_route_description() == "2 changes required via L1, L2, L3"

    def test_through_service(self):
        """Test switching lines without a counted transfer."""
        route = Route(
            PathResult(found=True, transfers=0, total_distance=10.0),
            (segment("L1", "A", "B"), segment("L2", "B", "C")),
        )

        assert route.get_route_description() == "Through service via L1 then L2"

    def test_already_at_destination(self):
        route = Route(PathResult(found=True), (segment("L1", "A"),))

        assert route.get_route_description() == "Already at destination"
        assert route.get_distance_display() == "0m"

    def test_to_dict(self):
        route = Route(PathResult(found=True, total_distance=5.0), (segment("L1", "A", "B"),))

        data = route.to_dict()

        assert data["found"] is True
        assert data["segments"][0]["stations"] == ["A", "B"]
        assert data["route_description"] == "Direct service on L1"


class TestJourneyResult:
    """Test JourneyResult model."""

    def test_not_found(self):
        result = JourneyResult.not_found(JourneyMode.RAIL)

        assert not result.found
        assert result.mode is JourneyMode.RAIL
        assert result.segments == ()

    def test_rail_segments(self):
        walk = WalkSegment(ORIGIN, Coordinate(3, 0, 4), 5.0)
        rail = RailSegment(PathResult(found=True), (segment("L1", "A", "B"),))
        result = JourneyResult(True, JourneyMode.RAIL, (walk, rail), total_walk_distance=5.0)

        assert result.rail_segments == (rail,)
        data = result.to_dict()
        assert data["mode"] == "rail"
        assert [s["type"] for s in data["segments"]] == ["walk", "rail"]

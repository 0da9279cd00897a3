"""
Unit tests for the path simplifier.
"""

from railpath.core.models.route import PathStep
from railpath.core.models.station import Coordinate
from railpath.core.services.path_simplifier import describe_segments, simplify_path


def step(name, line_id, x=0):
    return PathStep(name, line_id, Coordinate(x, 0, 0))


def flatten(segments):
    """Re-expand segments into a path, repeating each interchange station."""
    path = []
    for segment in segments:
        path.extend(step(name, segment.line_id) for name in segment.stations)
    return path


class TestSimplifyPath:
    """Test folding paths into same-line segments."""

    def test_empty_path(self):
        assert simplify_path([]) == []

    def test_single_node(self):
        segments = simplify_path([step("A", "L1", 5)])

        assert len(segments) == 1
        assert segments[0].line_id == "L1"
        assert segments[0].stations == ("A",)
        assert segments[0].start_coord == segments[0].end_coord == Coordinate(5, 0, 0)

    def test_transfer_splits_segments(self):
        path = [step("A", "L1", 0), step("B", "L1", 10), step("B", "L2", 10), step("C", "L2", 20)]

        segments = simplify_path(path)

        assert [(s.line_id, s.stations) for s in segments] == [
            ("L1", ("A", "B")),
            ("L2", ("B", "C")),
        ]
        assert segments[0].start_coord == Coordinate(0, 0, 0)
        assert segments[0].end_coord == Coordinate(10, 0, 0)
        assert segments[1].start_coord == Coordinate(10, 0, 0)
        assert segments[1].end_coord == Coordinate(20, 0, 0)

    def test_consecutive_repeats_collapse(self):
        segments = simplify_path([step("A", "L1"), step("A", "L1"), step("B", "L1")])

        assert segments[0].stations == ("A", "B")

    def test_segment_count_matches_line_changes(self):
        path = [
            step("A", "L1"), step("B", "L1"),
            step("B", "L2"), step("C", "L2"), step("D", "L2"),
            step("D", "L3"),
        ]

        segments = simplify_path(path)

        assert len(segments) == 3
        assert segments[-1].stations == ("D",)

    def test_idempotent(self):
        path = [step("A", "L1"), step("B", "L1"), step("B", "L2"), step("C", "L2")]

        once = simplify_path(path)
        twice = simplify_path(flatten(once))

        assert [(s.line_id, s.stations) for s in twice] == [(s.line_id, s.stations) for s in once]


class TestDescribeSegments:
    """Test turn-by-turn descriptions."""

    def test_instructions(self):
        segments = simplify_path([
            step("A", "L1"), step("B", "L1"), step("C", "L1"),
            step("C", "L2"), step("D", "L2"),
        ])

        assert describe_segments(segments) == [
            "Board L1 at A",
            "Travel 2 stops to C",
            "Change to L2 at C",
            "Travel 1 stop to D",
            "Alight at D",
        ]

    def test_no_segments(self):
        assert describe_segments([]) == []

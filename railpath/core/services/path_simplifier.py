"""
Path Simplifier

Folds a raw router path into maximal same-line segments for route summaries.
"""

from typing import List, Sequence

from ..models.route import PathStep, RouteSegment


def simplify_path(path: Sequence[PathStep]) -> List[RouteSegment]:
    """
    Collapse a path into contiguous same-line segments.

    A transfer lands on the same station name on another line; that name
    starts the next segment and is not repeated inside the previous one.
    """
    if not path:
        return []

    segments: List[RouteSegment] = []
    first = path[0]
    line_id = first.line_id
    stations = [first.station_name]
    start_coord = end_coord = first.coord

    for step in path[1:]:
        if step.line_id == line_id:
            if step.station_name != stations[-1]:
                stations.append(step.station_name)
                end_coord = step.coord
        else:
            segments.append(RouteSegment(line_id, tuple(stations), start_coord, end_coord))
            line_id = step.line_id
            stations = [step.station_name]
            start_coord = end_coord = step.coord

    segments.append(RouteSegment(line_id, tuple(stations), start_coord, end_coord))
    return segments


def describe_segments(segments: Sequence[RouteSegment]) -> List[str]:
    """Turn-by-turn instructions for a list of segments."""
    steps = []
    for i, segment in enumerate(segments):
        if i == 0:
            steps.append(f"Board {segment.line_id} at {segment.origin}")
        else:
            steps.append(f"Change to {segment.line_id} at {segment.origin}")

        if segment.stop_count:
            plural = "s" if segment.stop_count != 1 else ""
            steps.append(f"Travel {segment.stop_count} stop{plural} to {segment.destination}")

    if segments:
        steps.append(f"Alight at {segments[-1].destination}")
    return steps

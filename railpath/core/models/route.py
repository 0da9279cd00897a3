"""
Route Model

Data models for router output: the raw node path, its same-line segments and
the combined route handed to display code.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Tuple

from .station import Coordinate


@dataclass(frozen=True)
class PathStep:
    """One node of a found path."""

    station_name: str
    line_id: str
    coord: Coordinate


@dataclass(frozen=True)
class PathResult:
    """
    Outcome of a route search.

    A not-found result has an empty path, zero transfers, zero distance and
    no lines; it is a normal outcome, not an error.
    """

    found: bool
    path: Tuple[PathStep, ...] = field(default_factory=tuple)
    transfers: int = 0
    total_distance: float = 0.0
    lines: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def not_found(cls) -> 'PathResult':
        return cls(found=False)

    @property
    def line_order(self) -> List[str]:
        """Line ids in the order they are first used along the path."""
        seen: List[str] = []
        for step in self.path:
            if step.line_id not in seen:
                seen.append(step.line_id)
        return seen

    @property
    def station_names(self) -> List[str]:
        return [step.station_name for step in self.path]

    def to_dict(self) -> Dict[str, Any]:
        """Convert path result to dictionary representation."""
        return {
            "found": self.found,
            "path": [
                {
                    "station_name": step.station_name,
                    "line_id": step.line_id,
                    "coord": step.coord.to_dict(),
                }
                for step in self.path
            ],
            "transfers": self.transfers,
            "total_distance": self.total_distance,
            "lines": sorted(self.lines),
        }


@dataclass(frozen=True)
class RouteSegment:
    """A maximal run of consecutive path nodes on one line."""

    line_id: str
    stations: Tuple[str, ...]
    start_coord: Coordinate
    end_coord: Coordinate

    @property
    def origin(self) -> str:
        return self.stations[0]

    @property
    def destination(self) -> str:
        return self.stations[-1]

    @property
    def stop_count(self) -> int:
        """Number of hops travelled within this segment."""
        return len(self.stations) - 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "line_id": self.line_id,
            "stations": list(self.stations),
            "start_coord": self.start_coord.to_dict(),
            "end_coord": self.end_coord.to_dict(),
        }


@dataclass(frozen=True)
class Route:
    """
    A found path together with its simplified segments.

    Uses station names only; line identity lives on each segment.
    """

    result: PathResult
    segments: Tuple[RouteSegment, ...] = field(default_factory=tuple)

    @property
    def found(self) -> bool:
        return self.result.found

    @property
    def is_direct(self) -> bool:
        """Check if this is a direct route (no changes)."""
        return self.result.found and self.result.transfers == 0

    @property
    def interchange_stations(self) -> List[str]:
        """Get list of stations where changes are required."""
        return [segment.origin for segment in self.segments[1:]]

    def get_distance_display(self) -> str:
        """Get formatted distance for display."""
        if not self.result.found:
            return "Unknown"
        distance = self.result.total_distance
        if distance < 1000:
            return f"{int(round(distance))}m"
        return f"{distance / 1000:.1f}km"

    def get_route_description(self) -> str:
        """Get a human-readable description of the route."""
        if not self.result.found:
            return "No route found"
        if not self.segments or (len(self.segments) == 1 and self.segments[0].stop_count == 0):
            return "Already at destination"

        lines = [segment.line_id for segment in self.segments]
        transfers = self.result.transfers
        if transfers == 0:
            if len(lines) == 1:
                return f"Direct service on {lines[0]}"
            return f"Through service via {' then '.join(lines)}"
        if transfers == 1:
            return f"Change once - via {lines[0]} then {lines[-1]}"
        return f"{transfers} changes required via {', '.join(lines)}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert route to dictionary representation."""
        return {
            **self.result.to_dict(),
            "segments": [segment.to_dict() for segment in self.segments],
            "interchange_stations": self.interchange_stations,
            "distance_display": self.get_distance_display(),
            "route_description": self.get_route_description(),
        }

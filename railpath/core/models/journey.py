"""
Journey Model

Door-to-door journey results combining walking legs with a rail route.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple, Union

from .route import PathResult, RouteSegment
from .station import Coordinate


class JourneyMode(Enum):
    """How a journey is made."""
    WALK = "walk"
    RAIL = "rail"
    AUTO = "auto"


@dataclass(frozen=True)
class WalkSegment:
    """A straight walking (or flying) leg between two points."""

    from_coord: Coordinate
    to_coord: Coordinate
    distance: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "walk",
            "from": self.from_coord.to_dict(),
            "to": self.to_coord.to_dict(),
            "distance": self.distance,
        }


@dataclass(frozen=True)
class RailSegment:
    """A rail leg: the raw router result and its simplified segments."""

    rail_path: PathResult
    simplified: Tuple[RouteSegment, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "rail",
            "rail_path": self.rail_path.to_dict(),
            "simplified": [segment.to_dict() for segment in self.simplified],
        }


JourneySegment = Union[WalkSegment, RailSegment]


@dataclass(frozen=True)
class JourneyResult:
    """Result of planning a journey between two world coordinates."""

    found: bool
    mode: JourneyMode
    segments: Tuple[JourneySegment, ...] = field(default_factory=tuple)
    total_walk_distance: float = 0.0
    total_rail_distance: float = 0.0
    total_transfers: int = 0

    @classmethod
    def not_found(cls, mode: JourneyMode) -> 'JourneyResult':
        return cls(found=False, mode=mode)

    @property
    def rail_segments(self) -> Tuple[RailSegment, ...]:
        return tuple(segment for segment in self.segments if isinstance(segment, RailSegment))

    def to_dict(self) -> Dict[str, Any]:
        """Convert journey to dictionary representation."""
        return {
            "found": self.found,
            "mode": self.mode.value,
            "segments": [segment.to_dict() for segment in self.segments],
            "total_walk_distance": self.total_walk_distance,
            "total_rail_distance": self.total_rail_distance,
            "total_transfers": self.total_transfers,
        }

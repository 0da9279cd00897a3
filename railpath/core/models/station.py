"""
Station Model

Data models for stations as they appear on a line and in the station index.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class Coordinate:
    """
    A point in world space.

    Only the planar (x, z) components take part in distance calculations;
    y is the vertical axis and is carried for display only.
    """

    x: float
    y: float
    z: float

    def distance_to(self, other: 'Coordinate') -> float:
        """Planar (x, z) Euclidean distance to another coordinate."""
        dx = self.x - other.x
        dz = self.z - other.z
        return math.sqrt(dx * dx + dz * dz)

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y, "z": self.z}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Coordinate':
        """Create a Coordinate from a ``{"x", "y", "z"}`` mapping, missing axes default to 0."""
        return cls(
            x=float(data.get("x", 0)),
            y=float(data.get("y", 0)),
            z=float(data.get("z", 0)),
        )

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g}, {self.z:g})"


@dataclass(frozen=True)
class LineStation:
    """A station as it appears in one line's ordered station list."""

    name: str
    coord: Coordinate
    station_code: Optional[int] = None

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ParsedStation:
    """
    Station index entry built from the raw listing.

    One entry per station name regardless of how many lines serve it. The
    coordinate and code are taken from the first line the station was seen on.
    """

    name: str
    coord: Coordinate
    station_code: int
    is_transfer: bool = False
    lines: Tuple[str, ...] = field(default_factory=tuple)

    def serves_line(self, line_id: str) -> bool:
        """Check if this station is served by the given line."""
        return line_id in self.lines

    def to_dict(self) -> Dict[str, Any]:
        """Convert station to dictionary representation."""
        return {
            "name": self.name,
            "coord": self.coord.to_dict(),
            "station_code": self.station_code,
            "is_transfer": self.is_transfer,
            "lines": list(self.lines),
        }

    def __repr__(self) -> str:
        return f"ParsedStation(name='{self.name}', lines={list(self.lines)})"

"""
Railway Line Model

Data model for a rail line: an identifier and its ordered station list.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .station import Coordinate, LineStation


@dataclass(frozen=True)
class RailwayLine:
    """
    Represents a railway line with its stations and properties.

    Station order defines adjacency; traversal is permitted in both
    directions. Construction does not validate the station list: single
    station lines and repeated names are tolerated and handled by the graph
    builder.
    """

    line_id: str
    stations: Tuple[LineStation, ...]
    bureau: Optional[str] = None
    line: Optional[str] = None
    color: Optional[str] = None
    edge_lengths: Optional[Tuple[Optional[float], ...]] = None  # length of hop i -> i+1

    def __post_init__(self):
        """Normalise sequences to tuples so the line stays hashable and immutable."""
        if not isinstance(self.stations, tuple):
            object.__setattr__(self, 'stations', tuple(self.stations))
        if self.edge_lengths is not None and not isinstance(self.edge_lengths, tuple):
            object.__setattr__(self, 'edge_lengths', tuple(self.edge_lengths))

    @property
    def station_count(self) -> int:
        """Get the number of stations on this line."""
        return len(self.stations)

    @property
    def station_names(self) -> List[str]:
        return [station.name for station in self.stations]

    @property
    def terminus_stations(self) -> List[str]:
        """Get the terminus stations (first and last)."""
        if len(self.stations) >= 2:
            return [self.stations[0].name, self.stations[-1].name]
        return self.station_names

    @property
    def length(self) -> float:
        """Total planar length of the line, summed hop by hop."""
        total = 0.0
        for i in range(1, len(self.stations)):
            total += self.stations[i - 1].coord.distance_to(self.stations[i].coord)
        return total

    def has_station(self, station_name: str) -> bool:
        """Check if this line serves the given station."""
        return any(station.name == station_name for station in self.stations)

    def get_station_index(self, station_name: str) -> Optional[int]:
        """Get the index of the first occurrence of a station on this line."""
        for index, station in enumerate(self.stations):
            if station.name == station_name:
                return index
        return None

    def get_edge_length(self, index: int) -> Optional[float]:
        """
        Get the published length of the hop from station ``index`` to ``index + 1``.

        Returns None when no usable length is available, in which case callers
        fall back to the straight-line distance.
        """
        if not self.edge_lengths or index < 0 or index >= len(self.edge_lengths):
            return None
        length = self.edge_lengths[index]
        if not length or length <= 0:
            return None
        return float(length)

    def get_coordinates(self) -> List[Tuple[float, float]]:
        """Planar (x, z) polyline of the line, in station order."""
        return [(station.coord.x, station.coord.z) for station in self.stations]

    def to_dict(self) -> Dict[str, Any]:
        """Convert railway line to dictionary representation."""
        return {
            "line_id": self.line_id,
            "bureau": self.bureau,
            "line": self.line,
            "color": self.color,
            "stations": [
                {
                    "name": station.name,
                    "coord": station.coord.to_dict(),
                    "station_code": station.station_code,
                }
                for station in self.stations
            ],
            "edge_lengths": list(self.edge_lengths) if self.edge_lengths is not None else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RailwayLine':
        """Create RailwayLine from dictionary representation."""
        edge_lengths = data.get("edge_lengths")
        return cls(
            line_id=data["line_id"],
            stations=tuple(
                LineStation(
                    name=station["name"],
                    coord=Coordinate.from_dict(station.get("coord") or {}),
                    station_code=station.get("station_code"),
                )
                for station in data.get("stations", [])
            ),
            bureau=data.get("bureau"),
            line=data.get("line"),
            color=data.get("color"),
            edge_lengths=tuple(edge_lengths) if edge_lengths is not None else None,
        )

    def __str__(self) -> str:
        return self.line_id

    def __repr__(self) -> str:
        return f"RailwayLine(line_id='{self.line_id}', stations={self.station_count})"

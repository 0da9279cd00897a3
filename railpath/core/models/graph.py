"""
Graph Model

The routable network: nodes keyed by (station name, line id) with directed
edges for intra-line hops and zero-weight transfers.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterator, List, Optional, Tuple

from .station import Coordinate

NodeKey = Tuple[str, str]


@dataclass(frozen=True)
class GraphEdge:
    """A directed arc to ``(station_name, line_id)``."""

    station_name: str
    line_id: str
    distance: float
    is_transfer: bool = False

    @property
    def target(self) -> NodeKey:
        return (self.station_name, self.line_id)


@dataclass(frozen=True)
class GraphNode:
    """
    One station on one line.

    The same physical station on two lines is two nodes joined by transfer
    edges. The coordinate is a denormalised copy used for distances.
    """

    station_name: str
    line_id: str
    coord: Coordinate
    station_code: Optional[int] = None
    edges: Tuple[GraphEdge, ...] = field(default_factory=tuple)

    @property
    def key(self) -> NodeKey:
        return (self.station_name, self.line_id)

    @property
    def transfer_edges(self) -> List[GraphEdge]:
        return [edge for edge in self.edges if edge.is_transfer]


class RailwayGraph(Mapping):
    """
    Read-only mapping of NodeKey to GraphNode.

    Built once per line-set snapshot and never mutated afterwards, so a single
    instance can be shared by concurrent route queries.
    """

    def __init__(self, nodes: Dict[NodeKey, GraphNode]):
        self._nodes = MappingProxyType(dict(nodes))
        by_name: Dict[str, List[NodeKey]] = {}
        for key in self._nodes:
            by_name.setdefault(key[0], []).append(key)
        self._keys_by_station = MappingProxyType(
            {name: tuple(keys) for name, keys in by_name.items()}
        )

    def __getitem__(self, key: NodeKey) -> GraphNode:
        return self._nodes[key]

    def __iter__(self) -> Iterator[NodeKey]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def nodes_for_station(self, station_name: str) -> Tuple[NodeKey, ...]:
        """All node keys for a station name, in graph insertion order."""
        return self._keys_by_station.get(station_name, ())

    def has_station(self, station_name: str) -> bool:
        return station_name in self._keys_by_station

    def station_names(self) -> List[str]:
        return list(self._keys_by_station)

    @property
    def edge_count(self) -> int:
        return sum(len(node.edges) for node in self._nodes.values())

    def __repr__(self) -> str:
        return f"RailwayGraph(nodes={len(self)}, edges={self.edge_count})"

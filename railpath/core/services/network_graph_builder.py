"""
Network Graph Builder

Builds the routable railway graph from line data. Every (station, line) pair
becomes a node; adjacent stations on a line are joined by distance-weighted
edges and the same station on different lines by zero-weight transfers.
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

from ..models.graph import GraphEdge, GraphNode, NodeKey, RailwayGraph
from ..models.railway_line import RailwayLine
from ..models.station import Coordinate, LineStation
from ..models.station_record import StationRecord
from .special_cases import DIRECTION_DOWN, DIRECTION_UP, SpecialCasesIndex, process_special_cases


def calculate_distance(a: Coordinate, b: Coordinate) -> float:
    """Planar distance between two coordinates; the vertical axis is ignored."""
    return a.distance_to(b)


class NetworkGraphBuilder:
    """Builds immutable railway network graphs.

    The builder keeps no state between calls: each ``build`` returns a new
    graph and discards its working indexes.
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def build(self, lines: Sequence[RailwayLine],
              station_records: Optional[Iterable[StationRecord]] = None) -> RailwayGraph:
        """
        Build a network graph from railway lines.

        Args:
            lines: Lines with their ordered stations
            station_records: Optional raw station records whose special cases
                (blocked directions, unavailable lines, overtaking, through
                trains) are applied while wiring edges

        Returns:
            The completed, read-only graph
        """
        special_cases = process_special_cases(station_records)
        self.logger.info(f"Building railway network graph from {len(lines)} lines")

        nodes, station_lines = self._collect_nodes(lines, special_cases)
        edges = self._connect_nodes(lines, nodes, station_lines, special_cases)

        graph = RailwayGraph({
            key: GraphNode(
                station_name=station.name,
                line_id=key[1],
                coord=station.coord,
                station_code=station.station_code,
                edges=tuple(edges[key]),
            )
            for key, station in nodes.items()
        })

        self.logger.info(f"Built network graph with {len(graph)} nodes and {graph.edge_count} connections")
        return graph

    def _collect_nodes(self, lines: Sequence[RailwayLine], special_cases: SpecialCasesIndex
                       ) -> Tuple[Dict[NodeKey, LineStation], Dict[str, List[str]]]:
        """First pass: one node per (station, line), plus the lines seen under each name."""
        nodes: Dict[NodeKey, LineStation] = {}
        station_lines: Dict[str, List[str]] = {}

        for line in lines:
            self.logger.debug(f"Processing line: {line.line_id} with {line.station_count} stations")
            for station in line.stations:
                key = (station.name, line.line_id)
                if special_cases.is_unavailable(key):
                    self.logger.debug(f"Skipping unavailable line {line.line_id} at {station.name}")
                    continue

                # A repeated name on one line keeps the last coordinate seen
                nodes[key] = station
                station_lines.setdefault(station.name, []).append(line.line_id)

        return nodes, station_lines

    def _connect_nodes(self, lines: Sequence[RailwayLine],
                       nodes: Dict[NodeKey, LineStation],
                       station_lines: Dict[str, List[str]],
                       special_cases: SpecialCasesIndex) -> Dict[NodeKey, List[GraphEdge]]:
        """Second pass: intra-line neighbours and transfers."""
        edges: Dict[NodeKey, List[GraphEdge]] = {key: [] for key in nodes}
        transfers_added: Dict[NodeKey, Set[str]] = {key: set() for key in nodes}

        for line in lines:
            stations = line.stations
            line_id = line.line_id

            for i, station in enumerate(stations):
                key = (station.name, line_id)
                if key not in nodes:
                    continue
                node_edges = edges[key]

                # Towards the previous station ("up")
                if i > 0 and not special_cases.is_blocked(key, DIRECTION_UP):
                    prev = stations[i - 1]
                    if (prev.name, line_id) in nodes:
                        node_edges.append(GraphEdge(
                            station_name=prev.name,
                            line_id=line_id,
                            distance=self._hop_length(line, i - 1, station, prev),
                        ))

                # Towards the next station ("down")
                if i < len(stations) - 1 and not special_cases.is_blocked(key, DIRECTION_DOWN):
                    nxt = stations[i + 1]
                    if (nxt.name, line_id) in nodes:
                        target_code = special_cases.overtaking_target(key)
                        if target_code is not None:
                            edge = self._overtaking_edge(line, station, target_code, nodes)
                            if edge is not None:
                                node_edges.append(edge)
                        else:
                            node_edges.append(GraphEdge(
                                station_name=nxt.name,
                                line_id=line_id,
                                distance=self._hop_length(line, i, station, nxt),
                            ))

                # Same station on other lines
                for other_line_id in station_lines.get(station.name, []):
                    if other_line_id == line_id or other_line_id in transfers_added[key]:
                        continue
                    if (station.name, other_line_id) not in nodes:
                        continue
                    transfers_added[key].add(other_line_id)
                    node_edges.append(GraphEdge(
                        station_name=station.name,
                        line_id=other_line_id,
                        distance=0.0,
                        is_transfer=not special_cases.is_through_train(key, other_line_id),
                    ))

        return edges

    def _hop_length(self, line: RailwayLine, hop_index: int,
                    a: LineStation, b: LineStation) -> float:
        """Published hop length when the line carries one, else straight-line distance."""
        length = line.get_edge_length(hop_index)
        if length is not None:
            return length
        return calculate_distance(a.coord, b.coord)

    def _overtaking_edge(self, line: RailwayLine, station: LineStation, target_code: int,
                         nodes: Dict[NodeKey, LineStation]) -> Optional[GraphEdge]:
        """Edge that skips ahead to the station with ``target_code`` on the same line."""
        target = next((s for s in line.stations if s.station_code == target_code), None)
        if target is None or (target.name, line.line_id) not in nodes:
            self.logger.debug(
                f"Overtaking target {target_code} not found on {line.line_id} from {station.name}"
            )
            return None

        self.logger.debug(f"Overtaking on {line.line_id}: {station.name} -> {target.name}")
        return GraphEdge(
            station_name=target.name,
            line_id=line.line_id,
            distance=calculate_distance(station.coord, target.coord),
        )


def build_railway_graph(lines: Sequence[RailwayLine],
                        station_records: Optional[Iterable[StationRecord]] = None) -> RailwayGraph:
    """Build a graph with a fresh NetworkGraphBuilder."""
    return NetworkGraphBuilder().build(lines, station_records)

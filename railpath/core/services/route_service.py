"""
Route Service Implementation

Service implementation for route calculation and journey planning over a
lazily built network graph.
"""

import logging
import threading
from typing import Any, Dict, Optional, Union

from ...managers.config_manager import ConfigData
from ..interfaces.i_data_repository import IDataRepository
from ..interfaces.i_route_service import IRouteService
from ..models.graph import RailwayGraph
from ..models.journey import JourneyMode, JourneyResult
from ..models.route import Route
from ..models.station import Coordinate
from .journey_planner import JourneyPlanner
from .network_graph_builder import NetworkGraphBuilder
from .path_simplifier import simplify_path
from .pathfinding_algorithm import PathfindingAlgorithm
from .travel_estimator import TravelEstimator


class RouteService(IRouteService):
    """Service implementation for route calculation and journey planning."""

    def __init__(self, data_repository: IDataRepository, config: Optional[ConfigData] = None):
        """
        Initialize the route service with its components.

        Args:
            data_repository: Data repository for accessing railway data
            config: Application configuration, defaults to ConfigData()
        """
        self.data_repository = data_repository
        self.config = config or ConfigData()
        self.logger = logging.getLogger(__name__)

        self.network_builder = NetworkGraphBuilder()
        self.pathfinder = PathfindingAlgorithm(self.config.routing)
        self.estimator = TravelEstimator(self.config.travel)
        self.journey_planner = JourneyPlanner(self.pathfinder, self.estimator)

        # Graph snapshot; replaced as a whole on refresh
        self._graph: Optional[RailwayGraph] = None
        self._lock = threading.Lock()

        self.logger.info("Initialized RouteService")

    def _build_graph(self) -> RailwayGraph:
        lines = self.data_repository.load_railway_lines()
        records = self.data_repository.load_station_records()
        return self.network_builder.build(lines, records)

    def get_graph(self) -> RailwayGraph:
        """Get the current network graph, building it on first use."""
        graph = self._graph
        if graph is not None:
            return graph

        with self._lock:
            if self._graph is None:
                self._graph = self._build_graph()
            return self._graph

    def refresh(self) -> RailwayGraph:
        """Reload data and swap in a freshly built graph."""
        self.data_repository.refresh_data()
        with self._lock:
            graph = self._build_graph()
            self._graph = graph
        self.logger.info(f"Network graph refreshed: {graph!r}")
        return graph

    def resolve_station_name(self, station_name: str, graph: Optional[RailwayGraph] = None) -> Optional[str]:
        """
        Find a station in the graph, tolerating case and surrounding whitespace.

        Returns the graph's own spelling if found, or None if not found.
        """
        graph = graph or self.get_graph()

        # Direct lookup first (most efficient)
        if graph.has_station(station_name):
            return station_name

        stripped = station_name.strip()
        if graph.has_station(stripped):
            return stripped

        lowered = stripped.lower()
        for graph_station in graph.station_names():
            if graph_station.lower() == lowered:
                self.logger.info(f"Graph lookup (case): '{station_name}' -> '{graph_station}'")
                return graph_station

        return None

    def calculate_route(self, from_station: str, to_station: str,
                        prefer_fewer_transfers: Optional[bool] = None) -> Route:
        """Calculate the best route between two stations."""
        graph = self.get_graph()
        start = self.resolve_station_name(from_station, graph) or from_station
        end = self.resolve_station_name(to_station, graph) or to_station

        result = self.pathfinder.find_shortest_path(graph, start, end, prefer_fewer_transfers)
        route = Route(result=result, segments=tuple(simplify_path(result.path)))

        if route.found:
            self.logger.info(f"Route {start} -> {end}: {route.get_route_description()}")
        return route

    def plan_journey(self, start: Coordinate, end: Coordinate,
                     mode: Union[JourneyMode, str] = JourneyMode.AUTO,
                     prefer_fewer_transfers: Optional[bool] = None) -> JourneyResult:
        """
        Plan a journey between two world coordinates.

        Raises:
            ValueError: if ``mode`` is not walk, rail or auto
        """
        try:
            mode = JourneyMode(mode)
        except ValueError:
            raise ValueError(f"Unknown journey mode: {mode!r}") from None

        if mode is JourneyMode.WALK:
            return self.journey_planner.find_walk_path(start, end)

        graph = self.get_graph()
        stations = list(self.data_repository.get_station_index().values())

        if mode is JourneyMode.RAIL:
            return self.journey_planner.find_rail_only_path(
                start, end, graph, stations, prefer_fewer_transfers
            )
        return self.journey_planner.find_auto_path(
            start, end, graph, stations, prefer_fewer_transfers
        )

    def estimate_travel_time(self, journey: JourneyResult) -> float:
        """Estimated duration of a planned journey in seconds."""
        return self.estimator.estimate_travel_time(journey)

    def get_route_statistics(self) -> Dict[str, Any]:
        """Get statistics about the route network."""
        graph = self.get_graph()

        total_nodes = len(graph)
        total_edges = graph.edge_count
        transfer_edges = sum(len(node.transfer_edges) for node in graph.values())
        lines = self.data_repository.load_railway_lines()

        return {
            "total_stations": len(graph.station_names()),
            "total_nodes": total_nodes,
            "total_edges": total_edges,
            "transfer_edges": transfer_edges,
            "total_lines": len(lines),
            "average_edges_per_node": total_edges / total_nodes if total_nodes > 0 else 0,
        }

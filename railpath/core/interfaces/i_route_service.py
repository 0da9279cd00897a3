"""
Route Service Interface

Interface for route calculation and journey planning services.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from ..models.graph import RailwayGraph
from ..models.journey import JourneyMode, JourneyResult
from ..models.route import Route
from ..models.station import Coordinate


class IRouteService(ABC):
    """Interface for route calculation and journey planning services."""

    @abstractmethod
    def get_graph(self) -> RailwayGraph:
        """
        Get the current network graph, building it on first use.

        Returns:
            The read-only RailwayGraph
        """
        pass

    @abstractmethod
    def refresh(self) -> RailwayGraph:
        """
        Discard the current graph and build a new one from fresh data.

        Returns:
            The newly built RailwayGraph
        """
        pass

    @abstractmethod
    def calculate_route(self, from_station: str, to_station: str,
                        prefer_fewer_transfers: Optional[bool] = None) -> Route:
        """
        Calculate the best route between two stations.

        Args:
            from_station: Starting station name
            to_station: Destination station name
            prefer_fewer_transfers: Rank transfer count above distance;
                None uses the configured default

        Returns:
            Route object; ``route.found`` is False when there is no route
        """
        pass

    @abstractmethod
    def plan_journey(self, start: Coordinate, end: Coordinate,
                     mode: JourneyMode = JourneyMode.AUTO) -> JourneyResult:
        """
        Plan a journey between two world coordinates.

        Args:
            start: Starting coordinate
            end: Destination coordinate
            mode: Walk only, rail with walking legs, or automatic choice

        Returns:
            JourneyResult for the chosen mode
        """
        pass

    @abstractmethod
    def get_route_statistics(self) -> Dict[str, Any]:
        """
        Get statistics about the loaded network.

        Returns:
            Dictionary of network statistics
        """
        pass

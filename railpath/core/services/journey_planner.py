"""
Journey Planner

Plans journeys between two world coordinates: walk directly, or walk to the
nearest station, ride, and walk on from the station nearest the destination.
Automatic mode picks whichever is estimated to be quicker.
"""

import logging
from typing import List, Optional, Sequence

from ..models.graph import RailwayGraph
from ..models.journey import JourneyMode, JourneyResult, JourneySegment, RailSegment, WalkSegment
from ..models.station import Coordinate, ParsedStation
from .path_simplifier import simplify_path
from .pathfinding_algorithm import PathfindingAlgorithm
from .travel_estimator import TravelEstimator


class JourneyPlanner:
    """Combines walking legs with rail routes."""

    def __init__(self, pathfinder: Optional[PathfindingAlgorithm] = None,
                 estimator: Optional[TravelEstimator] = None):
        """
        Initialize the journey planner.

        Args:
            pathfinder: Router for the rail legs
            estimator: Travel time estimator used to compare candidates
        """
        self.pathfinder = pathfinder or PathfindingAlgorithm()
        self.estimator = estimator or TravelEstimator()
        self.logger = logging.getLogger(__name__)

    def find_walk_path(self, start: Coordinate, end: Coordinate) -> JourneyResult:
        """Walk the straight line from start to end."""
        distance = start.distance_to(end)
        return JourneyResult(
            found=True,
            mode=JourneyMode.WALK,
            segments=(WalkSegment(start, end, distance),),
            total_walk_distance=distance,
        )

    @staticmethod
    def find_nearest_station(coord: Coordinate,
                             stations: Sequence[ParsedStation]) -> Optional[ParsedStation]:
        """Nearest station by planar distance; the first one wins ties."""
        nearest = None
        min_distance = float('inf')
        for station in stations:
            distance = coord.distance_to(station.coord)
            if distance < min_distance:
                min_distance = distance
                nearest = station
        return nearest

    def find_rail_only_path(self, start: Coordinate, end: Coordinate, graph: RailwayGraph,
                            stations: Sequence[ParsedStation],
                            prefer_fewer_transfers: Optional[bool] = None) -> JourneyResult:
        """
        Walk to the nearest station, ride to the station nearest ``end``, walk on.

        When both ends share a nearest station the result is a walk-only
        journey via that station.
        """
        start_station = self.find_nearest_station(start, stations)
        end_station = self.find_nearest_station(end, stations)

        if start_station is None or end_station is None:
            self.logger.info("No stations available for rail journey")
            return JourneyResult.not_found(JourneyMode.RAIL)

        segments: List[JourneySegment] = []
        total_walk_distance = 0.0

        walk_to_start = start.distance_to(start_station.coord)
        if walk_to_start > 0:
            segments.append(WalkSegment(start, start_station.coord, walk_to_start))
            total_walk_distance += walk_to_start

        if start_station.name == end_station.name:
            walk_from_station = start_station.coord.distance_to(end)
            if walk_from_station > 0:
                segments.append(WalkSegment(start_station.coord, end, walk_from_station))
                total_walk_distance += walk_from_station
            return JourneyResult(
                found=True,
                mode=JourneyMode.WALK,
                segments=tuple(segments),
                total_walk_distance=total_walk_distance,
            )

        rail_result = self.pathfinder.find_shortest_path(
            graph, start_station.name, end_station.name, prefer_fewer_transfers
        )
        if not rail_result.found:
            self.logger.info(f"No rail route between {start_station.name} and {end_station.name}")
            return JourneyResult.not_found(JourneyMode.RAIL)

        segments.append(RailSegment(rail_result, tuple(simplify_path(rail_result.path))))

        walk_from_end = end_station.coord.distance_to(end)
        if walk_from_end > 0:
            segments.append(WalkSegment(end_station.coord, end, walk_from_end))
            total_walk_distance += walk_from_end

        return JourneyResult(
            found=True,
            mode=JourneyMode.RAIL,
            segments=tuple(segments),
            total_walk_distance=total_walk_distance,
            total_rail_distance=rail_result.total_distance,
            total_transfers=rail_result.transfers,
        )

    def find_auto_path(self, start: Coordinate, end: Coordinate, graph: RailwayGraph,
                       stations: Sequence[ParsedStation],
                       prefer_fewer_transfers: Optional[bool] = None) -> JourneyResult:
        """Compare walking with rail and return the quicker estimate."""
        candidates = [self.find_walk_path(start, end)]

        rail_result = self.find_rail_only_path(start, end, graph, stations, prefer_fewer_transfers)
        if rail_result.found:
            candidates.append(rail_result)

        best = candidates[0]
        best_score = self.estimator.estimate_travel_time(best)
        for candidate in candidates[1:]:
            score = self.estimator.estimate_travel_time(candidate)
            if score < best_score:
                best, best_score = candidate, score

        self.logger.debug(f"Auto journey chose {best.mode.value} ({best_score:.1f}s estimated)")
        return best

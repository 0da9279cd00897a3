"""
Pathfinding Algorithm

Multi-source Dijkstra search over the railway graph with a cost function that
can rank transfer count above distance.
"""

import heapq
import itertools
import logging
from typing import Dict, List, Optional, Tuple

from ...managers.config_manager import RoutingConfig
from ..models.graph import NodeKey, RailwayGraph
from ..models.route import PathResult, PathStep

Cost = Tuple[float, ...]


class PathfindingAlgorithm:
    """
    Finds the best route between two station names.

    Every node whose station name matches the start is an entry point and
    every node matching the destination is an exit, so the search covers all
    lines serving both ends.

    Cost ordering when transfers are preferred:

    - ``exact_lexicographic``: compare ``(transfers, distance)`` as a tuple
    - otherwise: ``transfers * transfer_penalty + distance``

    and when they are not: ``distance + transfers * secondary_penalty``.

    The frontier is a binary heap; entries with equal cost leave in the order
    they were pushed, so results are reproducible. The graph is only read,
    and all working state is local to each call.
    """

    def __init__(self, config: Optional[RoutingConfig] = None):
        """
        Initialize the pathfinding algorithm.

        Args:
            config: Routing configuration, defaults to RoutingConfig()
        """
        self.config = config or RoutingConfig()
        self.logger = logging.getLogger(__name__)

    def cost(self, distance: float, transfers: float, prefer_fewer_transfers: bool) -> Cost:
        """Composite cost of a (distance, transfers) label."""
        if prefer_fewer_transfers:
            if self.config.exact_lexicographic:
                return (transfers, distance)
            return (transfers * self.config.transfer_penalty + distance,)
        return (distance + transfers * self.config.secondary_penalty,)

    def find_shortest_path(self, graph: RailwayGraph, start: str, end: str,
                           prefer_fewer_transfers: Optional[bool] = None) -> PathResult:
        """
        Find the best path from any node named ``start`` to any node named ``end``.

        Args:
            graph: Network graph
            start: Starting station name
            end: Destination station name
            prefer_fewer_transfers: Rank transfer count above distance;
                None uses the configured default

        Returns:
            A found PathResult, or PathResult.not_found() when either name is
            unknown or the stations are not connected
        """
        if prefer_fewer_transfers is None:
            prefer_fewer_transfers = self.config.prefer_fewer_transfers

        start_nodes = graph.nodes_for_station(start)
        end_nodes = set(graph.nodes_for_station(end))

        if not start_nodes:
            self.logger.info(f"Start station '{start}' not found in network graph")
            return PathResult.not_found()
        if not end_nodes:
            self.logger.info(f"End station '{end}' not found in network graph")
            return PathResult.not_found()

        if start == end:
            node = graph[start_nodes[0]]
            return PathResult(
                found=True,
                path=(PathStep(node.station_name, node.line_id, node.coord),),
                transfers=0,
                total_distance=0.0,
                lines=frozenset({node.line_id}),
            )

        self.logger.debug(
            f"Starting pathfinding from '{start}' ({len(start_nodes)} entries) to '{end}' "
            f"({len(end_nodes)} exits), prefer_fewer_transfers={prefer_fewer_transfers}"
        )

        distances: Dict[NodeKey, float] = {}
        transfers: Dict[NodeKey, int] = {}
        previous: Dict[NodeKey, Optional[NodeKey]] = {}
        best_costs: Dict[NodeKey, Cost] = {}
        visited = set()
        sequence = itertools.count()
        frontier: List[Tuple[Cost, int, NodeKey]] = []

        for key in start_nodes:
            distances[key] = 0.0
            transfers[key] = 0
            previous[key] = None
            best_costs[key] = self.cost(0.0, 0, prefer_fewer_transfers)
            heapq.heappush(frontier, (best_costs[key], next(sequence), key))

        nodes_explored = 0

        while frontier:
            _, _, current_key = heapq.heappop(frontier)
            if current_key in visited:
                continue
            visited.add(current_key)
            nodes_explored += 1

            if current_key in end_nodes:
                result = self._reconstruct(graph, current_key, previous,
                                           distances[current_key], transfers[current_key])
                self.logger.info(
                    f"Found path from '{start}' to '{end}' after exploring {nodes_explored} nodes: "
                    f"distance {result.total_distance:.1f}, transfers {result.transfers}"
                )
                return result

            current_distance = distances[current_key]
            current_transfers = transfers[current_key]

            for edge in graph[current_key].edges:
                neighbor_key = edge.target
                if neighbor_key in visited or neighbor_key not in graph:
                    continue

                new_distance = current_distance + edge.distance
                new_transfers = current_transfers + (1 if edge.is_transfer else 0)

                new_cost = self.cost(new_distance, new_transfers, prefer_fewer_transfers)
                # Unreached nodes have no cost yet; any label improves on them
                best_cost = best_costs.get(neighbor_key)

                if best_cost is None or new_cost < best_cost:
                    best_costs[neighbor_key] = new_cost
                    distances[neighbor_key] = new_distance
                    transfers[neighbor_key] = new_transfers
                    previous[neighbor_key] = current_key
                    heapq.heappush(frontier, (new_cost, next(sequence), neighbor_key))

        self.logger.info(f"No path found from '{start}' to '{end}' after exploring {nodes_explored} nodes")
        return PathResult.not_found()

    def _reconstruct(self, graph: RailwayGraph, end_key: NodeKey,
                     previous: Dict[NodeKey, Optional[NodeKey]],
                     total_distance: float, total_transfers: int) -> PathResult:
        """Walk predecessor links back to an entry node and build the result."""
        steps: List[PathStep] = []
        key: Optional[NodeKey] = end_key
        while key is not None:
            node = graph[key]
            steps.append(PathStep(node.station_name, node.line_id, node.coord))
            key = previous.get(key)
        steps.reverse()

        return PathResult(
            found=True,
            path=tuple(steps),
            transfers=total_transfers,
            total_distance=total_distance,
            lines=frozenset(step.line_id for step in steps),
        )


def find_shortest_path(graph: RailwayGraph, start: str, end: str,
                       prefer_fewer_transfers: bool = True) -> PathResult:
    """Find the best path with the default routing configuration."""
    return PathfindingAlgorithm().find_shortest_path(graph, start, end, prefer_fewer_transfers)

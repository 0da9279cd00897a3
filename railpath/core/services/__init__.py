"""
Core Services Package

Service implementations for graph building, routing and journey planning.
"""

from .railway_parser import RailwayDataError, ParsedNetwork, parse_station_records, parse_railway_data, get_line_color
from .special_cases import SpecialCasesIndex, process_special_cases
from .network_graph_builder import NetworkGraphBuilder, build_railway_graph, calculate_distance
from .pathfinding_algorithm import PathfindingAlgorithm, find_shortest_path
from .path_simplifier import simplify_path, describe_segments
from .travel_estimator import TravelEstimator, ElytraConsumption
from .journey_planner import JourneyPlanner
from .json_data_repository import JsonDataRepository
from .route_service import RouteService
from .service_factory import (
    ServiceFactory,
    get_service_factory,
    get_data_repository,
    get_route_service,
    refresh_all_services,
    shutdown_services
)

__all__ = [
    'RailwayDataError',
    'ParsedNetwork',
    'parse_station_records',
    'parse_railway_data',
    'get_line_color',
    'SpecialCasesIndex',
    'process_special_cases',
    'NetworkGraphBuilder',
    'build_railway_graph',
    'calculate_distance',
    'PathfindingAlgorithm',
    'find_shortest_path',
    'simplify_path',
    'describe_segments',
    'TravelEstimator',
    'ElytraConsumption',
    'JourneyPlanner',
    'JsonDataRepository',
    'RouteService',
    'ServiceFactory',
    'get_service_factory',
    'get_data_repository',
    'get_route_service',
    'refresh_all_services',
    'shutdown_services'
]

"""
Core Package

Core services, interfaces, and models for rail network routing.
"""

# Import interfaces
from .interfaces import IRouteService, IDataRepository

# Import models
from .models import (
    Coordinate, RailwayLine, RailwayGraph, PathResult, Route, RouteSegment,
    JourneyMode, JourneyResult
)

# Import services
from .services import (
    NetworkGraphBuilder, PathfindingAlgorithm, JsonDataRepository, RouteService,
    ServiceFactory, build_railway_graph, find_shortest_path, simplify_path,
    get_service_factory, get_route_service, shutdown_services
)

__all__ = [
    'IRouteService',
    'IDataRepository',
    'Coordinate',
    'RailwayLine',
    'RailwayGraph',
    'PathResult',
    'Route',
    'RouteSegment',
    'JourneyMode',
    'JourneyResult',
    'NetworkGraphBuilder',
    'PathfindingAlgorithm',
    'JsonDataRepository',
    'RouteService',
    'ServiceFactory',
    'build_railway_graph',
    'find_shortest_path',
    'simplify_path',
    'get_service_factory',
    'get_route_service',
    'shutdown_services'
]

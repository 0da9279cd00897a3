"""
Core Models Package

Data models for the rail network, router output and journeys.
"""

from .station import Coordinate, LineStation, ParsedStation
from .station_record import LineInfo, SpecialCase, SpecialCaseType, StationRecord, make_line_id
from .railway_line import RailwayLine
from .graph import GraphEdge, GraphNode, NodeKey, RailwayGraph
from .route import PathResult, PathStep, Route, RouteSegment
from .journey import JourneyMode, JourneyResult, RailSegment, WalkSegment

__all__ = [
    'Coordinate',
    'LineStation',
    'ParsedStation',
    'LineInfo',
    'SpecialCase',
    'SpecialCaseType',
    'StationRecord',
    'make_line_id',
    'RailwayLine',
    'GraphEdge',
    'GraphNode',
    'NodeKey',
    'RailwayGraph',
    'PathResult',
    'PathStep',
    'Route',
    'RouteSegment',
    'JourneyMode',
    'JourneyResult',
    'RailSegment',
    'WalkSegment',
]

"""
Core Interfaces Package

Interface definitions for the railway routing services.
"""

from .i_data_repository import IDataRepository
from .i_route_service import IRouteService

__all__ = [
    'IDataRepository',
    'IRouteService'
]

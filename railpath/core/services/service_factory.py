"""
Service Factory

Factory for creating and managing core service instances.
"""

import logging
from typing import Any, Dict, Optional

from ...managers.config_manager import ConfigData
from ..interfaces.i_data_repository import IDataRepository
from ..interfaces.i_route_service import IRouteService
from .json_data_repository import JsonDataRepository
from .route_service import RouteService


class ServiceFactory:
    """Factory for creating and managing core service instances."""

    def __init__(self, config: Optional[ConfigData] = None):
        """
        Initialize the service factory.

        Args:
            config: Application configuration; its ``data`` section names the
                data directory and world
        """
        self.logger = logging.getLogger(__name__)
        self.config = config or ConfigData()

        # Service instances (singletons)
        self._data_repository: Optional[IDataRepository] = None
        self._route_service: Optional[IRouteService] = None

        self.logger.info(f"Initialized ServiceFactory for world '{self.config.data.world_id}'")

    def get_data_repository(self) -> IDataRepository:
        """Get or create the data repository instance."""
        if self._data_repository is None:
            self._data_repository = JsonDataRepository(
                self.config.data.data_directory, self.config.data.world_id
            )
            self.logger.info("Created JsonDataRepository instance")

        return self._data_repository

    def get_route_service(self) -> IRouteService:
        """Get or create the route service instance."""
        if self._route_service is None:
            self._route_service = RouteService(self.get_data_repository(), self.config)
            self.logger.info("Created RouteService instance")

        return self._route_service

    def refresh_all_services(self) -> None:
        """Reload data and rebuild the network graph."""
        if self._route_service is not None:
            self._route_service.refresh()
        elif self._data_repository is not None:
            self._data_repository.refresh_data()
        self.logger.info("All services refreshed")

    def get_service_statistics(self) -> Dict[str, Any]:
        """Get statistics from the services created so far."""
        stats: Dict[str, Any] = {}
        if self._data_repository is not None and hasattr(self._data_repository, 'get_network_statistics'):
            stats['data_repository'] = self._data_repository.get_network_statistics()
        if self._route_service is not None:
            stats['route_service'] = self._route_service.get_route_statistics()
        return stats

    def shutdown(self) -> None:
        """Drop all service instances."""
        self._data_repository = None
        self._route_service = None
        self.logger.info("All services shut down")


# Global service factory instance
_service_factory: Optional[ServiceFactory] = None


def get_service_factory(config: Optional[ConfigData] = None) -> ServiceFactory:
    """Get the global service factory instance."""
    global _service_factory

    if _service_factory is None:
        _service_factory = ServiceFactory(config)

    return _service_factory


def get_data_repository() -> IDataRepository:
    """Get the data repository service."""
    return get_service_factory().get_data_repository()


def get_route_service() -> IRouteService:
    """Get the route service."""
    return get_service_factory().get_route_service()


def refresh_all_services() -> None:
    """Refresh all services of the global factory."""
    get_service_factory().refresh_all_services()


def shutdown_services() -> None:
    """Shut down and forget the global service factory."""
    global _service_factory

    if _service_factory is not None:
        _service_factory.shutdown()
        _service_factory = None

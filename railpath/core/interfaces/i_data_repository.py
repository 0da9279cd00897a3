"""
Data Repository Interface

Interface for loading the railway station listing.
"""

from abc import ABC, abstractmethod
from typing import Dict, List

from ..models.railway_line import RailwayLine
from ..models.station import ParsedStation
from ..models.station_record import StationRecord


class IDataRepository(ABC):
    """Interface for data repository operations."""

    @abstractmethod
    def load_station_records(self) -> List[StationRecord]:
        """
        Load the raw station records, special cases included.

        Returns:
            List of StationRecord objects
        """
        pass

    @abstractmethod
    def load_railway_lines(self) -> List[RailwayLine]:
        """
        Load all railway lines with their stations in order.

        Returns:
            List of RailwayLine objects
        """
        pass

    @abstractmethod
    def get_station_index(self) -> Dict[str, ParsedStation]:
        """
        Get every station keyed by name.

        Returns:
            Dictionary mapping station names to ParsedStation objects
        """
        pass

    @abstractmethod
    def refresh_data(self) -> bool:
        """
        Drop cached data so the next load reads the source again.

        Returns:
            True if the cache was cleared
        """
        pass

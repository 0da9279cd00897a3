"""
JSON Data Repository Implementation

Repository implementation for loading the station listing of one world from
a JSON file.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..interfaces.i_data_repository import IDataRepository
from ..models.railway_line import RailwayLine
from ..models.station import ParsedStation
from ..models.station_record import StationRecord
from .railway_parser import ParsedNetwork, RailwayDataError, parse_railway_data, parse_station_records


class JsonDataRepository(IDataRepository):
    """Repository implementation for JSON station listings."""

    def __init__(self, data_directory: Optional[str] = None, world_id: str = "zth"):
        """
        Initialize the JSON data repository.

        Args:
            data_directory: Directory holding ``railway/<world_id>.json``;
                resolved by the data path resolver when None
            world_id: Which world's listing to read
        """
        from ...utils.data_path_resolver import get_data_directory

        self.data_directory = get_data_directory(data_directory)
        self.world_id = world_id
        self.railway_file = self.data_directory / "railway" / f"{world_id}.json"
        self.logger = logging.getLogger(__name__)

        # Cache for loaded data
        self._records_cache: Optional[List[StationRecord]] = None
        self._network_cache: Optional[ParsedNetwork] = None
        self._last_loaded: Optional[datetime] = None

        self.logger.info(f"Initialized JsonDataRepository for world '{world_id}' at {self.railway_file}")

    def _read_json(self, path: Path) -> Any:
        """Read a JSON file, converting failures into RailwayDataError."""
        if not path.exists():
            raise RailwayDataError(f"Railway data file not found: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            self.logger.error(f"MALFORMED JSON in {path} at line {e.lineno}, column {e.colno}: {e}")
            raise RailwayDataError(f"Invalid JSON in railway data file {path}: {e}") from e
        except OSError as e:
            raise RailwayDataError(f"Failed to read railway data file {path}: {e}") from e

    def _ensure_data_loaded(self) -> ParsedNetwork:
        """Load and parse the listing if it is not cached yet."""
        if self._records_cache is None or self._network_cache is None:
            self.logger.info(f"Loading railway data from {self.railway_file}")
            raw = self._read_json(self.railway_file)
            self._records_cache = parse_station_records(raw)
            self._network_cache = parse_railway_data(self._records_cache)
            self._last_loaded = datetime.now()
            self.logger.info(
                f"Loaded {len(self._network_cache.station_index)} stations and "
                f"{len(self._network_cache.lines)} railway lines"
            )
        return self._network_cache

    def load_station_records(self) -> List[StationRecord]:
        """Load the raw station records, special cases included."""
        self._ensure_data_loaded()
        return list(self._records_cache)

    def load_railway_lines(self) -> List[RailwayLine]:
        """Load all railway lines, sorted by bureau then line number."""
        return list(self._ensure_data_loaded().lines)

    def get_station_index(self) -> Dict[str, ParsedStation]:
        """Get every station keyed by name."""
        return dict(self._ensure_data_loaded().station_index)

    def get_stations(self) -> List[ParsedStation]:
        """Get every station in listing order."""
        return self._ensure_data_loaded().stations

    def get_railway_line_by_id(self, line_id: str) -> Optional[RailwayLine]:
        """Get a railway line by its ``bureau-line`` id."""
        for line in self._ensure_data_loaded().lines:
            if line.line_id == line_id:
                return line
        return None

    def refresh_data(self) -> bool:
        """Clear cached data; the next load reads the file again."""
        self._records_cache = None
        self._network_cache = None
        self._last_loaded = None
        self.logger.info("Railway data cache cleared")
        return True

    def get_network_statistics(self) -> Dict[str, Any]:
        """Summary of the loaded listing."""
        network = self._ensure_data_loaded()
        transfer_stations = sum(1 for station in network.stations if station.is_transfer)
        return {
            "world_id": self.world_id,
            "total_stations": len(network.station_index),
            "total_lines": len(network.lines),
            "transfer_stations": transfer_stations,
            "last_loaded": self._last_loaded.isoformat() if self._last_loaded else None,
        }

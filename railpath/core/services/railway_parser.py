"""
Railway Data Parser

Turns the raw station listing (one record per station, each naming the lines
that serve it) into ordered railway lines and a per-name station index.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from ..models.railway_line import RailwayLine
from ..models.station import LineStation, ParsedStation
from ..models.station_record import LineInfo, StationRecord

logger = logging.getLogger(__name__)

LINE_COLORS: Dict[str, str] = {
    # R bureau
    'R-1': '#E53935',
    'R-2': '#D32F2F',
    'R-3': '#C62828',
    'R-4': '#B71C1C',
    'R-5': '#FF5252',
    'R-6': '#FF1744',
    # H bureau
    'H-1': '#1E88E5',
    'H-2': '#1976D2',
    'H-3': '#1565C0',
    'H-4': '#0D47A1',
    'H-5': '#2196F3',
    'H-6': '#03A9F4',
    'H-10': '#00BCD4',
    'H-101': '#0097A7',
    'H-201': '#00838F',
    # T bureau
    'T-1': '#43A047',
    'T-2': '#388E3C',
    'T-3': '#2E7D32',
    'T-4': '#1B5E20',
    'T-5': '#4CAF50',
    'T-6': '#8BC34A',
    # G bureau
    'G-1': '#8E24AA',
    'G-2': '#7B1FA2',
    'G-3': '#6A1B9A',
    'G-4': '#4A148C',
    'G-5': '#9C27B0',
    'G-6': '#AB47BC',
}


class RailwayDataError(Exception):
    """Raised when the railway data source cannot be read or has the wrong shape."""

    pass


@dataclass
class ParsedNetwork:
    """Lines in display order plus the station index keyed by name."""

    lines: List[RailwayLine] = field(default_factory=list)
    station_index: Dict[str, ParsedStation] = field(default_factory=dict)

    @property
    def stations(self) -> List[ParsedStation]:
        return list(self.station_index.values())


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def get_line_color(line_id: str) -> str:
    """
    Colour for a line.

    Known lines use the fixed palette; any other id gets a stable hue derived
    from a 32-bit string hash.
    """
    if line_id in LINE_COLORS:
        return LINE_COLORS[line_id]

    hash_value = 0
    for char in line_id:
        hash_value = ord(char) + (_to_int32(_to_int32(hash_value) << 5) - hash_value)

    hue = abs(hash_value) % 360
    return f"hsl({hue}, 70%, 50%)"


def parse_station_records(raw: Any) -> List[StationRecord]:
    """
    Parse the JSON station listing into StationRecord objects.

    Records without a name or without any line are skipped with a warning.

    Raises:
        RailwayDataError: if the payload is not a list
    """
    if not isinstance(raw, list):
        raise RailwayDataError(
            f"Station listing must be a JSON array, got {type(raw).__name__}"
        )

    records = []
    for position, item in enumerate(raw):
        if not isinstance(item, dict):
            logger.warning(f"Skipping station entry {position}: not an object")
            continue
        try:
            record = StationRecord.from_dict(item)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Skipping malformed station entry {position}: {e}")
            continue
        if not record.station_name or not record.lines:
            logger.warning(f"Skipping station entry {position}: missing name or lines")
            continue
        records.append(record)

    logger.info(f"Parsed {len(records)} of {len(raw)} station records")
    return records


def _line_sort_key(line: RailwayLine) -> Tuple[str, int, Any]:
    # Bureau first, then numeric line numbers before falling back to text
    number = line.line or ""
    try:
        return (line.bureau or "", 0, int(number))
    except ValueError:
        return (line.bureau or "", 1, number)


def parse_railway_data(records: List[StationRecord]) -> ParsedNetwork:
    """
    Group station records into lines ordered by station code.

    Args:
        records: Parsed station records

    Returns:
        ParsedNetwork with lines sorted by bureau then line number
    """
    # line id -> station code -> (name, info); a repeated code keeps the last entry
    line_index: Dict[str, Dict[int, Tuple[str, LineInfo]]] = {}
    station_index: Dict[str, ParsedStation] = {}

    for record in records:
        line_ids = []
        for info in record.lines:
            line_ids.append(info.line_id)
            line_index.setdefault(info.line_id, {})[info.station_code] = (record.station_name, info)

        existing = station_index.get(record.station_name)
        if existing is None:
            first = record.lines[0]
            station_index[record.station_name] = ParsedStation(
                name=record.station_name,
                coord=first.coord,
                station_code=first.station_code,
                is_transfer=len(record.lines) > 1,
                lines=tuple(dict.fromkeys(line_ids)),
            )
        else:
            merged = tuple(dict.fromkeys(existing.lines + tuple(line_ids)))
            station_index[record.station_name] = ParsedStation(
                name=existing.name,
                coord=existing.coord,
                station_code=existing.station_code,
                is_transfer=True,
                lines=merged,
            )

    lines = []
    for line_id, stations_by_code in line_index.items():
        ordered = sorted(stations_by_code.items(), key=lambda item: item[0])
        bureau, _, line_number = line_id.partition("-")
        stations = tuple(
            LineStation(name=name, coord=info.coord, station_code=code)
            for code, (name, info) in ordered
        )
        lines.append(RailwayLine(
            line_id=line_id,
            stations=stations,
            bureau=bureau,
            line=line_number,
            color=get_line_color(line_id),
        ))

    lines.sort(key=_line_sort_key)
    logger.info(f"Parsed {len(lines)} lines and {len(station_index)} stations")
    return ParsedNetwork(lines=lines, station_index=station_index)


"""
Station Record Model

Raw station listing types as delivered by the railway data source: one record
per physical station, naming every line that serves it.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from .station import Coordinate

logger = logging.getLogger(__name__)


def make_line_id(bureau: str, line: str) -> str:
    """Build the line identifier used throughout the graph (``bureau-line``)."""
    return f"{bureau}-{line}"


class SpecialCaseType(Enum):
    """Kinds of per-station routing exceptions.

    The values keep the spelling used by the data source.
    """
    DIRECTION_NOT_AVAILABLE = "directionNotAvaliable"
    LINE_NOT_AVAILABLE = "lineNotAvaliable"
    THROUGH_TRAIN = "throughTrain"
    LINE_OVERTAKING = "lineOvertaking"


@dataclass(frozen=True)
class LineInfo:
    """One line serving a station, with the station's position on that line."""

    bureau: str
    line: str
    station_code: int
    coord: Coordinate
    distance: float = 0.0  # distance from the previous station, as published

    @property
    def line_id(self) -> str:
        return make_line_id(self.bureau, self.line)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LineInfo':
        """Create LineInfo from the data source's dictionary representation."""
        return cls(
            bureau=str(data["bureau"]),
            line=str(data["line"]),
            station_code=int(data["stationCode"]),
            coord=Coordinate.from_dict(data.get("coord") or {}),
            distance=float(data.get("distance") or 0),
        )


@dataclass(frozen=True)
class SpecialCase:
    """
    A routing exception attached to a station.

    The target fields that are meaningful depend on the case type:

    - direction / line not available, overtaking: ``bureau`` and ``line``
      (plus ``is_train_up`` or ``station_code`` respectively)
    - through train: ``bureau1``/``line1`` and ``bureau2``/``line2``
    """

    case_type: str
    bureau: Optional[str] = None
    line: Optional[str] = None
    is_train_up: Optional[bool] = None
    station_code: Optional[int] = None
    bureau1: Optional[str] = None
    line1: Optional[str] = None
    bureau2: Optional[str] = None
    line2: Optional[str] = None

    @property
    def line_id(self) -> Optional[str]:
        if self.bureau is None or self.line is None:
            return None
        return make_line_id(self.bureau, self.line)

    @property
    def through_line_ids(self) -> Optional[Tuple[str, str]]:
        """Both line ids of a through-train pairing, or None if incomplete."""
        if None in (self.bureau1, self.line1, self.bureau2, self.line2):
            return None
        return make_line_id(self.bureau1, self.line1), make_line_id(self.bureau2, self.line2)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SpecialCase':
        target = data.get("target") or {}
        station_code = target.get("stationCode")
        return cls(
            case_type=str(data.get("type", "")),
            bureau=_optional_str(target.get("bureau")),
            line=_optional_str(target.get("line")),
            is_train_up=target.get("isTrainUp"),
            station_code=int(station_code) if station_code is not None else None,
            bureau1=_optional_str(target.get("bureau1")),
            line1=_optional_str(target.get("line1")),
            bureau2=_optional_str(target.get("bureau2")),
            line2=_optional_str(target.get("line2")),
        )


@dataclass(frozen=True)
class StationRecord:
    """A station in the raw listing with every line that serves it."""

    station_name: str
    lines: Tuple[LineInfo, ...]
    special_cases: Tuple[SpecialCase, ...] = field(default_factory=tuple)

    @property
    def line_ids(self) -> Tuple[str, ...]:
        return tuple(info.line_id for info in self.lines)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'StationRecord':
        """
        Create a StationRecord from the data source's dictionary representation.

        A malformed special case is dropped with a warning; the station and
        its lines are kept.

        Raises:
            KeyError: if a required field is missing
            ValueError: if a line's station code or coordinate is not numeric
        """
        station_name = str(data["stationName"])
        lines = tuple(LineInfo.from_dict(line) for line in data["lines"])

        special_cases = []
        for case in data.get("specialCases") or []:
            try:
                special_cases.append(SpecialCase.from_dict(case))
            except (AttributeError, TypeError, ValueError) as e:
                logger.warning(f"Ignoring malformed special case at {station_name}: {e}")

        return cls(
            station_name=station_name,
            lines=lines,
            special_cases=tuple(special_cases),
        )


def _optional_str(value: Any) -> Optional[str]:
    return None if value is None else str(value)

"""
Special Cases

Indexes the per-station routing exceptions carried by the raw station listing
so the graph builder can apply them while wiring edges.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Set

from ..models.graph import NodeKey
from ..models.station_record import SpecialCaseType, StationRecord

logger = logging.getLogger(__name__)

DIRECTION_UP = "up"
DIRECTION_DOWN = "down"


@dataclass
class SpecialCasesIndex:
    """
    Special cases keyed by graph node.

    - blocked_directions: node -> {"up", "down"}; "up" blocks the edge to the
      previous station on the line, "down" the edge to the next one
    - unavailable_lines: nodes that must not be created
    - overtaking: node -> station code the next-station edge jumps to
    - through_trains: node -> line id whose transfer is not counted
    """

    blocked_directions: Dict[NodeKey, Set[str]] = field(default_factory=dict)
    unavailable_lines: Set[NodeKey] = field(default_factory=set)
    overtaking: Dict[NodeKey, int] = field(default_factory=dict)
    through_trains: Dict[NodeKey, str] = field(default_factory=dict)

    def is_blocked(self, key: NodeKey, direction: str) -> bool:
        return direction in self.blocked_directions.get(key, ())

    def is_unavailable(self, key: NodeKey) -> bool:
        return key in self.unavailable_lines

    def overtaking_target(self, key: NodeKey) -> Optional[int]:
        return self.overtaking.get(key)

    def is_through_train(self, key: NodeKey, other_line_id: str) -> bool:
        return self.through_trains.get(key) == other_line_id

    def __len__(self) -> int:
        return (
            len(self.blocked_directions)
            + len(self.unavailable_lines)
            + len(self.overtaking)
            + len(self.through_trains)
        )


def process_special_cases(records: Optional[Iterable[StationRecord]]) -> SpecialCasesIndex:
    """
    Build a SpecialCasesIndex from station records.

    Args:
        records: Raw station records; None yields an empty index

    Returns:
        The populated index
    """
    index = SpecialCasesIndex()
    if not records:
        return index

    for record in records:
        name = record.station_name
        for case in record.special_cases:
            if case.case_type == SpecialCaseType.DIRECTION_NOT_AVAILABLE.value:
                if case.line_id is None:
                    continue
                direction = DIRECTION_UP if case.is_train_up else DIRECTION_DOWN
                index.blocked_directions.setdefault((name, case.line_id), set()).add(direction)

            elif case.case_type == SpecialCaseType.LINE_NOT_AVAILABLE.value:
                if case.line_id is None:
                    continue
                index.unavailable_lines.add((name, case.line_id))

            elif case.case_type == SpecialCaseType.LINE_OVERTAKING.value:
                if case.line_id is None or case.station_code is None:
                    continue
                index.overtaking[(name, case.line_id)] = case.station_code

            elif case.case_type == SpecialCaseType.THROUGH_TRAIN.value:
                pair = case.through_line_ids
                if pair is None:
                    continue
                first, second = pair
                index.through_trains[(name, first)] = second
                index.through_trains[(name, second)] = first

            else:
                logger.debug(f"Ignoring unknown special case '{case.case_type}' at {name}")

    logger.debug(f"Indexed {len(index)} special case entries")
    return index

"""
Global pytest configuration and fixtures.
"""

import json

import pytest

from railpath.core.models.railway_line import RailwayLine
from railpath.core.models.station import Coordinate, LineStation


def make_line(line_id, *stations, edge_lengths=None):
    """Build a RailwayLine from ``(name, x, z)`` tuples."""
    return RailwayLine(
        line_id=line_id,
        stations=tuple(
            LineStation(name=name, coord=Coordinate(x, 64, z), station_code=index + 1)
            for index, (name, x, z) in enumerate(stations)
        ),
        edge_lengths=edge_lengths,
    )


def station_entry(name, lines, special_cases=None):
    """Raw station listing entry; ``lines`` holds ``(bureau, line, code, x, z)`` tuples."""
    entry = {
        "stationName": name,
        "lines": [
            {
                "bureau": bureau,
                "line": line,
                "stationCode": code,
                "coord": {"x": x, "y": 64, "z": z},
            }
            for bureau, line, code, x, z in lines
        ],
    }
    if special_cases is not None:
        entry["specialCases"] = special_cases
    return entry


@pytest.fixture
def line_factory():
    """Provide the line builder helper."""
    return make_line


@pytest.fixture
def simple_lines():
    """
    Two lines crossing at B.

    L1: A(0,0) - B(10,0) - C(20,0)
    L2: B(10,0) - D(10,10)
    """
    return [
        make_line("L1", ("A", 0, 0), ("B", 10, 0), ("C", 20, 0)),
        make_line("L2", ("B", 10, 0), ("D", 10, 10)),
    ]


@pytest.fixture
def transfer_lines():
    """
    A long direct line against a short route with one change.

    L1: P - Q and L2: Q - R are 5 each; L3 runs P - R directly with a
    published length of 1000.
    """
    return [
        make_line("L1", ("P", 0, 0), ("Q", 5, 0)),
        make_line("L2", ("Q", 5, 0), ("R", 10, 0)),
        make_line("L3", ("P", 0, 0), ("R", 10, 0), edge_lengths=(1000.0,)),
    ]


@pytest.fixture
def sample_listing():
    """Raw station listing for a small two-line world."""
    return [
        station_entry("Alpha", [("R", "1", 1, 0, 0)]),
        station_entry("Bravo", [("R", "1", 2, 100, 0), ("H", "2", 1, 100, 0)]),
        station_entry("Charlie", [("R", "1", 3, 200, 0)]),
        station_entry("Delta", [("H", "2", 2, 100, 300)]),
    ]


@pytest.fixture
def data_directory(tmp_path, sample_listing):
    """Data directory holding ``railway/zth.json`` with the sample listing."""
    railway_dir = tmp_path / "railway"
    railway_dir.mkdir()
    with open(railway_dir / "zth.json", "w", encoding="utf-8") as f:
        json.dump(sample_listing, f)
    return tmp_path


@pytest.fixture
def entry_factory():
    """Provide the raw station entry builder."""
    return station_entry

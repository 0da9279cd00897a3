"""
Unit tests for the railway data parser.
"""

import logging

import pytest

from railpath.core.models.station import Coordinate
from railpath.core.services.railway_parser import (
    LINE_COLORS,
    RailwayDataError,
    get_line_color,
    parse_railway_data,
    parse_station_records,
)


class TestParseStationRecords:
    """Test reading the raw listing."""

    def test_valid_listing(self, sample_listing):
        records = parse_station_records(sample_listing)

        assert [r.station_name for r in records] == ["Alpha", "Bravo", "Charlie", "Delta"]
        assert records[1].line_ids == ("R-1", "H-2")

    @pytest.mark.parametrize("payload", [{"stations": []}, "text", None, 42])
    def test_non_list_payload_raises(self, payload):
        with pytest.raises(RailwayDataError):
            parse_station_records(payload)

    def test_malformed_entries_are_skipped(self, entry_factory, caplog):
        raw = [
            entry_factory("Alpha", [("R", "1", 1, 0, 0)]),
            "not an object",
            {"stationName": "No Lines Key"},
            {"stationName": "Bad Code", "lines": [{"bureau": "R", "line": "1", "stationCode": "x"}]},
            entry_factory("", [("R", "1", 2, 0, 0)]),
            entry_factory("Empty", []),
        ]

        with caplog.at_level(logging.WARNING, logger="railpath.core.services.railway_parser"):
            records = parse_station_records(raw)

        assert [r.station_name for r in records] == ["Alpha"]
        assert len([r for r in caplog.records if r.levelname == "WARNING"]) == 5

    def test_empty_listing(self):
        assert parse_station_records([]) == []


class TestParseRailwayData:
    """Test grouping records into lines."""

    def test_lines_and_station_index(self, sample_listing):
        network = parse_railway_data(parse_station_records(sample_listing))

        assert [line.line_id for line in network.lines] == ["H-2", "R-1"]
        r1 = network.lines[1]
        assert r1.station_names == ["Alpha", "Bravo", "Charlie"]
        assert r1.bureau == "R"
        assert r1.line == "1"
        assert r1.color == LINE_COLORS["R-1"]

        bravo = network.station_index["Bravo"]
        assert bravo.is_transfer
        assert bravo.lines == ("R-1", "H-2")
        assert bravo.coord == Coordinate(100, 64, 0)
        assert bravo.station_code == 2
        assert not network.station_index["Alpha"].is_transfer
        assert len(network.stations) == 4

    def test_stations_ordered_by_code(self, entry_factory):
        raw = [
            entry_factory("Third", [("T", "1", 30, 0, 0)]),
            entry_factory("First", [("T", "1", 10, 0, 0)]),
            entry_factory("Second", [("T", "1", 20, 0, 0)]),
        ]

        network = parse_railway_data(parse_station_records(raw))

        assert network.lines[0].station_names == ["First", "Second", "Third"]
        assert [s.station_code for s in network.lines[0].stations] == [10, 20, 30]

    def test_duplicate_code_keeps_last(self, entry_factory):
        raw = [
            entry_factory("Old", [("T", "1", 1, 0, 0)]),
            entry_factory("New", [("T", "1", 1, 5, 5)]),
        ]

        network = parse_railway_data(parse_station_records(raw))

        assert network.lines[0].station_names == ["New"]

    def test_numeric_lines_sort_before_text(self, entry_factory):
        raw = [
            entry_factory("A", [("R", "10", 1, 0, 0)]),
            entry_factory("B", [("R", "Loop", 1, 0, 0)]),
            entry_factory("C", [("R", "2", 1, 0, 0)]),
            entry_factory("D", [("G", "5", 1, 0, 0)]),
        ]

        network = parse_railway_data(parse_station_records(raw))

        assert [line.line_id for line in network.lines] == ["G-5", "R-2", "R-10", "R-Loop"]

    def test_line_with_letter_suffix_sorts_as_text(self, entry_factory):
        raw = [
            entry_factory("A", [("R", "10A", 1, 0, 0)]),
            entry_factory("B", [("R", "12", 1, 0, 0)]),
            entry_factory("C", [("R", "9", 1, 0, 0)]),
        ]

        network = parse_railway_data(parse_station_records(raw))

        assert [line.line_id for line in network.lines] == ["R-9", "R-12", "R-10A"]

    def test_repeated_station_name_merges_lines(self, entry_factory):
        raw = [
            entry_factory("Hub", [("R", "1", 1, 0, 0)]),
            entry_factory("Hub", [("H", "1", 1, 50, 50)]),
        ]

        network = parse_railway_data(parse_station_records(raw))

        hub = network.station_index["Hub"]
        assert hub.is_transfer
        assert hub.lines == ("R-1", "H-1")
        assert hub.coord == Coordinate(0, 64, 0)


class TestLineColor:
    """Test line colour selection."""

    def test_known_line_uses_palette(self):
        assert get_line_color("T-3") == "#2E7D32"

    def test_unknown_line_gets_stable_hue(self):
        assert get_line_color("X-1") == "hsl(332, 70%, 50%)"
        assert get_line_color("X-1") == get_line_color("X-1")
        assert get_line_color("Z-99").startswith("hsl(")


class TestMalformedSpecialCases:
    """Test that a bad special case does not cost the station."""

    def test_station_kept_when_special_case_is_malformed(self, entry_factory, caplog):
        raw = [entry_factory("Bravo", [("R", "1", 2, 100, 0)], special_cases=[
            {"type": "lineOvertaking", "target": {"bureau": "R", "line": "1", "stationCode": "n/a"}},
            "not a case",
            {"type": "directionNotAvaliable", "target": {"bureau": "R", "line": "1", "isTrainUp": True}},
        ])]

        with caplog.at_level(logging.WARNING, logger="railpath.core.models.station_record"):
            records = parse_station_records(raw)

        assert [r.station_name for r in records] == ["Bravo"]
        assert records[0].line_ids == ("R-1",)
        assert [c.case_type for c in records[0].special_cases] == ["directionNotAvaliable"]
        assert len([r for r in caplog.records if r.levelname == "WARNING"]) == 2

        network = parse_railway_data(records)
        assert network.lines[0].station_names == ["Bravo"]

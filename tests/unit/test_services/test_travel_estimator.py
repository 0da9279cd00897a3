"""
Unit tests for TravelEstimator.
"""

import pytest

from railpath.core.models.journey import JourneyMode, JourneyResult
from railpath.core.services.travel_estimator import TravelEstimator
from railpath.managers.config_manager import TravelConfig


class TestTravelTimes:
    """Test time estimates."""

    def test_walk_time_uses_elytra_by_default(self):
        estimator = TravelEstimator()

        assert estimator.calculate_walk_time(400) == 10.0

    def test_walk_time_on_foot(self):
        estimator = TravelEstimator()

        assert estimator.calculate_walk_time(4317, use_elytra=False) == pytest.approx(1000.0)

    def test_walk_time_follows_config(self):
        estimator = TravelEstimator(TravelConfig(use_elytra=False, walk_speed_mps=5.0))

        assert estimator.calculate_walk_time(100) == 20.0

    def test_rail_time(self):
        assert TravelEstimator().calculate_rail_time(150) == 10.0

    def test_estimate_travel_time(self):
        journey = JourneyResult(
            found=True,
            mode=JourneyMode.RAIL,
            total_walk_distance=400.0,
            total_rail_distance=300.0,
            total_transfers=2,
        )

        assert TravelEstimator().estimate_travel_time(journey) == pytest.approx(60.0)


class TestElytraConsumption:
    """Test elytra wear calculation."""

    def test_short_flight(self):
        consumption = TravelEstimator().calculate_elytra_consumption(1000)

        assert consumption.flight_time == 25.0
        assert consumption.durability_used == 25
        assert consumption.durability_used_unbreaking == 7
        assert consumption.fireworks_used == 20
        assert consumption.elytra_count == 1
        assert consumption.elytra_count_unbreaking == 1

    def test_long_flight_needs_several_elytra(self):
        consumption = TravelEstimator().calculate_elytra_consumption(20000)

        assert consumption.durability_used == 500
        assert consumption.durability_used_unbreaking == 125
        assert consumption.fireworks_used == 400
        assert consumption.elytra_count == 2
        assert consumption.elytra_count_unbreaking == 1

    def test_zero_distance(self):
        consumption = TravelEstimator().calculate_elytra_consumption(0)

        assert consumption.flight_time == 0
        assert consumption.durability_used == 0
        assert consumption.fireworks_used == 0
        assert consumption.elytra_count == 0

"""
Travel Estimator

Estimates journey durations from walking and rail distances, and the elytra
wear of flying the walking legs instead.
"""

import math
from dataclasses import dataclass
from typing import Optional

from ...managers.config_manager import TravelConfig
from ..models.journey import JourneyResult


@dataclass(frozen=True)
class ElytraConsumption:
    """Resources used to fly a given distance."""

    flight_time: float                  # seconds
    durability_used: int                # without enchantments
    durability_used_unbreaking: int     # with Unbreaking III
    fireworks_used: int
    elytra_count: int
    elytra_count_unbreaking: int


class TravelEstimator:
    """Turns distances into estimated travel times using TravelConfig speeds."""

    def __init__(self, config: Optional[TravelConfig] = None):
        self.config = config or TravelConfig()

    def _use_elytra(self, use_elytra: Optional[bool]) -> bool:
        return self.config.use_elytra if use_elytra is None else use_elytra

    def calculate_walk_time(self, distance: float, use_elytra: Optional[bool] = None) -> float:
        """Seconds to cover ``distance`` on foot, or by elytra when enabled."""
        speed = self.config.elytra_speed_mps if self._use_elytra(use_elytra) else self.config.walk_speed_mps
        return distance / speed

    def calculate_rail_time(self, distance: float) -> float:
        """Seconds to cover ``distance`` by rail."""
        return distance / self.config.rail_speed_mps

    def estimate_travel_time(self, result: JourneyResult, use_elytra: Optional[bool] = None) -> float:
        """
        Estimated journey time in seconds (lower is better).

        Walking, rail and a fixed penalty per transfer are summed.
        """
        walk_time = self.calculate_walk_time(result.total_walk_distance, use_elytra)
        rail_time = self.calculate_rail_time(result.total_rail_distance)
        transfer_time = result.total_transfers * self.config.transfer_penalty_seconds
        return walk_time + rail_time + transfer_time

    def calculate_elytra_consumption(self, walk_distance: float) -> ElytraConsumption:
        """Elytra durability and fireworks needed to fly ``walk_distance``."""
        config = self.config
        flight_time = walk_distance / config.elytra_speed_mps
        durability_used = math.ceil(flight_time * config.elytra_drain_per_second)
        durability_used_unbreaking = math.ceil(durability_used / config.unbreaking_multiplier)

        return ElytraConsumption(
            flight_time=flight_time,
            durability_used=durability_used,
            durability_used_unbreaking=durability_used_unbreaking,
            fireworks_used=math.ceil(walk_distance / config.firework_distance_m),
            elytra_count=math.ceil(durability_used / config.elytra_max_durability),
            elytra_count_unbreaking=math.ceil(durability_used_unbreaking / config.elytra_max_durability),
        )

"""Routing domain models."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Hashable, List

from ...config import settings
from ...models.domain import Point, Stop


class InvalidRouteConfig(ValueError):
    """Raised when route estimation parameters cannot produce a valid estimate."""


@dataclass(frozen=True, slots=True)
class RouteConfig:
    avg_speed_kmh: float = field(default_factory=lambda: settings.avg_speed_kmh)
    minutes_per_stop: float = field(default_factory=lambda: settings.minutes_per_stop)

    def __post_init__(self) -> None:
        if not math.isfinite(self.avg_speed_kmh) or self.avg_speed_kmh <= 0:
            raise InvalidRouteConfig(f"avg_speed_kmh must be a positive number, got {self.avg_speed_kmh!r}")
        if not math.isfinite(self.minutes_per_stop) or self.minutes_per_stop < 0:
            raise InvalidRouteConfig(f"minutes_per_stop must be zero or greater, got {self.minutes_per_stop!r}")


@dataclass(slots=True)
class RouteLeg:
    stop_id: Hashable
    sequence: int
    distance_from_prev_km: float
    cumulative_distance_km: float
    arrival_min: float


@dataclass(slots=True)
class RouteEstimate:
    total_distance_km: float
    estimated_minutes: float
    travel_minutes: float = 0.0
    dwell_minutes: float = 0.0
    legs: List[RouteLeg] = field(default_factory=list)


@dataclass(slots=True)
class OptimizedRoute:
    origin: Point
    tour: List[Stop]
    estimate: RouteEstimate

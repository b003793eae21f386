"""Distance and time estimates for an ordered tour."""

from __future__ import annotations

from typing import Sequence

from ...models.domain import Point, Stop
from ..geospatial import haversine_km
from .models import RouteConfig, RouteEstimate, RouteLeg


def _travel_minutes(distance_km: float, speed_kmh: float) -> float:
    return (distance_km / speed_kmh) * 60.0


def estimate_route(origin: Point, tour: Sequence[Stop], config: RouteConfig | None = None) -> RouteEstimate:
    """Sum the legs origin -> tour[0] -> ... -> tour[-1] and derive minutes.

    ``estimated_minutes`` is travel time at ``config.avg_speed_kmh`` plus
    ``config.minutes_per_stop`` for every stop.
    """
    config = config or RouteConfig()

    legs: list[RouteLeg] = []
    total_distance = 0.0
    current = origin
    for sequence, stop in enumerate(tour, start=1):
        leg_distance = haversine_km(current, stop.location)
        total_distance += leg_distance
        # Dwell time of every stop already visited delays this arrival.
        arrival = _travel_minutes(total_distance, config.avg_speed_kmh) + (sequence - 1) * config.minutes_per_stop
        legs.append(
            RouteLeg(
                stop_id=stop.id,
                sequence=sequence,
                distance_from_prev_km=leg_distance,
                cumulative_distance_km=total_distance,
                arrival_min=arrival,
            )
        )
        current = stop.location

    travel = _travel_minutes(total_distance, config.avg_speed_kmh)
    dwell = len(tour) * config.minutes_per_stop
    return RouteEstimate(
        total_distance_km=total_distance,
        estimated_minutes=travel + dwell,
        travel_minutes=travel,
        dwell_minutes=dwell,
        legs=legs,
    )

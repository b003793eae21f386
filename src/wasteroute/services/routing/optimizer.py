"""Route optimization entry points.

``optimize`` orders a cleaner's stops and estimates the trip;
``recalculate_after_removal`` re-runs it after a stop has been completed.
Both are pure: reading the stop set and saving results belong to the caller.
"""

from __future__ import annotations

import logging
from typing import Hashable, Sequence

from ...models.domain import Point, Stop
from .estimator import estimate_route
from .models import OptimizedRoute, RouteConfig
from .nearest_neighbor import build_tour


def optimize(origin: Point, stops: Sequence[Stop], config: RouteConfig | None = None) -> OptimizedRoute:
    """Build a nearest-neighbor tour from ``origin`` and estimate it."""
    config = config or RouteConfig()
    tour = build_tour(origin, stops)
    estimate = estimate_route(origin, tour, config)
    logging.info(
        f"Optimized route over {len(tour)} stops: {estimate.total_distance_km:.2f} km, "
        f"{estimate.estimated_minutes:.1f} min"
    )
    return OptimizedRoute(origin=origin, tour=tour, estimate=estimate)


def recalculate_after_removal(
    previous_tour: Sequence[Stop],
    origin: Point,
    removed_stop_id: Hashable,
    config: RouteConfig | None = None,
) -> OptimizedRoute:
    """Drop ``removed_stop_id`` and optimize the remaining stops from scratch.

    The remaining order is recomputed rather than spliced, since the removed
    stop may have determined which stop came next. An id that is not in the
    tour leaves the stop set unchanged.
    """
    remaining = [stop for stop in previous_tour if stop.id != removed_stop_id]
    if len(remaining) == len(previous_tour):
        logging.info(f"Stop {removed_stop_id!r} not in previous tour, recalculating unchanged stop set")
    return optimize(origin, remaining, config)


class RouteOptimizer:
    """Binds a :class:`RouteConfig` to the optimization entry points."""

    def __init__(self, config: RouteConfig | None = None) -> None:
        self.config = config or RouteConfig()

    def optimize(self, origin: Point, stops: Sequence[Stop]) -> OptimizedRoute:
        return optimize(origin, stops, self.config)

    def recalculate_after_removal(
        self, previous_tour: Sequence[Stop], origin: Point, removed_stop_id: Hashable
    ) -> OptimizedRoute:
        return recalculate_after_removal(previous_tour, origin, removed_stop_id, self.config)

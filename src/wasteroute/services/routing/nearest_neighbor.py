"""Greedy nearest-neighbor ordering of cleanup stops.

Starting from the origin, the closest unvisited stop is always taken next.
The result is an open path: the cleaner does not return to the origin.
Distances are great-circle kilometres from :func:`haversine_km`.
"""

from __future__ import annotations

from typing import Sequence

from ...models.domain import Point, Stop
from ..geospatial import haversine_km


def build_tour(origin: Point, stops: Sequence[Stop]) -> list[Stop]:
    """Order ``stops`` by repeatedly visiting the nearest remaining one.

    Ties go to the stop that appears first in ``stops``, so the same input
    always yields the same tour.
    """
    if len(stops) <= 1:
        return list(stops)

    remaining = list(stops)
    tour: list[Stop] = []
    current = origin

    while remaining:
        nearest_index = 0
        min_distance = haversine_km(current, remaining[0].location)
        for index in range(1, len(remaining)):
            distance = haversine_km(current, remaining[index].location)
            if distance < min_distance:
                min_distance = distance
                nearest_index = index

        nearest = remaining.pop(nearest_index)
        tour.append(nearest)
        current = nearest.location

    return tour

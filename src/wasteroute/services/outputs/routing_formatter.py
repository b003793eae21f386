"""Serializers for routing outputs."""

from __future__ import annotations

import csv
import io
from dataclasses import asdict

from ..routing.models import OptimizedRoute


def optimized_route_to_json(route: OptimizedRoute) -> dict:
    estimate = route.estimate
    return {
        "origin": asdict(route.origin),
        "total_distance_km": estimate.total_distance_km,
        "estimated_minutes": estimate.estimated_minutes,
        "travel_minutes": estimate.travel_minutes,
        "dwell_minutes": estimate.dwell_minutes,
        "stop_count": len(route.tour),
        "stops": [
            {
                "id": stop.id,
                "latitude": stop.location.latitude,
                "longitude": stop.location.longitude,
                "metadata": stop.metadata,
                **{key: value for key, value in asdict(leg).items() if key != "stop_id"},
            }
            for stop, leg in zip(route.tour, estimate.legs)
        ],
    }


def optimized_route_to_csv(route: OptimizedRoute) -> str:
    buffer = io.StringIO()
    fieldnames = [
        "sequence",
        "stop_id",
        "latitude",
        "longitude",
        "distance_from_prev_km",
        "cumulative_distance_km",
        "arrival_min",
        "total_distance_km",
        "estimated_minutes",
    ]
    writer = csv.DictWriter(buffer, fieldnames=fieldnames)
    writer.writeheader()
    for stop, leg in zip(route.tour, route.estimate.legs):
        writer.writerow(
            {
                "sequence": leg.sequence,
                "stop_id": stop.id,
                "latitude": stop.location.latitude,
                "longitude": stop.location.longitude,
                "distance_from_prev_km": leg.distance_from_prev_km,
                "cumulative_distance_km": leg.cumulative_distance_km,
                "arrival_min": leg.arrival_min,
                "total_distance_km": route.estimate.total_distance_km,
                "estimated_minutes": route.estimate.estimated_minutes,
            }
        )
    return buffer.getvalue()

"""GeoJSON export utilities for map overlays."""

from __future__ import annotations

from typing import Any, Dict, List

from ..routing.models import OptimizedRoute

START_COLOR = "#10b981"
END_COLOR = "#ef4444"
WAYPOINT_COLOR = "#3b82f6"


def _position(latitude: float, longitude: float) -> List[float]:
    # GeoJSON positions are lon,lat order (x,y)
    return [longitude, latitude]


def route_to_feature_collection(route: OptimizedRoute) -> Dict[str, Any]:
    """Convert an optimized route to a GeoJSON FeatureCollection.

    The collection holds the origin, one numbered point per stop and a
    straight-line LineString joining them in visit order. Street geometry is
    left to the map client.

    Args:
        route: Result of route optimization

    Returns:
        GeoJSON FeatureCollection dictionary
    """
    origin = route.origin
    features: List[Dict[str, Any]] = [
        {
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": _position(origin.latitude, origin.longitude)},
            "properties": {"role": "origin", "sequence": 0, "marker-color": START_COLOR},
        }
    ]

    path = [_position(origin.latitude, origin.longitude)]
    last_index = len(route.tour) - 1
    for index, (stop, leg) in enumerate(zip(route.tour, route.estimate.legs)):
        position = _position(stop.location.latitude, stop.location.longitude)
        path.append(position)
        features.append(
            {
                "type": "Feature",
                "geometry": {"type": "Point", "coordinates": position},
                "properties": {
                    **stop.metadata,
                    "role": "stop",
                    "stop_id": stop.id,
                    "sequence": leg.sequence,
                    "distance_from_prev_km": round(leg.distance_from_prev_km, 3),
                    "marker-color": END_COLOR if index == last_index else WAYPOINT_COLOR,
                },
            }
        )

    if len(path) >= 2:
        features.append(
            {
                "type": "Feature",
                "geometry": {"type": "LineString", "coordinates": path},
                "properties": {
                    "role": "path",
                    "total_distance_km": round(route.estimate.total_distance_km, 3),
                    "estimated_minutes": round(route.estimate.estimated_minutes, 1),
                    "stop_count": len(route.tour),
                },
            }
        )

    return {"type": "FeatureCollection", "features": features}

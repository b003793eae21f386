"""Routing request/response schemas."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, field_validator

StopId = Union[int, str]


class PointModel(BaseModel):
    latitude: float = Field(..., ge=-90, le=90, allow_inf_nan=False)
    longitude: float = Field(..., ge=-180, le=180, allow_inf_nan=False)


class StopModel(BaseModel):
    id: StopId
    location: PointModel
    metadata: Dict[str, Any] = Field(default_factory=dict, description="Caller data returned unchanged.")


class RouteConfigModel(BaseModel):
    avg_speed_kmh: Optional[float] = Field(None, gt=0, allow_inf_nan=False)
    minutes_per_stop: Optional[float] = Field(None, ge=0, allow_inf_nan=False)


def _reject_duplicate_ids(stops: List[StopModel]) -> List[StopModel]:
    seen: set = set()
    for stop in stops:
        if stop.id in seen:
            raise ValueError(f"Duplicate stop id: {stop.id!r}")
        seen.add(stop.id)
    return stops


class OptimizeRequest(BaseModel):
    origin: PointModel
    stops: List[StopModel]
    config: Optional[RouteConfigModel] = None
    persist: bool = False
    run_label: Optional[str] = Field(default=None, description="Friendly name for persisted outputs.")

    @field_validator("stops")
    @classmethod
    def _unique_stop_ids(cls, value: List[StopModel]) -> List[StopModel]:
        return _reject_duplicate_ids(value)


class RecalculateRequest(BaseModel):
    origin: PointModel
    previous_tour: List[StopModel]
    removed_stop_id: StopId
    config: Optional[RouteConfigModel] = None

    @field_validator("previous_tour")
    @classmethod
    def _unique_stop_ids(cls, value: List[StopModel]) -> List[StopModel]:
        return _reject_duplicate_ids(value)


class RouteLegModel(BaseModel):
    stop_id: StopId
    sequence: int
    distance_from_prev_km: float
    cumulative_distance_km: float
    arrival_min: float


class RouteEstimateModel(BaseModel):
    total_distance_km: float
    estimated_minutes: float
    travel_minutes: float
    dwell_minutes: float
    legs: List[RouteLegModel]


class RouteResponse(BaseModel):
    origin: PointModel
    tour: List[StopModel]
    estimate: RouteEstimateModel
    metadata: dict

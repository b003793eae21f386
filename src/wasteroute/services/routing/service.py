"""Routing orchestration service."""

from __future__ import annotations

import logging
from dataclasses import asdict

from ...models.domain import Point, Stop
from ...persistence import database
from ...persistence.filesystem import FileStorage
from ...schemas.routing import (
    OptimizeRequest,
    PointModel,
    RecalculateRequest,
    RouteConfigModel,
    RouteResponse,
    StopModel,
)
from ..export.geojson import route_to_feature_collection
from ..outputs.routing_formatter import optimized_route_to_csv, optimized_route_to_json
from .models import OptimizedRoute, RouteConfig
from .optimizer import optimize, recalculate_after_removal


def _build_route_config(overrides: RouteConfigModel | None) -> RouteConfig:
    base = RouteConfig()
    return RouteConfig(
        avg_speed_kmh=overrides.avg_speed_kmh
        if overrides and overrides.avg_speed_kmh is not None
        else base.avg_speed_kmh,
        minutes_per_stop=overrides.minutes_per_stop
        if overrides and overrides.minutes_per_stop is not None
        else base.minutes_per_stop,
    )


def _to_point(model: PointModel) -> Point:
    return Point(latitude=model.latitude, longitude=model.longitude)


def _to_stops(models: list[StopModel]) -> list[Stop]:
    return [Stop(id=model.id, location=_to_point(model.location), metadata=dict(model.metadata)) for model in models]


def _to_response(route: OptimizedRoute, config: RouteConfig, metadata: dict | None = None) -> RouteResponse:
    metadata = dict(metadata or {})
    metadata.setdefault("status", "complete")
    metadata["stop_count"] = len(route.tour)
    metadata["config"] = asdict(config)
    metadata["map_overlays"] = route_to_feature_collection(route)

    return RouteResponse(
        origin=PointModel(**asdict(route.origin)),
        tour=[
            StopModel(id=stop.id, location=PointModel(**asdict(stop.location)), metadata=stop.metadata)
            for stop in route.tour
        ],
        estimate=asdict(route.estimate),
        metadata=metadata,
    )


def _persist_route(route: OptimizedRoute, run_label: str | None) -> str:
    storage = FileStorage()
    run_dir = storage.make_run_directory(prefix="route")
    summary = optimized_route_to_json(route)
    if run_label:
        summary["run_label"] = run_label
    storage.write_json(run_dir / "summary.json", summary)
    storage.write_csv(run_dir / "stops.csv", optimized_route_to_csv(route))
    storage.write_json(run_dir / "route.geojson", route_to_feature_collection(route))
    logging.info(f"Persisted route outputs to {run_dir}")
    return str(run_dir)


def optimize_stops(payload: OptimizeRequest) -> RouteResponse:
    config = _build_route_config(payload.config)
    route = optimize(_to_point(payload.origin), _to_stops(payload.stops), config)

    metadata: dict = {}
    if payload.run_label:
        metadata["run_label"] = payload.run_label
    if payload.persist:
        metadata["output_dir"] = _persist_route(route, payload.run_label)
    return _to_response(route, config, metadata)


def recalculate_stops(payload: RecalculateRequest) -> RouteResponse:
    config = _build_route_config(payload.config)
    route = recalculate_after_removal(
        _to_stops(payload.previous_tour),
        _to_point(payload.origin),
        payload.removed_stop_id,
        config,
    )
    removed = len(route.tour) < len(payload.previous_tour)
    return _to_response(route, config, {"removed_stop_id": payload.removed_stop_id, "removed": removed})


def optimize_for_cleaner(cleaner_id: str, config_overrides: RouteConfigModel | None = None) -> RouteResponse:
    """Optimize the open reports assigned to a cleaner, starting from their profile location."""
    config = _build_route_config(config_overrides)
    origin = database.get_cleaner_origin(cleaner_id)
    stops = database.get_open_reports_for_cleaner(cleaner_id)
    route = optimize(origin, stops, config)
    return _to_response(route, config, {"cleaner_id": cleaner_id})


def resolve_and_recalculate(
    cleaner_id: str,
    report_id: str,
    after_image_url: str | None = None,
    config_overrides: RouteConfigModel | None = None,
) -> RouteResponse:
    """Mark a report resolved, then recompute the route over the cleaner's remaining reports.

    The stop set is read again after the update so the order reflects the
    latest assignments, not the caller's snapshot.
    """
    config = _build_route_config(config_overrides)
    origin = database.get_cleaner_origin(cleaner_id)
    if not database.mark_report_resolved(report_id, cleaner_id, after_image_url=after_image_url):
        raise LookupError(f"Report '{report_id}' is not assigned to cleaner '{cleaner_id}'.")

    stops = database.get_open_reports_for_cleaner(cleaner_id)
    # A lagging read may still list the resolved report.
    route = recalculate_after_removal(stops, origin, report_id, config)
    return _to_response(route, config, {"cleaner_id": cleaner_id, "resolved_report_id": report_id})

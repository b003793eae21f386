"""Database access for cleaner profiles and waste reports."""

from __future__ import annotations

import logging
from typing import Any

from ..config import settings
from ..db.supabase import get_supabase_client
from ..models.domain import Point, Stop
from ..services.geospatial import is_valid_coordinate

REPORT_COLUMNS = "id, location_lat, location_lng, location_address, waste_type, severity, status, created_at"
STOP_METADATA_FIELDS = ("location_address", "waste_type", "severity", "status", "created_at")


def _require_client():
    supabase = get_supabase_client()
    if not supabase:
        raise ValueError(
            "Supabase not configured. Set WASTEROUTE_SUPABASE_URL and WASTEROUTE_SUPABASE_KEY environment variables."
        )
    return supabase


def _coerce_point(lat: Any, lng: Any) -> Point | None:
    try:
        latitude, longitude = float(lat), float(lng)
    except (TypeError, ValueError):
        return None
    if not is_valid_coordinate(latitude, longitude):
        return None
    return Point(latitude=latitude, longitude=longitude)


def report_row_to_stop(row: dict[str, Any]) -> Stop | None:
    """Convert a ``waste_reports`` row to a Stop, or None if it has no usable location."""
    location = _coerce_point(row.get("location_lat"), row.get("location_lng"))
    if location is None:
        logging.warning(f"Report {row.get('id')} has invalid coordinates, skipping")
        return None
    metadata = {field: row.get(field) for field in STOP_METADATA_FIELDS if row.get(field) is not None}
    return Stop(id=str(row["id"]), location=location, metadata=metadata)


def get_cleaner_origin(cleaner_id: str) -> Point:
    """Read the cleaner's saved location from their profile.

    Raises:
        LookupError: The profile does not exist.
        ValueError: The profile has no usable location.
    """
    supabase = _require_client()
    response = (
        supabase.table(settings.profiles_table)
        .select("id, location_lat, location_lng, full_name")
        .eq("id", cleaner_id)
        .limit(1)
        .execute()
    )
    rows = response.data or []
    if not rows:
        raise LookupError(f"Cleaner '{cleaner_id}' not found.")

    origin = _coerce_point(rows[0].get("location_lat"), rows[0].get("location_lng"))
    if origin is None:
        raise ValueError(
            f"Cleaner '{cleaner_id}' has no location set. An administrator must set it before routing."
        )
    return origin


def get_open_reports_for_cleaner(cleaner_id: str) -> list[Stop]:
    """Return the reports assigned to a cleaner that are not closed yet, as Stops."""
    supabase = _require_client()
    response = (
        supabase.table(settings.reports_table)
        .select(REPORT_COLUMNS)
        .eq("assigned_to", cleaner_id)
        .order("created_at", desc=True)
        .execute()
    )
    closed = {status.lower() for status in settings.closed_report_statuses}

    stops: list[Stop] = []
    for row in response.data or []:
        if str(row.get("status", "")).lower() in closed:
            continue
        stop = report_row_to_stop(row)
        if stop is not None:
            stops.append(stop)

    logging.info(f"Loaded {len(stops)} open reports for cleaner '{cleaner_id}'")
    return stops


def mark_report_resolved(report_id: str, cleaner_id: str, after_image_url: str | None = None) -> bool:
    """Set a report assigned to ``cleaner_id`` to resolved.

    Returns:
        True if a report was updated, False if no matching report exists.
    """
    supabase = _require_client()
    update: dict[str, Any] = {"status": "resolved"}
    if after_image_url:
        update["after_image_url"] = after_image_url

    response = (
        supabase.table(settings.reports_table)
        .update(update)
        .eq("id", report_id)
        .eq("assigned_to", cleaner_id)
        .execute()
    )
    if not response.data:
        return False

    try:
        supabase.functions.invoke(
            "send-status-notification",
            invoke_options={"body": {"reportId": report_id, "status": "resolved"}},
        )
    except Exception as e:
        logging.warning(f"Status notification for report {report_id} failed: {e}")
    return True

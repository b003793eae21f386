"""Cleaner route endpoints backed by the report store."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel

from ...schemas.routing import RouteConfigModel, RouteResponse
from ...services.routing.service import optimize_for_cleaner, resolve_and_recalculate

router = APIRouter(prefix="/cleaners", tags=["cleaners"])


class ResolveReportRequest(BaseModel):
    after_image_url: Optional[str] = None
    config: Optional[RouteConfigModel] = None


@router.get("/{cleaner_id}/route", response_model=RouteResponse, status_code=status.HTTP_200_OK)
def get_cleaner_route(
    cleaner_id: str,
    avg_speed_kmh: Optional[float] = Query(default=None, gt=0, description="Override average travel speed"),
    minutes_per_stop: Optional[float] = Query(default=None, ge=0, description="Override dwell time per stop"),
) -> RouteResponse:
    """Optimized visiting order over the cleaner's open assigned reports."""
    try:
        overrides = RouteConfigModel(avg_speed_kmh=avg_speed_kmh, minutes_per_stop=minutes_per_stop)
        return optimize_for_cleaner(cleaner_id, overrides)
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error building route for cleaner {cleaner_id}: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to build cleaner route: {str(exc)}"
        ) from exc


@router.post(
    "/{cleaner_id}/reports/{report_id}/resolve",
    response_model=RouteResponse,
    status_code=status.HTTP_200_OK,
)
def resolve_report(cleaner_id: str, report_id: str, payload: Optional[ResolveReportRequest] = None) -> RouteResponse:
    """Mark a report resolved and return the recalculated route."""
    payload = payload or ResolveReportRequest()
    try:
        return resolve_and_recalculate(
            cleaner_id,
            report_id,
            after_image_url=payload.after_image_url,
            config_overrides=payload.config,
        )
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error resolving report {report_id}: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to resolve report: {str(exc)}"
        ) from exc

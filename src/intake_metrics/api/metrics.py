"""Metrics API endpoints."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfoNotFoundError

from fastapi import APIRouter, HTTPException, Request, status

from intake_metrics.api.models import (
    HabitsRequest,
    ProjectionRequest,
    SaturationRequest,
    SummaryRequest,
)

if TYPE_CHECKING:
    from intake_metrics.containers import AppContainer

router = APIRouter(prefix="/metrics", tags=["metrics"])
logger = logging.getLogger(__name__)


def _check_timezone(container: AppContainer, timezone_name: str | None) -> None:
    try:
        container.metrics_service.resolve_timezone(timezone_name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        logger.warning("Rejected metrics request for timezone %r", timezone_name)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown timezone: {timezone_name}",
        ) from exc


@router.post("/summary")
async def summary(payload: SummaryRequest, request: Request) -> dict[str, object]:
    """Return adherence, streak, totals and dose-time metrics."""
    container: AppContainer = request.app.state.container
    _check_timezone(container, payload.timezone)
    result = container.metrics_service.summary(
        creatine_logs=[log.to_domain() for log in payload.creatine_logs],
        water_logs=[log.to_domain() for log in payload.water_logs],
        water_goal=payload.water_goal,
        period_days=payload.period_days,
        window_days=payload.window_days,
        reference_date=payload.reference_date,
        timezone_name=payload.timezone,
    )
    logger.info(
        "Computed summary for %s creatine and %s water logs",
        len(payload.creatine_logs),
        len(payload.water_logs),
    )
    return asdict(result)


@router.post("/saturation")
async def saturation(
    payload: SaturationRequest, request: Request
) -> dict[str, object]:
    """Return day-aligned saturation and composite series."""
    container: AppContainer = request.app.state.container
    _check_timezone(container, payload.timezone)
    result = container.metrics_service.saturation(
        creatine_logs=[log.to_domain() for log in payload.creatine_logs],
        water_logs=[log.to_domain() for log in payload.water_logs],
        profile=payload.profile.to_domain(),
        days=payload.days,
        end=payload.end_date,
        water_unit=payload.water_unit,
        options=payload.performance_options(
            container.metrics_service.performance_options
        ),
        timezone_name=payload.timezone,
    )
    return asdict(result)


@router.post("/projection")
async def projection(
    payload: ProjectionRequest, request: Request
) -> dict[str, object]:
    """Return days needed to reach target creatine and hydration levels."""
    container: AppContainer = request.app.state.container
    result = container.metrics_service.projection(
        creatine_saturation_now=payload.creatine_saturation,
        hydration_saturation_now=payload.hydration_saturation,
        planned_daily_dose=payload.planned_daily_dose,
        planned_daily_water=payload.planned_daily_water,
        profile=payload.profile.to_domain(),
        water_unit=payload.water_unit,
    )
    return asdict(result)


@router.post("/habits")
async def habits(payload: HabitsRequest, request: Request) -> dict[str, object]:
    """Return hydration buckets for one day and the rolling average."""
    container: AppContainer = request.app.state.container
    _check_timezone(container, payload.timezone)
    result = container.metrics_service.habits(
        water_logs=[log.to_domain() for log in payload.water_logs],
        target=payload.target_date,
        window_days=payload.window_days,
        timezone_name=payload.timezone,
    )
    return asdict(result)

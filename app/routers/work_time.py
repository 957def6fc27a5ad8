"""Work-time endpoints - daily stats, weekly catch-up and timesheet status."""
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import Field

from app.config import Settings, settings
from app.models.time_entry import BreakPeriod, CamelModel, TimeEntry
from app.models.work_time import DailyWorkStats, TimesheetStatus, WorkTimeConfig
from app.services import work_time_service


router = APIRouter(prefix="/work-time", tags=["work-time"])


class WorkTimeRequest(CamelModel):
    """Request model for stats computations."""

    entries: list[TimeEntry] = Field(default_factory=list)
    work_config: Optional[WorkTimeConfig] = Field(default=None, alias="config")
    now: Optional[datetime] = None


class TimesheetStatusRequest(CamelModel):
    """Request model for the live timesheet status."""

    entries: list[TimeEntry] = Field(default_factory=list)
    current_entry: Optional[TimeEntry] = None
    active_break: Optional[BreakPeriod] = None
    now: Optional[datetime] = None


class WeeklyCatchUp(CamelModel):
    """Response model for the weekly catch-up figure."""

    weekly_catch_up_minutes: float


def get_settings() -> Settings:
    """Dependency to get application settings."""
    return settings


def _resolve_config(
    config: Optional[WorkTimeConfig],
    app_settings: Settings,
) -> WorkTimeConfig:
    if config is not None:
        return config
    try:
        return app_settings.default_work_time_config()
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/config/default", response_model=WorkTimeConfig)
async def get_default_config(app_settings: Settings = Depends(get_settings)):
    """
    Get the policy applied when a request carries no config.

    - Derived from application settings
    """
    return _resolve_config(None, app_settings)


@router.post("/daily-stats", response_model=DailyWorkStats)
async def daily_stats(
    request: WorkTimeRequest,
    app_settings: Settings = Depends(get_settings),
):
    """
    Compute today's work statistics.

    - Entries are attributed by their date field
    - Open sessions are measured up to `now`
    - Config defaults to the application settings
    """
    config = _resolve_config(request.work_config, app_settings)
    return work_time_service.compute_daily_stats(
        request.entries, config, request.now
    )


@router.post("/weekly-catch-up", response_model=WeeklyCatchUp)
async def weekly_catch_up(
    request: WorkTimeRequest,
    app_settings: Settings = Depends(get_settings),
):
    """
    Compute the shortfall accumulated since Monday.

    - Surplus days do not offset deficits
    """
    config = _resolve_config(request.work_config, app_settings)
    minutes = work_time_service.compute_weekly_catch_up(
        request.entries, config, request.now
    )
    return WeeklyCatchUp(weekly_catch_up_minutes=minutes)


@router.post("/status", response_model=TimesheetStatus)
async def timesheet_status(request: TimesheetStatusRequest):
    """
    Get the live clock-in state.

    - Current session counts toward today unless on a break
    """
    return work_time_service.compute_timesheet_status(
        request.entries,
        current_entry=request.current_entry,
        active_break=request.active_break,
        now=request.now,
    )

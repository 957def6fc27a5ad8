"""Work-time policy and statistics models."""
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field

from app.models.time_entry import CamelModel


class WorkStatus(str, Enum):
    """Band a day's worked minutes fall into."""

    NORMAL = "normal"
    WARNING = "warning"
    HARD_CAP = "hardCap"


class WorkTimeConfig(CamelModel):
    """Per-user daily work-time policy."""

    model_config = {"allow_inf_nan": False}

    office_hours: float = Field(default=9, ge=0)
    grace_minutes: float = Field(default=0, ge=0)
    allow_overwork_minutes: float = Field(default=0, ge=0)
    # Clamped into [0, allow_overwork_minutes] when applied, never rejected.
    overwork_minutes_requested: float = 0
    warning_threshold_minutes: float = Field(default=60, ge=0)

    @property
    def base_minutes(self) -> float:
        """Base daily allowance in minutes."""
        return self.office_hours * 60

    @property
    def granted_overwork_minutes(self) -> float:
        """Requested overwork clamped to the configured ceiling."""
        return min(max(self.overwork_minutes_requested, 0), self.allow_overwork_minutes)


class DailyWorkStats(CamelModel):
    """Computed work statistics for today."""

    today_minutes: float
    applied_limit_minutes: float
    remaining_minutes: float
    status: WorkStatus
    weekly_catch_up_minutes: float


class TimesheetStatus(CamelModel):
    """Live clock-in state shown alongside the timesheet."""

    is_working: bool
    is_on_break: bool
    current_session_start: Optional[datetime] = None
    current_break_start: Optional[datetime] = None
    elapsed_minutes: Optional[int] = None
    break_minutes: Optional[float] = None
    today_hours: float
    weekly_hours: float

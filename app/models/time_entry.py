"""Time entry model definitions."""
from datetime import date, datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


def as_utc(value: datetime) -> datetime:
    """Treat naive timestamps as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class CamelModel(BaseModel):
    """Base model exposing camelCase JSON field names."""

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class BreakType(str, Enum):
    """Kind of break taken during a session."""

    SHORT = "short"
    LUNCH = "lunch"
    CUSTOM = "custom"


class BreakPeriod(CamelModel):
    """A single break interval inside a session."""

    id: str
    start_time: datetime
    end_time: Optional[datetime] = None
    duration_minutes: Optional[int] = None  # pre-set timer length
    type: BreakType = BreakType.CUSTOM
    title: Optional[str] = None


class Subtask(CamelModel):
    """Task switch recorded within one clock-in session."""

    id: str
    title: str
    clock_in: datetime
    clock_out: Optional[datetime] = None


class TimeEntry(CamelModel):
    """One clock-in/clock-out session attributed to a calendar date."""

    id: str
    date: date
    clock_in: datetime
    clock_out: Optional[datetime] = None
    break_minutes: float = Field(default=0, ge=0, allow_inf_nan=False)
    breaks: list[BreakPeriod] = Field(default_factory=list)
    notes: Optional[str] = None
    title: Optional[str] = None
    category: Optional[str] = None
    template_id: Optional[str] = None
    subtasks: list[Subtask] = Field(default_factory=list)

    @field_validator("clock_in", "clock_out")
    @classmethod
    def normalize_timezone(cls, value: Optional[datetime]) -> Optional[datetime]:
        if value is None:
            return None
        return as_utc(value)

    @model_validator(mode="after")
    def check_clock_out_after_clock_in(self) -> "TimeEntry":
        if self.clock_out is not None and self.clock_out < self.clock_in:
            raise ValueError("clock_out must not be earlier than clock_in")
        return self

    @property
    def is_open(self) -> bool:
        """Whether the session is still running."""
        return self.clock_out is None

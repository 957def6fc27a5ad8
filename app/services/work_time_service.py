"""Work-time calculations - daily cap, status and weekly catch-up.

Every function here is pure: entries, policy and the reference instant are
passed in explicitly and nothing is read from or written to shared state.
"Today" is the UTC calendar date of ``now``; entries are bucketed by their
own ``date`` field, never by their timestamps, so a session that crosses
midnight stays on the day it was attributed to.
"""
from datetime import date, datetime, timedelta, timezone
from typing import Iterable, Optional

from app.models.time_entry import BreakPeriod, TimeEntry, as_utc
from app.models.work_time import (
    DailyWorkStats,
    TimesheetStatus,
    WorkStatus,
    WorkTimeConfig,
)


def _resolve_now(now: Optional[datetime]) -> datetime:
    if now is None:
        return datetime.now(timezone.utc)
    return as_utc(now)


def utc_today(now: datetime) -> date:
    """Calendar date of ``now`` in UTC."""
    return as_utc(now).astimezone(timezone.utc).date()


def week_start(day: date) -> date:
    """Monday of the week containing ``day``."""
    return day - timedelta(days=day.weekday())


def _session_minutes(clock_in: datetime, end: datetime, break_minutes: float) -> float:
    raw_minutes = (end - clock_in).total_seconds() / 60
    return max(0.0, raw_minutes - break_minutes)


def entry_net_minutes(entry: TimeEntry, now: Optional[datetime] = None) -> float:
    """
    Net worked minutes of a single session.

    Open sessions are measured up to ``now``. Breaks are deducted and the
    result is clamped at zero.

    Args:
        entry: Time entry
        now: Reference instant (defaults to current UTC time)

    Returns:
        Net minutes, never negative
    """
    now = _resolve_now(now)
    end = now if entry.is_open else entry.clock_out
    return _session_minutes(entry.clock_in, end, entry.break_minutes)


def minutes_for_day(
    entries: Iterable[TimeEntry],
    day: date,
    now: Optional[datetime] = None,
) -> float:
    """Sum net minutes of entries attributed to ``day``."""
    now = _resolve_now(now)
    return sum(
        (entry_net_minutes(entry, now) for entry in entries if entry.date == day),
        0.0,
    )


def applied_limit_minutes(config: WorkTimeConfig) -> float:
    """Effective cap for today: base + grace + granted overwork."""
    return config.base_minutes + config.grace_minutes + config.granted_overwork_minutes


def classify_status(today_minutes: float, config: WorkTimeConfig) -> WorkStatus:
    """
    Classify worked minutes into a status band.

    hardCap wins once the full limit is reached. warning starts
    ``warning_threshold_minutes`` before the base allowance and covers the
    whole grace/overwork band above it.
    """
    if today_minutes >= applied_limit_minutes(config):
        return WorkStatus.HARD_CAP
    if today_minutes >= config.base_minutes - config.warning_threshold_minutes:
        return WorkStatus.WARNING
    return WorkStatus.NORMAL


def compute_weekly_catch_up(
    entries: Iterable[TimeEntry],
    config: WorkTimeConfig,
    now: Optional[datetime] = None,
) -> float:
    """
    Accumulated shortfall against the daily target since Monday.

    Each day from Monday through today adds ``max(0, target - actual)``.
    Surplus days do not offset deficits and future days contribute nothing.

    Args:
        entries: All known time entries, in any order
        config: Work-time policy
        now: Reference instant (defaults to current UTC time)

    Returns:
        Catch-up minutes for the current week
    """
    now = _resolve_now(now)
    entries = list(entries)
    today = utc_today(now)
    target = config.base_minutes

    catch_up = 0.0
    day = week_start(today)
    while day <= today:
        catch_up += max(0.0, target - minutes_for_day(entries, day, now))
        day += timedelta(days=1)
    return catch_up


def compute_daily_stats(
    entries: Iterable[TimeEntry],
    config: WorkTimeConfig,
    now: Optional[datetime] = None,
) -> DailyWorkStats:
    """
    Compute today's work statistics.

    Args:
        entries: All known time entries (not pre-filtered by date)
        config: Work-time policy
        now: Reference instant (defaults to current UTC time)

    Returns:
        DailyWorkStats for the UTC date of ``now``
    """
    now = _resolve_now(now)
    entries = list(entries)

    today_minutes = minutes_for_day(entries, utc_today(now), now)
    limit = applied_limit_minutes(config)

    return DailyWorkStats(
        today_minutes=today_minutes,
        applied_limit_minutes=limit,
        remaining_minutes=max(0.0, limit - today_minutes),
        status=classify_status(today_minutes, config),
        weekly_catch_up_minutes=compute_weekly_catch_up(entries, config, now),
    )


def calculate_total_hours(
    entries: Iterable[TimeEntry],
    now: Optional[datetime] = None,
) -> float:
    """Total net hours of the given entries; open sessions run to ``now``."""
    now = _resolve_now(now)
    return sum((entry_net_minutes(entry, now) for entry in entries), 0.0) / 60


def compute_timesheet_status(
    entries: Iterable[TimeEntry],
    current_entry: Optional[TimeEntry] = None,
    active_break: Optional[BreakPeriod] = None,
    now: Optional[datetime] = None,
) -> TimesheetStatus:
    """
    Live clock-in state for the timesheet header.

    Closed entries attributed to today (or to this week) count fully. The
    current session is added on top while the user is working and not on a
    break. ``elapsed_minutes`` reflects the current session regardless of
    breaks.

    Args:
        entries: Time entry history
        current_entry: Open session, if clocked in
        active_break: Break in progress, if any
        now: Reference instant (defaults to current UTC time)

    Returns:
        TimesheetStatus snapshot
    """
    now = _resolve_now(now)
    today = utc_today(now)
    monday = week_start(today)

    today_minutes = 0.0
    weekly_minutes = 0.0
    for entry in entries:
        if entry.is_open:
            continue
        minutes = entry_net_minutes(entry, now)
        if entry.date == today:
            today_minutes += minutes
        if monday <= entry.date <= today:
            weekly_minutes += minutes

    elapsed_minutes = None
    if current_entry is not None:
        current_minutes = _session_minutes(
            current_entry.clock_in, now, current_entry.break_minutes
        )
        elapsed_minutes = int(current_minutes)
        if active_break is None:
            today_minutes += current_minutes
            weekly_minutes += current_minutes

    return TimesheetStatus(
        is_working=current_entry is not None,
        is_on_break=active_break is not None,
        current_session_start=current_entry.clock_in if current_entry else None,
        current_break_start=active_break.start_time if active_break else None,
        elapsed_minutes=elapsed_minutes,
        break_minutes=current_entry.break_minutes if current_entry else None,
        today_hours=round(today_minutes / 60, 2),
        weekly_hours=round(weekly_minutes / 60, 2),
    )

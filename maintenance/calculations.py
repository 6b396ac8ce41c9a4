"""Due-point projection and remaining-margin calculations."""

import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Iterable, Optional

from dateutil.relativedelta import relativedelta

from .component_time import ComponentTimeSnapshot, find_snapshot
from .due_projection import DueProjection
from .remaining_margin import (
    NO_DUE_CONSTRAINT,
    NumericMargin,
    RemainingMargin,
    UNIT_CYCLES,
    UNIT_DAYS,
    UNIT_HOURS,
    UNIT_NONE,
)
from .status import Status
from .task import (
    INTERVAL_DAYS,
    INTERVAL_MONTHS_EOM,
    INTERVAL_MONTHS_SPECIFIC_DAY,
    INTERVAL_YEARS_SPECIFIC_DAY,
    MaintenanceTask,
)

ISO_DATE_FORMAT = "%Y-%m-%d"


@dataclass(frozen=True)
class DueSoonThresholds:
    """Margins below which a task is reported as Due Soon."""

    days: float = 30
    hours: float = 25
    cycles: float = 50

    def for_unit(self, unit: str) -> Optional[float]:
        return {UNIT_DAYS: self.days, UNIT_HOURS: self.hours, UNIT_CYCLES: self.cycles}.get(unit)


DUE_SOON_THRESHOLDS = DueSoonThresholds()


# =============================================================================
# Parsing helpers
# =============================================================================


def parse_iso_date(value: Any) -> Optional[date]:
    """Parse a yyyy-MM-dd string (or pass through a date). None if invalid."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return datetime.strptime(value.strip(), ISO_DATE_FORMAT).date()
    except ValueError:
        return None


def to_number(value: Any) -> Optional[float]:
    """Coerce an int/float/numeric string to a finite float. None otherwise."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def _as_date(now: Any) -> date:
    if isinstance(now, datetime):
        return now.date()
    return now


# =============================================================================
# Task Due-Date Projector
# =============================================================================


def add_interval(baseline: date, magnitude: int, interval_type: Optional[str]) -> Optional[date]:
    """
    Project a date interval forward from a baseline.

    - days: +N calendar days
    - months_specific_day: +N months, day clamped to the month's length
    - months_eom: +N months, snapped to the last day of that month
    - years_specific_day: +N years (Feb 29 clamps to Feb 28)

    Unknown interval types return None.
    """
    if interval_type == INTERVAL_DAYS:
        return baseline + relativedelta(days=magnitude)
    if interval_type == INTERVAL_MONTHS_SPECIFIC_DAY:
        return baseline + relativedelta(months=magnitude)
    if interval_type == INTERVAL_MONTHS_EOM:
        # day=31 is clamped by relativedelta to the month's last day
        return baseline + relativedelta(months=magnitude, day=31)
    if interval_type == INTERVAL_YEARS_SPECIFIC_DAY:
        return baseline + relativedelta(years=magnitude)
    return None


def calc_due_date(task: MaintenanceTask, now: date) -> Optional[str]:
    """Date due point as yyyy-MM-dd, or None if disabled or malformed."""
    if not task.is_days_due_enabled:
        return None

    if task.is_one_time:
        due = parse_iso_date(task.days_due_value)
        return due.isoformat() if due else None

    if task.is_interval:
        magnitude = to_number(task.days_due_value)
        if magnitude is None or magnitude <= 0:
            return None
        baseline = parse_iso_date(task.last_completed_date) or now
        due = add_interval(baseline, int(magnitude), task.days_interval_type)
        return due.isoformat() if due else None

    return None


def calc_due_value(
    task: MaintenanceTask, enabled: bool, due_value: Any, last_completed: Any
) -> Optional[float]:
    """
    Hours or cycles due point.

    - Interval: last completed + interval (last completed defaults to 0)
    - One Time: the due value is already absolute
    """
    if not enabled:
        return None
    due = to_number(due_value)
    if due is None:
        return None
    if task.is_one_time:
        return due
    if task.is_interval:
        return (to_number(last_completed) or 0) + due
    return None


def project_due_dates(task: MaintenanceTask, now: Optional[date] = None) -> DueProjection:
    """
    Convert a task's last completion and due rules into absolute due points.

    Each enabled dimension is projected independently. `now` is the baseline
    for date intervals when the task has no valid last-completed date.
    """
    today = _as_date(now) if now is not None else date.today()
    return DueProjection(
        due_at_date=calc_due_date(task, today),
        due_at_hours=calc_due_value(
            task, task.is_hours_due_enabled, task.hours_due, task.last_completed_hours
        ),
        due_at_cycles=calc_due_value(
            task, task.is_cycles_due_enabled, task.cycles_due, task.last_completed_cycles
        ),
    )


# =============================================================================
# Remaining-Margin Calculator
# =============================================================================


def format_margin(value: float, unit: str) -> str:
    """Display text for a margin in its governing unit."""
    if unit == UNIT_HOURS:
        return f"{value:.1f} hrs"
    if unit == UNIT_DAYS:
        return f"{int(value)} days"
    if unit == UNIT_CYCLES:
        return f"{int(value)} cycles"
    return UNIT_NONE


def check_status(
    value: float, unit: str, thresholds: DueSoonThresholds = DUE_SOON_THRESHOLDS
) -> Status:
    """Classify a numeric margin in its governing unit."""
    if value < 0:
        return Status.OVERDUE
    threshold = thresholds.for_unit(unit)
    if threshold is not None and value < threshold:
        return Status.DUE_SOON
    if unit == UNIT_NONE:
        return Status.CHECK_DUE_INFO
    return Status.OK


def _numeric(value: float, unit: str, thresholds: DueSoonThresholds) -> RemainingMargin:
    return RemainingMargin(
        margin=NumericMargin(value),
        governing_unit=unit,
        status=check_status(value, unit, thresholds),
        display_text=format_margin(value, unit),
    )


def compute_remaining_margin(
    task: MaintenanceTask,
    projection: DueProjection,
    component_snapshots: Iterable[ComponentTimeSnapshot],
    now: date,
    thresholds: DueSoonThresholds = DUE_SOON_THRESHOLDS,
) -> RemainingMargin:
    """
    Pick the single governing remaining margin for a task and classify it.

    Precedence, first match wins:
    1. a valid due date (whole calendar days from now)
    2. no snapshot for the task's component -> Missing Comp. Time
    3. due hours (rounded to 0.1)
    4. due cycles
    5. nothing to track -> N/A / Check Due Info
    """
    due_date = parse_iso_date(projection.due_at_date)
    if due_date is not None:
        days_remaining = (due_date - _as_date(now)).days
        return _numeric(days_remaining, UNIT_DAYS, thresholds)

    due_hours = to_number(projection.due_at_hours)
    due_cycles = to_number(projection.due_at_cycles)

    snapshot = find_snapshot(component_snapshots, task.component_name)
    current_time = to_number(snapshot.current_time) if snapshot else None
    current_cycles = to_number(snapshot.current_cycles) if snapshot else None
    if snapshot is None or current_time is None or current_cycles is None:
        if due_hours is not None:
            unit = UNIT_HOURS
        elif due_cycles is not None:
            unit = UNIT_CYCLES
        else:
            unit = UNIT_NONE
        return RemainingMargin(
            margin=NO_DUE_CONSTRAINT,
            governing_unit=unit,
            status=Status.MISSING_COMP_TIME,
            display_text=Status.MISSING_COMP_TIME.label,
        )

    if due_hours is not None:
        return _numeric(round(due_hours - current_time, 1), UNIT_HOURS, thresholds)

    if due_cycles is not None:
        return _numeric(int(round(due_cycles - current_cycles)), UNIT_CYCLES, thresholds)

    return RemainingMargin(
        margin=NO_DUE_CONSTRAINT,
        governing_unit=UNIT_NONE,
        status=Status.CHECK_DUE_INFO,
        display_text=UNIT_NONE,
    )


# =============================================================================
# Display helpers
# =============================================================================


def format_due_at(projection: DueProjection) -> str:
    """Due point for display, using the same date/hours/cycles precedence."""
    due_date = parse_iso_date(projection.due_at_date)
    if due_date is not None:
        return due_date.strftime("%m/%d/%Y")
    if projection.due_at_hours is not None:
        hours = float(projection.due_at_hours)
        return f"{hours:,.0f} hrs" if hours.is_integer() else f"{hours:,.1f} hrs"
    if projection.due_at_cycles is not None:
        return f"{projection.due_at_cycles:,.0f} cycles"
    return UNIT_NONE

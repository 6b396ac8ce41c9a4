"""
Aircraft maintenance due tracking models.

This package provides data models for tracking aircraft maintenance:
- Status: Due classification (OVERDUE, DUE_SOON, OK, etc.)
- Aircraft: Fleet registry identification
- ComponentTimeSnapshot: Current hours/cycles per tracked component
- MaintenanceTask: Due rules and last completion for one requirement
- DueProjection / RemainingMargin: Calculated due points and margins
- TrackedAircraft: Main aggregate combining all data
"""

from .status import Status
from .aircraft import Aircraft
from .component_time import ComponentTimeSnapshot, find_snapshot
from .task import MaintenanceTask
from .due_projection import DueProjection
from .remaining_margin import (
    RemainingMargin,
    NumericMargin,
    NoDueConstraint,
    NO_DUE_CONSTRAINT,
)
from .task_due import TaskDue
from .tracked_aircraft import TrackedAircraft
from .calculations import (
    DueSoonThresholds,
    DUE_SOON_THRESHOLDS,
    add_interval,
    check_status,
    compute_remaining_margin,
    format_due_at,
    parse_iso_date,
    project_due_dates,
)
from .loader import (
    load_aircraft,
    load_fleet,
    save_component_time,
    log_task_completion,
    update_as_of_date,
)

__all__ = [
    "Status",
    "Aircraft",
    "ComponentTimeSnapshot",
    "find_snapshot",
    "MaintenanceTask",
    "DueProjection",
    "RemainingMargin",
    "NumericMargin",
    "NoDueConstraint",
    "NO_DUE_CONSTRAINT",
    "TaskDue",
    "TrackedAircraft",
    "DueSoonThresholds",
    "DUE_SOON_THRESHOLDS",
    "add_interval",
    "check_status",
    "compute_remaining_margin",
    "format_due_at",
    "parse_iso_date",
    "project_due_dates",
    "load_aircraft",
    "load_fleet",
    "save_component_time",
    "log_task_completion",
    "update_as_of_date",
]

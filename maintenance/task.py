"""MaintenanceTask class for trackable maintenance requirements."""
from typing import Any, Optional

from .aircraft import DEFAULT_COMPONENT

TRACK_INTERVAL = "Interval"
TRACK_ONE_TIME = "One Time"
TRACK_DONT_ALERT = "Dont Alert"
TRACK_TYPES = (TRACK_INTERVAL, TRACK_ONE_TIME, TRACK_DONT_ALERT)

INTERVAL_DAYS = "days"
INTERVAL_MONTHS_SPECIFIC_DAY = "months_specific_day"
INTERVAL_MONTHS_EOM = "months_eom"
INTERVAL_YEARS_SPECIFIC_DAY = "years_specific_day"
INTERVAL_TYPES = (
    INTERVAL_DAYS,
    INTERVAL_MONTHS_SPECIFIC_DAY,
    INTERVAL_MONTHS_EOM,
    INTERVAL_YEARS_SPECIFIC_DAY,
)


class MaintenanceTask:
    """A maintenance requirement with up to three independent due rules."""

    def __init__(
            self,
            id: str,
            aircraft_id: str,
            item_title: str,
            item_type: Optional[str] = None,
            associated_component: Optional[str] = None,
            is_active: Optional[bool] = None,
            track_type: Optional[str] = TRACK_INTERVAL,
            last_completed_date: Optional[Any] = None,
            last_completed_hours: Optional[float] = None,
            last_completed_cycles: Optional[float] = None,
            last_completed_notes: Optional[str] = None,
            is_days_due_enabled: bool = False,
            days_due_value: Optional[Any] = None,
            days_interval_type: Optional[str] = None,
            is_hours_due_enabled: bool = False,
            hours_due: Optional[float] = None,
            is_cycles_due_enabled: bool = False,
            cycles_due: Optional[float] = None,
            reference_number: Optional[str] = None,
            part_number: Optional[str] = None,
            serial_number: Optional[str] = None,
            details: Optional[str] = None,
            hours_tolerance: Optional[float] = None,
            alert_hours_prior: Optional[float] = None,
            cycles_tolerance: Optional[int] = None,
            alert_cycles_prior: Optional[int] = None,
            days_tolerance: Optional[int] = None,
            alert_days_prior: Optional[int] = None,
    ):
        self.id = id
        self.aircraft_id = aircraft_id
        self.item_title = item_title
        self.item_type = item_type
        self.associated_component = associated_component
        self.is_active = True if is_active is None else is_active
        self.track_type = track_type
        self.last_completed_date = last_completed_date
        self.last_completed_hours = last_completed_hours
        self.last_completed_cycles = last_completed_cycles
        self.last_completed_notes = last_completed_notes
        self.is_days_due_enabled = is_days_due_enabled or False
        self.days_due_value = days_due_value
        self.days_interval_type = days_interval_type
        self.is_hours_due_enabled = is_hours_due_enabled or False
        self.hours_due = hours_due
        self.is_cycles_due_enabled = is_cycles_due_enabled or False
        self.cycles_due = cycles_due
        self.reference_number = reference_number
        self.part_number = part_number
        self.serial_number = serial_number
        self.details = details
        self.hours_tolerance = hours_tolerance
        self.alert_hours_prior = alert_hours_prior
        self.cycles_tolerance = cycles_tolerance
        self.alert_cycles_prior = alert_cycles_prior
        self.days_tolerance = days_tolerance
        self.alert_days_prior = alert_days_prior

    @property
    def component_name(self) -> str:
        """Component whose hours/cycles drive this task (Airframe if unset)."""
        if self.associated_component and self.associated_component.strip():
            return self.associated_component
        return DEFAULT_COMPONENT

    @property
    def is_interval(self) -> bool:
        return self.track_type == TRACK_INTERVAL

    @property
    def is_one_time(self) -> bool:
        return self.track_type == TRACK_ONE_TIME

    @property
    def has_known_track_type(self) -> bool:
        return self.track_type in TRACK_TYPES

    @property
    def has_known_interval_type(self) -> bool:
        """False only when an Interval date rule names an unknown interval type."""
        if not (self.is_interval and self.is_days_due_enabled):
            return True
        return self.days_interval_type in INTERVAL_TYPES

    @property
    def display_name(self) -> str:
        """Title with reference number when present."""
        if self.reference_number:
            return f"{self.item_title} ({self.reference_number})"
        return self.item_title

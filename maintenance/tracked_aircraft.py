"""TrackedAircraft class - the aggregate for one aircraft's maintenance data."""

import logging
from datetime import date
from typing import List, Optional

from .aircraft import Aircraft, DEFAULT_COMPONENT
from .calculations import compute_remaining_margin, parse_iso_date, project_due_dates
from .component_time import ComponentTimeSnapshot, find_snapshot
from .status import Status
from .task import MaintenanceTask
from .task_due import TaskDue

logger = logging.getLogger(__name__)


class TrackedAircraft:
    """Aircraft record with component times and maintenance tasks."""

    def __init__(
        self,
        aircraft: Aircraft,
        component_times: Optional[List[ComponentTimeSnapshot]] = None,
        tasks: Optional[List[MaintenanceTask]] = None,
        state_as_of_date: Optional[str] = None,
    ):
        self.aircraft = aircraft
        self.component_times = component_times or []
        self.tasks = tasks or []
        self._state_as_of_date = state_as_of_date

    @property
    def as_of_date(self) -> str:
        """Date the status is evaluated at, defaults to today."""
        if self._state_as_of_date and parse_iso_date(self._state_as_of_date):
            return parse_iso_date(self._state_as_of_date).isoformat()
        return date.today().isoformat()

    @property
    def airframe(self) -> Optional[ComponentTimeSnapshot]:
        """Snapshot of the airframe's hours/cycles, if tracked."""
        return self.get_snapshot(DEFAULT_COMPONENT)

    def get_snapshot(self, component_name: str) -> Optional[ComponentTimeSnapshot]:
        """Find a component snapshot by trimmed name."""
        return find_snapshot(self.component_times, component_name)

    def get_task(self, task_id: str) -> Optional[MaintenanceTask]:
        """Find a task by its id."""
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def calculate_task_due(self, task: MaintenanceTask, now: Optional[date] = None) -> TaskDue:
        """
        Calculate when a task is due and how much margin remains.

        `now` defaults to the aircraft's as-of date.
        """
        now = now or date.fromisoformat(self.as_of_date)

        if not task.has_known_track_type:
            logger.warning(
                "%s: task %s has unrecognized track type %r",
                self.aircraft.tail_number, task.id, task.track_type,
            )
        elif not task.has_known_interval_type:
            logger.warning(
                "%s: task %s has unrecognized interval type %r",
                self.aircraft.tail_number, task.id, task.days_interval_type,
            )

        projection = project_due_dates(task, now)
        margin = compute_remaining_margin(task, projection, self.component_times, now)

        if margin.status == Status.MISSING_COMP_TIME:
            logger.warning(
                "%s: no component time for %r (task %s)",
                self.aircraft.tail_number, task.component_name, task.id,
            )

        return TaskDue(task=task, projection=projection, margin=margin)

    def get_all_due_status(
        self, now: Optional[date] = None, include_inactive: bool = False
    ) -> List[TaskDue]:
        """Calculate due status for all (by default only active) tasks."""
        return [
            self.calculate_task_due(task, now)
            for task in self.tasks
            if include_inactive or task.is_active
        ]

    def most_urgent(self, now: Optional[date] = None) -> Optional[TaskDue]:
        """The active task closest to (or furthest past) its due point."""
        statuses = self.get_all_due_status(now)
        if not statuses:
            return None
        return min(statuses, key=lambda s: s.urgency_key)

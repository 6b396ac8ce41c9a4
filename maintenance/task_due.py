"""TaskDue dataclass for calculated task due status."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .due_projection import DueProjection
from .remaining_margin import RemainingMargin
from .status import Status

if TYPE_CHECKING:
    from .task import MaintenanceTask


@dataclass
class TaskDue:
    """Projected due points and governing margin for one task."""

    task: "MaintenanceTask"
    projection: DueProjection
    margin: RemainingMargin

    @property
    def status(self) -> Status:
        return self.margin.status

    @property
    def is_due(self) -> bool:
        return self.status in (Status.OVERDUE, Status.DUE_SOON)

    @property
    def urgency_key(self):
        """Overdue first, then smallest remaining margin; untracked last."""
        return (not self.margin.is_overdue, self.margin.numeric_value, self.task.item_title)

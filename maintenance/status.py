"""Status enum for maintenance due classification."""

from enum import Enum


class Status(Enum):
    """Due status categories. Lower value = more urgent."""

    OVERDUE = 1
    DUE_SOON = 2
    MISSING_COMP_TIME = 3  # No hours/cycles snapshot for the component
    OK = 4
    CHECK_DUE_INFO = 5  # Nothing to track (no usable due point)

    @property
    def label(self) -> str:
        """Display label shown in the due-status column."""
        return _LABELS[self]


_LABELS = {
    Status.OVERDUE: "Overdue",
    Status.DUE_SOON: "Due Soon",
    Status.MISSING_COMP_TIME: "Missing Comp. Time",
    Status.OK: "OK",
    Status.CHECK_DUE_INFO: "Check Due Info",
}

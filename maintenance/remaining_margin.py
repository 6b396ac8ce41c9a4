"""RemainingMargin dataclass for the governing time/hours/cycles remaining."""

import math
from dataclasses import dataclass
from typing import Union

from .status import Status

UNIT_DAYS = "days"
UNIT_HOURS = "hrs"
UNIT_CYCLES = "cycles"
UNIT_NONE = "N/A"


@dataclass(frozen=True)
class NumericMargin:
    """A real remaining margin. Negative means overdue."""

    value: float


class NoDueConstraint:
    """Nothing to measure against: no due point, or no component time."""

    def __repr__(self) -> str:
        return "NO_DUE_CONSTRAINT"


NO_DUE_CONSTRAINT = NoDueConstraint()


@dataclass
class RemainingMargin:
    """Single headline margin for a task, classified into a status."""

    margin: Union[NumericMargin, NoDueConstraint]
    governing_unit: str
    status: Status
    display_text: str

    @property
    def has_constraint(self) -> bool:
        return isinstance(self.margin, NumericMargin)

    @property
    def numeric_value(self) -> float:
        """Signed margin; +inf when there is no constraint (sorts last)."""
        if isinstance(self.margin, NumericMargin):
            return self.margin.value
        return math.inf

    @property
    def is_overdue(self) -> bool:
        return self.numeric_value < 0

    @property
    def status_label(self) -> str:
        return self.status.label

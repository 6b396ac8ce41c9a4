"""DueProjection dataclass for projected due points."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class DueProjection:
    """Absolute due points for a task, one per enabled and well-formed rule."""

    due_at_date: Optional[str] = None
    due_at_hours: Optional[float] = None
    due_at_cycles: Optional[float] = None

    @property
    def is_empty(self) -> bool:
        return (
            self.due_at_date is None
            and self.due_at_hours is None
            and self.due_at_cycles is None
        )

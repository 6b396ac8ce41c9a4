"""Aircraft class for fleet registry identification."""

from typing import List, Optional

DEFAULT_COMPONENT = "Airframe"


class Aircraft:
    """Aircraft identity and the names of its tracked components."""

    def __init__(
        self,
        id: str,
        tail_number: str,
        model: Optional[str] = None,
        tracked_component_names: Optional[List[str]] = None,
        is_maintenance_tracked: Optional[bool] = None,
    ):
        self.id = id
        self.tail_number = tail_number
        self.model = model
        self.tracked_component_names = tracked_component_names or [DEFAULT_COMPONENT]
        self.is_maintenance_tracked = (
            True if is_maintenance_tracked is None else is_maintenance_tracked
        )

    @property
    def name(self) -> str:
        """Human-readable aircraft name."""
        return f"{self.tail_number} ({self.model})" if self.model else self.tail_number

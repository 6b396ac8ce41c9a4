"""Current hours/cycles snapshot for a tracked component."""

from typing import Iterable, Optional


class ComponentTimeSnapshot:
    """Accumulated utilization for one named component of one aircraft."""

    def __init__(self, component_name: str, current_time: float = 0, current_cycles: int = 0):
        self.component_name = component_name
        self.current_time = current_time if current_time is not None else 0
        self.current_cycles = current_cycles if current_cycles is not None else 0


def find_snapshot(
    snapshots: Iterable[ComponentTimeSnapshot], component_name: str
) -> Optional[ComponentTimeSnapshot]:
    """
    Find the snapshot for a component by name.

    Both sides are trimmed and compared case-sensitively, so " Engine 1"
    matches "Engine 1" but "engine 1" does not.
    """
    wanted = (component_name or "").strip()
    for snapshot in snapshots:
        if (snapshot.component_name or "").strip() == wanted:
            return snapshot
    return None

"""YAML loading and saving utilities for aircraft maintenance data."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .aircraft import Aircraft
from .component_time import ComponentTimeSnapshot
from .task import MaintenanceTask
from .tracked_aircraft import TrackedAircraft

logger = logging.getLogger(__name__)

# YAML key -> MaintenanceTask attribute
_TASK_FIELDS = {
    "itemType": "item_type",
    "associatedComponent": "associated_component",
    "isActive": "is_active",
    "trackType": "track_type",
    "lastCompletedDate": "last_completed_date",
    "lastCompletedHours": "last_completed_hours",
    "lastCompletedCycles": "last_completed_cycles",
    "lastCompletedNotes": "last_completed_notes",
    "isDaysDueEnabled": "is_days_due_enabled",
    "daysDueValue": "days_due_value",
    "daysIntervalType": "days_interval_type",
    "isHoursDueEnabled": "is_hours_due_enabled",
    "hoursDue": "hours_due",
    "isCyclesDueEnabled": "is_cycles_due_enabled",
    "cyclesDue": "cycles_due",
    "referenceNumber": "reference_number",
    "partNumber": "part_number",
    "serialNumber": "serial_number",
    "details": "details",
    "hoursTolerance": "hours_tolerance",
    "alertHoursPrior": "alert_hours_prior",
    "cyclesTolerance": "cycles_tolerance",
    "alertCyclesPrior": "alert_cycles_prior",
    "daysTolerance": "days_tolerance",
    "alertDaysPrior": "alert_days_prior",
}


def _parse_object(
    dct: Dict[str, Any]
) -> Union[Aircraft, ComponentTimeSnapshot, MaintenanceTask, TrackedAircraft, dict]:
    """Parse dictionary into appropriate object type."""
    # Aircraft registry record (inside 'aircraft' key)
    if "tailNumber" in dct:
        return Aircraft(
            str(dct.get("id") or dct["tailNumber"]),
            dct["tailNumber"],
            dct.get("model"),
            dct.get("trackedComponentNames"),
            dct.get("isMaintenanceTracked"),
        )
    # Component time snapshot
    elif "componentName" in dct:
        return ComponentTimeSnapshot(
            dct["componentName"],
            dct.get("currentTime"),
            dct.get("currentCycles"),
        )
    # Maintenance task
    elif "itemTitle" in dct:
        kwargs = {attr: dct[key] for key, attr in _TASK_FIELDS.items() if key in dct}
        return MaintenanceTask(
            str(dct["id"]),
            dct.get("aircraftId"),
            dct["itemTitle"],
            **kwargs,
        )
    # Top-level aircraft file
    elif "aircraft" in dct:
        state = dct.get("state") or {}
        tracked = TrackedAircraft(
            dct["aircraft"],
            dct.get("componentTimes"),
            dct.get("tasks"),
            state.get("asOfDate"),
        )
        for task in tracked.tasks:
            if not task.aircraft_id:
                task.aircraft_id = tracked.aircraft.id
        return tracked
    else:
        # Return dict as-is for unknown structures (like 'state')
        return dct


def load_aircraft(filename: Union[str, Path]) -> TrackedAircraft:
    """Load an aircraft and its maintenance data from a YAML file."""
    with open(filename, "rb") as fp:
        # default=str turns unquoted YAML dates into ISO strings
        json_data = json.dumps(yaml.load(fp, Loader=yaml.SafeLoader), indent=4, default=str)
        return json.loads(json_data, object_hook=_parse_object)


def load_fleet(directory: Union[str, Path]) -> Dict[str, TrackedAircraft]:
    """Load every aircraft YAML file in a directory, keyed by file stem."""
    directory = Path(directory)
    paths = sorted(list(directory.glob("*.yaml")) + list(directory.glob("*.yml")))
    return {path.stem: load_aircraft(path) for path in paths}


def _load_raw(filename: Union[str, Path]) -> Dict[str, Any]:
    with open(filename, "r") as fp:
        return yaml.load(fp, Loader=yaml.SafeLoader)


def _dump_raw(filename: Union[str, Path], data: Dict[str, Any]) -> None:
    with open(filename, "w") as fp:
        yaml.dump(
            data,
            fp,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
            width=120,
        )


def save_component_time(
    filename: Union[str, Path],
    component_name: str,
    current_time: float,
    current_cycles: Optional[int] = None,
) -> None:
    """
    Set the current hours (and optionally cycles) for a component.

    Matches the existing snapshot by trimmed name; appends a new snapshot
    and registers the component name when there is none.
    """
    data = _load_raw(filename)
    name = component_name.strip()

    if data.get("componentTimes") is None:
        data["componentTimes"] = []

    for snapshot in data["componentTimes"]:
        if str(snapshot.get("componentName", "")).strip() == name:
            snapshot["currentTime"] = current_time
            if current_cycles is not None:
                snapshot["currentCycles"] = current_cycles
            break
    else:
        data["componentTimes"].append(
            {
                "componentName": name,
                "currentTime": current_time,
                "currentCycles": current_cycles if current_cycles is not None else 0,
            }
        )

    aircraft = data.get("aircraft") or {}
    tracked = aircraft.get("trackedComponentNames")
    if tracked is not None and name not in [str(n).strip() for n in tracked]:
        tracked.append(name)

    _dump_raw(filename, data)
    logger.info("Saved component time %s=%s/%s to %s", name, current_time, current_cycles, filename)


def log_task_completion(
    filename: Union[str, Path],
    task_id: str,
    completed_date: str,
    completed_hours: Optional[float] = None,
    completed_cycles: Optional[int] = None,
    notes: Optional[str] = None,
) -> None:
    """
    Record a task's latest completion in an aircraft YAML file.

    Raises KeyError if no task has the given id.
    """
    data = _load_raw(filename)

    for task in data.get("tasks") or []:
        if str(task.get("id")) == str(task_id):
            break
    else:
        raise KeyError(f"Task '{task_id}' not found")

    task["lastCompletedDate"] = completed_date
    if completed_hours is not None:
        task["lastCompletedHours"] = completed_hours
    if completed_cycles is not None:
        task["lastCompletedCycles"] = completed_cycles
    if notes is not None:
        task["lastCompletedNotes"] = notes

    _dump_raw(filename, data)
    logger.info("Logged completion of task %s on %s to %s", task_id, completed_date, filename)


def update_as_of_date(filename: Union[str, Path], as_of_date: Optional[str]) -> None:
    """Set (or clear, with None) the state.asOfDate of an aircraft YAML file."""
    data = _load_raw(filename)

    if data.get("state") is None:
        data["state"] = {}
    if as_of_date is None:
        data["state"].pop("asOfDate", None)
    else:
        data["state"]["asOfDate"] = as_of_date

    _dump_raw(filename, data)

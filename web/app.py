"""Flask JSON API for aircraft maintenance due tracking."""

import os
from datetime import date
from pathlib import Path

from flask import Flask, abort, jsonify, request

from maintenance.calculations import format_due_at, parse_iso_date, to_number
from maintenance.loader import (
    load_aircraft,
    load_fleet,
    log_task_completion,
    save_component_time,
)
from maintenance.status import Status

app = Flask(__name__)
app.secret_key = os.environ.get("SECRET_KEY", "dev-secret-key-change-in-prod")

# Path to aircraft directory (relative to project root)
app.config["AIRCRAFT_DIR"] = Path(
    os.environ.get("MX_AIRCRAFT_DIR", Path(__file__).parent.parent / "aircraft")
)

STATUS_FILTERS = {
    "overdue": Status.OVERDUE,
    "due_soon": Status.DUE_SOON,
    "missing": Status.MISSING_COMP_TIME,
    "ok": Status.OK,
    "check": Status.CHECK_DUE_INFO,
}


def get_aircraft_path(aircraft_id: str) -> Path:
    """Get full path for an aircraft ID (file stem)."""
    return Path(app.config["AIRCRAFT_DIR"]) / f"{aircraft_id}.yaml"


def get_tracked_or_404(aircraft_id: str):
    path = get_aircraft_path(aircraft_id)
    if not path.exists():
        abort(404, description=f"Aircraft '{aircraft_id}' not found")
    return path, load_aircraft(path)


def snapshot_to_dict(snapshot) -> dict:
    return {
        "componentName": snapshot.component_name,
        "currentTime": snapshot.current_time,
        "currentCycles": snapshot.current_cycles,
    }


def task_due_to_dict(svc) -> dict:
    """Serialize a TaskDue for the maintenance table."""
    margin = svc.margin
    return {
        "taskId": svc.task.id,
        "itemTitle": svc.task.item_title,
        "itemType": svc.task.item_type,
        "associatedComponent": svc.task.component_name,
        "trackType": svc.task.track_type,
        "dueAtDate": svc.projection.due_at_date,
        "dueAtHours": svc.projection.due_at_hours,
        "dueAtCycles": svc.projection.due_at_cycles,
        "dueAtDisplay": format_due_at(svc.projection),
        "displayText": margin.display_text,
        # JSON has no infinity; untracked margins serialize as null
        "numericValue": margin.numeric_value if margin.has_constraint else None,
        "governingUnit": margin.governing_unit,
        "isOverdue": margin.is_overdue,
        "statusLabel": margin.status_label,
    }


def parse_as_of():
    """Optional ?as_of=YYYY-MM-DD query parameter."""
    as_of = request.args.get("as_of")
    if not as_of:
        return None
    parsed = parse_iso_date(as_of)
    if parsed is None:
        abort(400, description=f"Invalid as_of date '{as_of}'")
    return parsed


def get_hours(payload, key: str):
    """Optional non-negative hours field; 400 if present but invalid."""
    if payload.get(key) in (None, ""):
        return None
    hours = to_number(payload.get(key))
    if hours is None or hours < 0:
        abort(400, description=f"{key} must be a non-negative number")
    return hours


def get_cycles(payload, key: str):
    """Optional non-negative integer cycles field; 400 if present but invalid."""
    if payload.get(key) in (None, ""):
        return None
    cycles = to_number(payload.get(key))
    if cycles is None or cycles < 0 or not cycles.is_integer():
        abort(400, description=f"{key} must be a non-negative integer")
    return int(cycles)


@app.errorhandler(400)
@app.errorhandler(404)
def json_error(error):
    return jsonify({"error": error.description}), error.code


@app.route("/")
def index():
    """Fleet overview: most urgent task per tracked aircraft."""
    now = parse_as_of()
    aircraft = []
    for aircraft_id, tracked in load_fleet(app.config["AIRCRAFT_DIR"]).items():
        if not tracked.aircraft.is_maintenance_tracked:
            continue
        all_status = tracked.get_all_due_status(now)
        urgent = tracked.most_urgent(now)
        airframe = tracked.airframe
        aircraft.append({
            "id": aircraft_id,
            "tailNumber": tracked.aircraft.tail_number,
            "model": tracked.aircraft.model,
            "airframe": snapshot_to_dict(airframe) if airframe else None,
            "overdue": sum(1 for s in all_status if s.status == Status.OVERDUE),
            "dueSoon": sum(1 for s in all_status if s.status == Status.DUE_SOON),
            "mostUrgent": task_due_to_dict(urgent) if urgent else None,
        })
    return jsonify({"aircraft": aircraft})


@app.route("/aircraft/<aircraft_id>")
def aircraft_detail(aircraft_id: str):
    """Aircraft detail: component times and due status per task."""
    _, tracked = get_tracked_or_404(aircraft_id)
    now = parse_as_of() or date.fromisoformat(tracked.as_of_date)
    status_filter = request.args.get("status", "").lower() or None
    include_inactive = request.args.get("include_inactive", "").lower() == "true"

    all_status = tracked.get_all_due_status(now, include_inactive=include_inactive)
    status_counts = {
        key: sum(1 for s in all_status if s.status == status)
        for key, status in STATUS_FILTERS.items()
    }

    filtered = all_status
    if status_filter in STATUS_FILTERS:
        filtered = [s for s in all_status if s.status == STATUS_FILTERS[status_filter]]

    # Sort by urgency (OVERDUE first, then DUE_SOON, etc.)
    filtered.sort(key=lambda s: (s.status.value, s.urgency_key))

    return jsonify({
        "id": aircraft_id,
        "tailNumber": tracked.aircraft.tail_number,
        "model": tracked.aircraft.model,
        "asOfDate": now.isoformat(),
        "trackedComponentNames": tracked.aircraft.tracked_component_names,
        "componentTimes": [snapshot_to_dict(s) for s in tracked.component_times],
        "statusCounts": status_counts,
        "tasks": [task_due_to_dict(s) for s in filtered],
    })


@app.route("/aircraft/<aircraft_id>/components", methods=["POST"])
def update_component_time(aircraft_id: str):
    """Update a component's current hours/cycles and return recomputed tasks."""
    path, _ = get_tracked_or_404(aircraft_id)
    payload = request.get_json(silent=True) or request.form

    component_name = (payload.get("componentName") or "").strip()
    if not component_name:
        abort(400, description="componentName is required")

    hours = get_hours(payload, "currentTime")
    if hours is None:
        abort(400, description="currentTime is required")
    cycles = get_cycles(payload, "currentCycles")

    save_component_time(path, component_name, hours, cycles)
    app.logger.info("%s: %s set to %s hrs / %s cycles", aircraft_id, component_name, hours, cycles)

    tracked = load_aircraft(path)
    all_status = tracked.get_all_due_status()
    all_status.sort(key=lambda s: (s.status.value, s.urgency_key))
    return jsonify({
        "componentTimes": [snapshot_to_dict(s) for s in tracked.component_times],
        "tasks": [task_due_to_dict(s) for s in all_status],
    })


@app.route("/aircraft/<aircraft_id>/tasks/<task_id>/complete", methods=["POST"])
def complete_task(aircraft_id: str, task_id: str):
    """Record a task completion and return its recomputed due status."""
    path, tracked = get_tracked_or_404(aircraft_id)
    task = tracked.get_task(task_id)
    if task is None:
        abort(404, description=f"Task '{task_id}' not found")

    payload = request.get_json(silent=True) or request.form
    completed_date = payload.get("date") or date.today().isoformat()
    if parse_iso_date(completed_date) is None:
        abort(400, description=f"Invalid date '{completed_date}'")

    # Default to the component's current hours/cycles
    snapshot = tracked.get_snapshot(task.component_name)
    hours = get_hours(payload, "hours")
    cycles = get_cycles(payload, "cycles")
    if hours is None and snapshot is not None:
        hours = snapshot.current_time
    if cycles is None and snapshot is not None:
        cycles = snapshot.current_cycles

    log_task_completion(
        path,
        task_id,
        completed_date,
        hours,
        cycles,
        payload.get("notes") or None,
    )
    app.logger.info("%s: task %s completed on %s", aircraft_id, task_id, completed_date)

    tracked = load_aircraft(path)
    return jsonify(task_due_to_dict(tracked.calculate_task_due(tracked.get_task(task_id))))


if __name__ == "__main__":
    # Run with debug mode for development
    app.run(debug=True, host="0.0.0.0", port=5001)

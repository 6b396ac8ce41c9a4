#!/usr/bin/env python3
"""
Unified CLI for aircraft maintenance due tracking.

Commands:
  status       - Show which maintenance tasks are due, overdue, or upcoming
  components   - Show current hours/cycles per tracked component
  update-time  - Update a component's current hours/cycles
  complete     - Record a task completion
  set-as-of    - Set or clear the date status is evaluated at
  fleet        - Most urgent task per aircraft in a directory
"""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path
from tabulate import tabulate
from typing import Any, List, Optional

from maintenance import (
    Status,
    TaskDue,
    TrackedAircraft,
    format_due_at,
    load_aircraft,
    load_fleet,
    log_task_completion,
    parse_iso_date,
    save_component_time,
    update_as_of_date,
)
from maintenance.calculations import to_number

# =============================================================================
# Formatting helpers
# =============================================================================


def format_hours(hours: Any) -> str:
    """Format flight hours for display, "-" when missing or not a number."""
    hours = to_number(hours)
    return f"{hours:,.1f}" if hours is not None else "-"


def format_cycles(cycles: Any) -> str:
    """Format cycles for display, "-" when missing or not a number."""
    cycles = to_number(cycles)
    return f"{cycles:,.0f}" if cycles is not None else "-"


def format_last_done(svc: TaskDue) -> str:
    """Format last completion as 'date @ hrs / cycles'."""
    task = svc.task
    parts = []
    if task.last_completed_date:
        parts.append(str(task.last_completed_date))
    usage = []
    if to_number(task.last_completed_hours):
        usage.append(f"{format_hours(task.last_completed_hours)} hrs")
    if to_number(task.last_completed_cycles):
        usage.append(f"{format_cycles(task.last_completed_cycles)} cyc")
    if usage:
        parts.append(" / ".join(usage))
    return " @ ".join(parts) if parts else "-"


def truncate(text: Optional[str], max_len: int = 30) -> str:
    """Truncate text with ellipsis if too long."""
    if text is None:
        return "-"
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."


# =============================================================================
# Status command
# =============================================================================


def make_status_table(statuses: List[TaskDue]) -> List[List[str]]:
    """Convert task due statuses to table rows."""
    rows = []
    for svc in statuses:
        rows.append(
            [
                truncate(svc.task.display_name, 40),
                svc.task.component_name,
                format_last_done(svc),
                format_due_at(svc.projection),
                svc.margin.display_text,
                svc.margin.status_label,
            ]
        )
    return rows


STATUS_HEADERS = ["Task", "Component", "Last Done", "Due At", "Remaining", "Status"]

STATUS_SECTIONS = [
    (Status.OVERDUE, "OVERDUE"),
    (Status.DUE_SOON, "DUE SOON"),
    (Status.MISSING_COMP_TIME, "MISSING COMPONENT TIME"),
    (Status.OK, "OK"),
    (Status.CHECK_DUE_INFO, "CHECK DUE INFO (nothing to track)"),
]


def cmd_status(args):
    """Show which maintenance tasks are due, overdue, or upcoming."""
    tracked = load_aircraft(args.target)

    now = None
    if args.as_of:
        now = parse_iso_date(args.as_of)
        if now is None:
            print(f"Error: Invalid date '{args.as_of}' (expected YYYY-MM-DD)")
            return 1
    as_of = now.isoformat() if now else tracked.as_of_date

    airframe = tracked.airframe
    print(f"Aircraft: {tracked.aircraft.name}")
    if airframe:
        print(
            f"Airframe: {format_hours(airframe.current_time)} hrs / "
            f"{format_cycles(airframe.current_cycles)} cycles (as of {as_of})"
        )
    else:
        print(f"Airframe: no component time recorded (as of {as_of})")
    print(f"Tasks: {len(tracked.tasks)}")
    print()

    statuses = tracked.get_all_due_status(
        now=now, include_inactive=args.include_inactive
    )

    for status, title in STATUS_SECTIONS:
        section = sorted(
            [s for s in statuses if s.status == status], key=lambda s: s.urgency_key
        )
        if section:
            print(f"{title}:")
            print(
                tabulate(
                    make_status_table(section), headers=STATUS_HEADERS, tablefmt="simple"
                )
            )
            print()

    return 0


# =============================================================================
# Components command
# =============================================================================


def make_components_table(tracked: TrackedAircraft) -> List[List[str]]:
    """One row per tracked component name, with its snapshot if any."""
    rows = []
    for name in tracked.aircraft.tracked_component_names:
        snapshot = tracked.get_snapshot(name)
        if snapshot is None:
            rows.append([name, "-", "-"])
        else:
            rows.append(
                [
                    name,
                    format_hours(snapshot.current_time),
                    format_cycles(snapshot.current_cycles),
                ]
            )
    return rows


def cmd_components(args):
    """Show current hours/cycles per tracked component."""
    tracked = load_aircraft(args.target)

    print(f"Aircraft: {tracked.aircraft.name}")
    print()
    headers = ["Component", "Hours", "Cycles"]
    print(tabulate(make_components_table(tracked), headers=headers, tablefmt="simple"))
    return 0


# =============================================================================
# Update Time command
# =============================================================================


def cmd_update_time(args):
    """Update a component's current hours/cycles."""
    tracked = load_aircraft(args.target)
    name = args.component.strip()
    old = tracked.get_snapshot(name)

    print(f"Aircraft:  {tracked.aircraft.name}")
    print(f"Component: {name}")
    if old:
        print(
            f"Current:   {format_hours(old.current_time)} hrs / "
            f"{format_cycles(old.current_cycles)} cycles"
        )
    else:
        print("Current:   (new component)")
    new_cycles = args.cycles if args.cycles is not None else (old.current_cycles if old else 0)
    print(f"New:       {format_hours(args.hours)} hrs / {format_cycles(new_cycles)} cycles")
    print()

    if args.dry_run:
        print("(dry run - no changes made)")
        return 0

    save_component_time(args.target, name, args.hours, args.cycles)
    print("Component time updated.")
    return 0


# =============================================================================
# Complete command
# =============================================================================


def cmd_complete(args):
    """Record a task completion."""
    tracked = load_aircraft(args.target)
    task = tracked.get_task(args.task_id)

    if task is None:
        print(f"Error: Unknown task id '{args.task_id}'")
        print("\nAvailable tasks:")
        for t in sorted(tracked.tasks, key=lambda t: t.id):
            print(f"  {t.id}: {t.display_name}")
        return 1

    completed_date = args.date or date.today().isoformat()
    if parse_iso_date(completed_date) is None:
        print(f"Error: Invalid date '{completed_date}' (expected YYYY-MM-DD)")
        return 1

    # Default hours/cycles to the component's current values
    snapshot = tracked.get_snapshot(task.component_name)
    hours = args.hours
    cycles = args.cycles
    if hours is None and snapshot is not None:
        hours = snapshot.current_time
    if cycles is None and snapshot is not None:
        cycles = snapshot.current_cycles

    print(f"Recording completion in {args.target}:")
    print(f"  Task:   {task.display_name}")
    print(f"  Date:   {completed_date}")
    if hours is not None:
        print(f"  Hours:  {format_hours(hours)}")
    if cycles is not None:
        print(f"  Cycles: {format_cycles(cycles)}")
    if args.notes:
        print(f"  Notes:  {args.notes}")
    print()

    if args.dry_run:
        print("(dry run - no changes made)")
        return 0

    log_task_completion(args.target, task.id, completed_date, hours, cycles, args.notes)
    print("Completion saved.")
    return 0


# =============================================================================
# Set As-Of command
# =============================================================================


def cmd_set_as_of(args):
    """Set or clear the stored as-of date."""
    if args.clear:
        update_as_of_date(args.target, None)
        print("As-of date cleared (status uses today).")
        return 0

    as_of = args.date or date.today().isoformat()
    if parse_iso_date(as_of) is None:
        print(f"Error: Invalid date '{as_of}' (expected YYYY-MM-DD)")
        return 1

    update_as_of_date(args.target, as_of)
    print(f"As-of date set to {as_of}.")
    return 0


# =============================================================================
# Fleet command
# =============================================================================


def make_fleet_table(fleet: dict, now: Optional[date] = None) -> List[List[str]]:
    """Most urgent active task per maintenance-tracked aircraft."""
    rows = []
    for tracked in fleet.values():
        if not tracked.aircraft.is_maintenance_tracked:
            continue
        airframe = tracked.airframe
        hours = format_hours(airframe.current_time) if airframe else "-"
        cycles = format_cycles(airframe.current_cycles) if airframe else "-"
        urgent = tracked.most_urgent(now)
        if urgent is None:
            rows.append([tracked.aircraft.name, hours, cycles, "No items tracked", "N/A", "-", "-"])
            continue
        rows.append(
            [
                tracked.aircraft.name,
                hours,
                cycles,
                truncate(urgent.task.display_name, 40),
                format_due_at(urgent.projection),
                urgent.margin.display_text,
                urgent.margin.status_label,
            ]
        )
    return rows


def cmd_fleet(args):
    """Most urgent task per aircraft in a directory."""
    fleet = load_fleet(args.target)
    if not fleet:
        print(f"No aircraft files found in {args.target}")
        return 0

    headers = ["Aircraft", "Airframe Hrs", "Cycles", "Next Due Item", "Due At", "To Go", "Status"]
    print(tabulate(make_fleet_table(fleet), headers=headers, tablefmt="simple"))
    return 0


# =============================================================================
# Main
# =============================================================================


def main():
    parser = argparse.ArgumentParser(
        description="Aircraft maintenance due tracker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s aircraft/n123ab.yaml status
  %(prog)s aircraft/n123ab.yaml status --as-of 2026-01-01
  %(prog)s aircraft/n123ab.yaml components
  %(prog)s aircraft/n123ab.yaml update-time "Engine 1" --hours 1190.4 --cycles 851
  %(prog)s aircraft/n123ab.yaml complete mx-001 --date 2026-03-01
  %(prog)s aircraft/n123ab.yaml set-as-of 2026-03-01
  %(prog)s aircraft fleet
""",
    )
    parser.add_argument(
        "target",
        type=Path,
        help="Path to aircraft YAML file (or aircraft directory for 'fleet')",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log configuration warnings and file writes",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Status subcommand
    status_parser = subparsers.add_parser(
        "status", help="Show which maintenance tasks are due, overdue, or upcoming"
    )
    status_parser.add_argument(
        "--as-of",
        type=str,
        help="Evaluate as of date YYYY-MM-DD (default: state.asOfDate or today)",
    )
    status_parser.add_argument(
        "--include-inactive",
        action="store_true",
        help="Include tasks marked inactive",
    )

    # Components subcommand
    subparsers.add_parser("components", help="Show current hours/cycles per component")

    # Update Time subcommand
    update_parser = subparsers.add_parser(
        "update-time", help="Update a component's current hours/cycles"
    )
    update_parser.add_argument("component", type=str, help="Component name (e.g., 'Engine 1')")
    update_parser.add_argument("--hours", type=float, required=True, help="Current hours")
    update_parser.add_argument("--cycles", type=int, help="Current cycles")
    update_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be updated without saving",
    )

    # Complete subcommand
    complete_parser = subparsers.add_parser("complete", help="Record a task completion")
    complete_parser.add_argument("task_id", type=str, help="Task id (e.g., 'mx-001')")
    complete_parser.add_argument(
        "--date",
        type=str,
        help="Completion date in YYYY-MM-DD format (default: today)",
    )
    complete_parser.add_argument(
        "--hours",
        type=float,
        help="Component hours at completion (default: current)",
    )
    complete_parser.add_argument(
        "--cycles",
        type=int,
        help="Component cycles at completion (default: current)",
    )
    complete_parser.add_argument("--notes", type=str, help="Completion notes")
    complete_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be saved without saving",
    )

    # Set As-Of subcommand
    as_of_parser = subparsers.add_parser(
        "set-as-of", help="Set or clear the date status is evaluated at"
    )
    as_of_parser.add_argument(
        "date", nargs="?", help="Date in YYYY-MM-DD format (default: today)"
    )
    as_of_parser.add_argument(
        "--clear", action="store_true", help="Remove the stored date"
    )

    # Fleet subcommand
    subparsers.add_parser("fleet", help="Most urgent task per aircraft in a directory")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Validate target exists
    if not args.target.exists():
        print(f"Error: File not found: {args.target}")
        return 1
    if args.command == "fleet" and not args.target.is_dir():
        print(f"Error: Not a directory: {args.target}")
        return 1

    # Dispatch to command handler
    if args.command == "status":
        return cmd_status(args)
    elif args.command == "components":
        return cmd_components(args)
    elif args.command == "update-time":
        return cmd_update_time(args)
    elif args.command == "complete":
        return cmd_complete(args)
    elif args.command == "set-as-of":
        return cmd_set_as_of(args)
    elif args.command == "fleet":
        return cmd_fleet(args)

    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)

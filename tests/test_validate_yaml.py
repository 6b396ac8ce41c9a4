#!/usr/bin/env python3
"""Tests for validate_yaml schema validation."""

from pathlib import Path

from validate_yaml import (
    check_due_rules,
    load_schema,
    main,
    validate_aircraft_file,
    validate_directory,
)

SAMPLE_DIR = Path(__file__).parent.parent / "aircraft"


class TestLoadSchema:
    """Tests for load_schema function."""

    def test_returns_dict(self):
        schema = load_schema()
        assert isinstance(schema, dict)

    def test_has_expected_structure(self):
        schema = load_schema()
        assert "aircraft" in schema["properties"]
        assert "tasks" in schema["properties"]
        assert schema["required"] == ["aircraft"]


class TestValidateAircraftFile:
    """Tests for validate_aircraft_file function."""

    def test_valid_minimal_returns_no_errors(self, tmp_path):
        """Valid minimal aircraft file returns empty error list."""
        path = tmp_path / "valid.yaml"
        path.write_text("""
aircraft:
  tailNumber: N123AB
  model: Cessna Citation CJ3

componentTimes:
  - componentName: Airframe
    currentTime: 1200.5
    currentCycles: 850

tasks:
  - id: mx-001
    itemTitle: Phase A Inspection
    trackType: Interval
    isDaysDueEnabled: true
    daysDueValue: '12'
    daysIntervalType: months_eom
""")
        errors = validate_aircraft_file(path, load_schema())
        assert errors == []

    def test_unquoted_dates_are_valid(self, tmp_path):
        """Unquoted YAML dates validate the same way the loader reads them."""
        path = tmp_path / "dates.yaml"
        path.write_text("""
aircraft:
  tailNumber: N123AB
state:
  asOfDate: 2025-02-01
tasks:
  - id: mx-001
    itemTitle: ELT Battery
    trackType: One Time
    lastCompletedDate: 2025-01-01
    isDaysDueEnabled: true
    daysDueValue: 2026-01-01
""")
        errors = validate_aircraft_file(path, load_schema())
        assert errors == []

    def test_sample_files_are_valid(self):
        schema = load_schema()
        for path in SAMPLE_DIR.glob("*.yaml"):
            assert validate_aircraft_file(path, schema) == [], path.name

    def test_missing_tail_number_returns_errors(self, tmp_path):
        """Missing required aircraft field returns schema validation errors."""
        path = tmp_path / "invalid.yaml"
        path.write_text("""
aircraft:
  model: Cessna Citation CJ3
  # tailNumber missing

tasks: []
""")
        errors = validate_aircraft_file(path, load_schema())
        assert len(errors) >= 1
        assert any("Schema validation" in e for e in errors)

    def test_unknown_track_type_returns_errors(self, tmp_path):
        path = tmp_path / "invalid.yaml"
        path.write_text("""
aircraft:
  tailNumber: N123AB
tasks:
  - id: mx-001
    itemTitle: Gear Swing
    trackType: Recurring
""")
        errors = validate_aircraft_file(path, load_schema())
        assert any("Schema validation" in e for e in errors)
        assert any("tasks.0.trackType" in e for e in errors)

    def test_due_rule_warnings_are_errors(self, tmp_path):
        path = tmp_path / "rules.yaml"
        path.write_text("""
aircraft:
  tailNumber: N123AB
tasks:
  - id: mx-001
    itemTitle: ELT Battery
    trackType: One Time
    isDaysDueEnabled: true
    daysDueValue: '03/01/2025'
""")
        errors = validate_aircraft_file(path, load_schema())
        assert len(errors) == 1
        assert "mx-001" in errors[0]

    def test_invalid_yaml_returns_parse_error(self, tmp_path):
        """Invalid YAML syntax returns YAML parse error."""
        path = tmp_path / "bad.yaml"
        path.write_text("""
aircraft:
  tailNumber: N123AB
  invalid: [unclosed
""")
        errors = validate_aircraft_file(path, load_schema())
        assert len(errors) >= 1
        assert any("YAML" in e for e in errors)

    def test_nonexistent_file_returns_errors(self, tmp_path):
        """Nonexistent file returns error (caught by validate_aircraft_file)."""
        path = tmp_path / "does_not_exist.yaml"
        errors = validate_aircraft_file(path, load_schema())
        assert len(errors) >= 1
        assert any("Error" in e for e in errors)


class TestCheckDueRules:
    """Tests for check_due_rules function."""

    def test_valid_rules(self):
        data = {"tasks": [
            {"id": "a", "isDaysDueEnabled": True, "daysDueValue": "30"},
            {"id": "b", "trackType": "One Time", "isDaysDueEnabled": True,
             "daysDueValue": "2025-03-01"},
            {"id": "c", "isDaysDueEnabled": False, "daysDueValue": "nonsense"},
        ]}
        assert check_due_rules(data) == []

    def test_interval_needs_positive_number(self):
        data = {"tasks": [
            {"id": "a", "isDaysDueEnabled": True, "daysDueValue": "0"},
            {"id": "b", "isDaysDueEnabled": True, "daysDueValue": "twelve"},
        ]}
        warnings = check_due_rules(data)
        assert len(warnings) == 2
        assert "Task a" in warnings[0]

    def test_dont_alert_is_not_checked(self):
        data = {"tasks": [
            {"id": "a", "trackType": "Dont Alert", "isDaysDueEnabled": True,
             "daysDueValue": "whenever"},
        ]}
        assert check_due_rules(data) == []

    def test_no_tasks(self):
        assert check_due_rules({"aircraft": {"tailNumber": "N1"}}) == []
        assert check_due_rules({"tasks": None}) == []


class TestValidateDirectory:
    """Tests for validate_directory and main."""

    def test_keys_by_file_name(self, tmp_path):
        (tmp_path / "good.yaml").write_text("aircraft:\n  tailNumber: N1\n")
        (tmp_path / "bad.yml").write_text("aircraft:\n  model: CJ3\n")
        (tmp_path / "notes.txt").write_text("ignored")

        results = validate_directory(tmp_path, load_schema())

        assert list(results.keys()) == ["bad.yml", "good.yaml"]
        assert results["good.yaml"] == []
        assert results["bad.yml"]

    def test_main_exit_codes(self, tmp_path, capsys):
        (tmp_path / "good.yaml").write_text("aircraft:\n  tailNumber: N1\n")
        assert main([str(tmp_path)]) == 0

        (tmp_path / "bad.yaml").write_text("aircraft:\n  model: CJ3\n")
        assert main([str(tmp_path)]) == 1
        assert "FAIL: bad.yaml" in capsys.readouterr().out

    def test_main_missing_directory(self, tmp_path):
        assert main([str(tmp_path / "nope")]) == 1

    def test_main_empty_directory(self, tmp_path):
        assert main([str(tmp_path)]) == 0

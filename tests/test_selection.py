"""
Tests for selecting active employees and externals.
"""
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.data.schema import PersonKind, PersonRecord
from src.data.selection import resolve_person, select_active_people


class TestResolvePerson:
    """Tests for picking the person sub-record."""

    def test_employee(self, person_factory):
        person = resolve_person({"employees": person_factory()})

        assert person.kind is PersonKind.EMPLOYEE
        assert person.name == "Anna Schmidt"

    def test_external(self, person_factory):
        person = resolve_person({"externals": person_factory(name="Marco Rossi")})

        assert person.kind is PersonKind.EXTERNAL
        assert person.name == "Marco Rossi"

    def test_employee_checked_first(self, person_factory):
        """If both are present the employee wins."""
        record = {
            "employees": person_factory(name="Employee"),
            "externals": person_factory(name="External"),
        }

        assert resolve_person(record).kind is PersonKind.EMPLOYEE

    def test_no_sub_record(self):
        assert resolve_person({"id": 1}) is None
        assert resolve_person({"employees": None, "externals": None}) is None

    def test_populated_non_mapping_employee_blocks_external(self, person_factory):
        """A populated but malformed employees value is the person, so nothing resolves."""
        record = {"employees": ["x"], "externals": person_factory(name="E")}

        assert resolve_person(record) is None
        assert select_active_people([record]) == []

    def test_empty_employee_value_falls_back_to_external(self, person_factory):
        record = {"employees": "", "externals": person_factory(name="E")}

        assert resolve_person(record).kind is PersonKind.EXTERNAL

    def test_empty_mapping_counts_as_populated(self, person_factory):
        record = {"employees": {}, "externals": person_factory(name="E")}

        person = resolve_person(record)

        assert person.kind is PersonKind.EMPLOYEE
        assert not person.is_active

    def test_non_mapping_record(self):
        assert resolve_person(None) is None
        assert resolve_person("employees") is None


class TestIsActive:
    """Tests for status resolution."""

    def test_aggregated_status_active(self, person_factory):
        data = person_factory(status=None, aggregated_status="active")

        assert PersonRecord(PersonKind.EMPLOYEE, data).is_active

    def test_top_level_status_fallback(self, person_factory):
        """Top-level status counts when statusAggregation does not say active."""
        data = person_factory(status="active", aggregated_status=None)

        assert PersonRecord(PersonKind.EMPLOYEE, data).is_active

    def test_inactive(self, person_factory):
        data = person_factory(status="inactive", aggregated_status="inactive")

        assert not PersonRecord(PersonKind.EMPLOYEE, data).is_active

    def test_status_absent(self):
        assert not PersonRecord(PersonKind.EXTERNAL, {"name": "X"}).is_active

    def test_case_sensitive(self, person_factory):
        data = person_factory(status="Active", aggregated_status="ACTIVE")

        assert not PersonRecord(PersonKind.EMPLOYEE, data).is_active


class TestSelectActivePeople:
    """Tests for the selector."""

    def test_drops_inactive_and_empty(self, source_records):
        people = select_active_people(source_records)

        assert [p.name for p in people] == ["Anna Schmidt", "Marco Rossi"]

    def test_keeps_source_order(self, person_factory):
        records = [
            {"externals": person_factory(name="B")},
            {"employees": person_factory(name="A")},
        ]

        assert [p.name for p in select_active_people(records)] == ["B", "A"]

    def test_empty_input(self):
        assert select_active_people([]) == []

    def test_skips_malformed_entries(self, person_factory):
        records = [None, 42, "text", {"employees": person_factory()}]

        assert len(select_active_people(records)) == 1

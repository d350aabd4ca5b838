"""Unit tests for DiagnosticsBuilder and the Diagnostics model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from simready.application.config.validators import (
    Diagnostics,
    DiagnosticsBuilder,
    Finding,
    FindingKind,
    GeometryDiagnostics,
    GeometryTotals,
    Severity,
    ZoneSummary,
)


def _finding(kind: FindingKind, subject: str, path: str = "") -> Finding:
    return Finding(kind=kind, subject=subject, message=f"{kind.value}: {subject}", path=path)


class TestDiagnosticsBuilder:
    """Tests for folding findings into Diagnostics."""

    def test_empty_builder(self) -> None:
        diag = DiagnosticsBuilder().build()

        assert diag == Diagnostics()
        assert diag.exit_code == 0

    def test_duplicates_keep_first_occurrence(self) -> None:
        builder = DiagnosticsBuilder()
        builder.extend(
            [
                _finding(FindingKind.MISSING_MATERIAL, "B", "first"),
                _finding(FindingKind.MISSING_MATERIAL, "A"),
                _finding(FindingKind.MISSING_MATERIAL, "B", "second"),
            ]
        )

        diag = builder.build()

        assert diag.materials.missing_materials == ("B", "A")
        assert [issue.path for issue in diag.issues] == ["first", "", "second"]

    def test_exact_repeat_ignored(self) -> None:
        builder = DiagnosticsBuilder()
        builder.add(_finding(FindingKind.MISSING_SCHEDULE, "Occ", "schedules.constant[0]"))
        builder.add(_finding(FindingKind.MISSING_SCHEDULE, "Occ", "schedules.constant[0]"))

        diag = builder.build()

        assert diag.schedules_and_loads.missing_schedules == ("Occ",)
        assert len(diag.issues) == 1

    def test_same_subject_in_different_lists(self) -> None:
        """De-duplication is per list, not global."""
        builder = DiagnosticsBuilder()
        builder.add(_finding(FindingKind.UNKNOWN_THERMOSTAT_ZONE, "Attic"))
        builder.add(_finding(FindingKind.UNKNOWN_SIZING_ZONE, "Attic"))

        diag = builder.build()

        assert diag.thermostats.unknown_zones == ("Attic",)
        assert diag.sizing.unknown_zones == ("Attic",)
        assert len(diag.issues) == 2

    @pytest.mark.parametrize(
        "kind, severity, category",
        [
            (FindingKind.MISSING_CONSTRUCTION, Severity.ERROR, "constructions"),
            (FindingKind.MISSING_MATERIAL, Severity.ERROR, "materials"),
            (FindingKind.MISSING_SCHEDULE, Severity.WARNING, "schedules"),
            (FindingKind.INCONSISTENT_LOAD, Severity.WARNING, "loads"),
            (FindingKind.MISSING_SETPOINT, Severity.WARNING, "thermostats"),
            (FindingKind.MISMATCHED_SETPOINT, Severity.WARNING, "thermostats"),
            (FindingKind.INCOMPLETE_SETPOINT, Severity.WARNING, "thermostats"),
            (FindingKind.UNKNOWN_THERMOSTAT_ZONE, Severity.WARNING, "thermostats"),
            (FindingKind.UNKNOWN_SIZING_ZONE, Severity.WARNING, "sizing"),
            (FindingKind.VALIDATOR_FAILURE, Severity.ERROR, "validation"),
        ],
    )
    def test_severity_and_category(
        self, kind: FindingKind, severity: Severity, category: str
    ) -> None:
        builder = DiagnosticsBuilder()
        builder.add(_finding(kind, "X"))

        issue = builder.build().issues[0]

        assert issue.severity == severity
        assert issue.category == category

    def test_validator_failures_not_de_duplicated(self) -> None:
        builder = DiagnosticsBuilder()
        builder.add(_finding(FindingKind.VALIDATOR_FAILURE, "loads"))
        builder.add(_finding(FindingKind.VALIDATOR_FAILURE, "loads"))

        diag = builder.build()

        assert len(diag.issues) == 2
        assert diag.has_errors
        assert not diag.has_blocking_references

    def test_geometry_passed_through(self) -> None:
        geometry = GeometryDiagnostics(
            zones=(ZoneSummary(name="Zone_1", surface_count=6),),
            totals=GeometryTotals(zones=1),
        )

        diag = DiagnosticsBuilder(geometry=geometry).build()

        assert diag.geometry is geometry


class TestDiagnosticsModel:
    """Tests for Diagnostics convenience properties."""

    def test_blocking_references(self) -> None:
        diag = Diagnostics.model_validate(
            {"constructions": {"missingConstructions": ["Wall"]}}
        )

        assert diag.has_blocking_references
        assert not diag.has_schedule_or_load_findings

    def test_schedule_or_load_findings(self) -> None:
        diag = Diagnostics.model_validate(
            {"schedulesAndLoads": {"inconsistentLoads": ["L"]}}
        )

        assert diag.has_schedule_or_load_findings
        assert not diag.has_blocking_references

    def test_thermostat_findings(self) -> None:
        diag = Diagnostics.model_validate(
            {"thermostats": {"incompleteSetpoints": ["SP"]}}
        )

        assert diag.thermostats.has_findings

    def test_frozen(self) -> None:
        diag = Diagnostics()

        with pytest.raises(ValidationError):
            diag.issues = ()

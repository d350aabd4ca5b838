"""Diagnostics produced by referential validation.

Validators emit ``Finding`` records. The ``DiagnosticsBuilder`` folds them
into the per-category name lists and the flattened ``issues`` list of an
immutable ``Diagnostics`` model. Each name appears at most once per list,
keeping the position of its first occurrence. The issues list has one
entry per distinct referencing path, so every place a dangling name is used
stays visible.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Severity(str, Enum):
    """Issue severity."""

    ERROR = "error"
    WARNING = "warning"


class FindingKind(str, Enum):
    """The diagnostics list a finding belongs to."""

    MISSING_CONSTRUCTION = "missing_construction"
    MISSING_MATERIAL = "missing_material"
    MISSING_SCHEDULE = "missing_schedule"
    INCONSISTENT_LOAD = "inconsistent_load"
    MISSING_SETPOINT = "missing_setpoint"
    MISMATCHED_SETPOINT = "mismatched_setpoint"
    INCOMPLETE_SETPOINT = "incomplete_setpoint"
    UNKNOWN_THERMOSTAT_ZONE = "unknown_thermostat_zone"
    UNKNOWN_SIZING_ZONE = "unknown_sizing_zone"
    VALIDATOR_FAILURE = "validator_failure"


SEVERITY_BY_KIND: dict[FindingKind, Severity] = {
    FindingKind.MISSING_CONSTRUCTION: Severity.ERROR,
    FindingKind.MISSING_MATERIAL: Severity.ERROR,
    FindingKind.MISSING_SCHEDULE: Severity.WARNING,
    FindingKind.INCONSISTENT_LOAD: Severity.WARNING,
    FindingKind.MISSING_SETPOINT: Severity.WARNING,
    FindingKind.MISMATCHED_SETPOINT: Severity.WARNING,
    FindingKind.INCOMPLETE_SETPOINT: Severity.WARNING,
    FindingKind.UNKNOWN_THERMOSTAT_ZONE: Severity.WARNING,
    FindingKind.UNKNOWN_SIZING_ZONE: Severity.WARNING,
    FindingKind.VALIDATOR_FAILURE: Severity.ERROR,
}

CATEGORY_BY_KIND: dict[FindingKind, str] = {
    FindingKind.MISSING_CONSTRUCTION: "constructions",
    FindingKind.MISSING_MATERIAL: "materials",
    FindingKind.MISSING_SCHEDULE: "schedules",
    FindingKind.INCONSISTENT_LOAD: "loads",
    FindingKind.MISSING_SETPOINT: "thermostats",
    FindingKind.MISMATCHED_SETPOINT: "thermostats",
    FindingKind.INCOMPLETE_SETPOINT: "thermostats",
    FindingKind.UNKNOWN_THERMOSTAT_ZONE: "thermostats",
    FindingKind.UNKNOWN_SIZING_ZONE: "sizing",
    FindingKind.VALIDATOR_FAILURE: "validation",
}


@dataclass(frozen=True)
class Finding:
    """A single referential finding emitted by a validator.

    Attributes:
        kind: Which diagnostics list the subject belongs to
        subject: The name reported in that list
        message: Human-readable description for the issues list
        path: Dotted path to the referencing field in the document
    """

    kind: FindingKind
    subject: str
    message: str
    path: str = ""


class DiagnosticsModel(BaseModel):
    """Frozen base for diagnostics output, serialized with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Issue(DiagnosticsModel):
    """Flattened, human-readable finding."""

    severity: Severity
    message: str
    category: str
    path: str = ""


class ZoneSummary(DiagnosticsModel):
    name: str
    surface_count: int = 0
    window_count: int = 0


class GeometryTotals(DiagnosticsModel):
    zones: int = 0


class GeometryDiagnostics(DiagnosticsModel):
    """Passthrough summary of the zone list; never judged as an error here."""

    zones: tuple[ZoneSummary, ...] = ()
    totals: GeometryTotals = Field(default_factory=GeometryTotals)


class ConstructionDiagnostics(DiagnosticsModel):
    missing_constructions: tuple[str, ...] = ()


class MaterialDiagnostics(DiagnosticsModel):
    missing_materials: tuple[str, ...] = ()


class ScheduleLoadDiagnostics(DiagnosticsModel):
    missing_schedules: tuple[str, ...] = ()
    inconsistent_loads: tuple[str, ...] = ()


class ThermostatDiagnostics(DiagnosticsModel):
    missing_setpoints: tuple[str, ...] = ()
    mismatched_setpoints: tuple[str, ...] = ()
    incomplete_setpoints: tuple[str, ...] = ()
    unknown_zones: tuple[str, ...] = ()

    @property
    def has_findings(self) -> bool:
        return bool(
            self.missing_setpoints
            or self.mismatched_setpoints
            or self.incomplete_setpoints
            or self.unknown_zones
        )


class SizingDiagnostics(DiagnosticsModel):
    unknown_zones: tuple[str, ...] = ()


class Diagnostics(DiagnosticsModel):
    """Structured result of cross-referential validation.

    Identical inputs always produce identical diagnostics, so two results
    can be compared directly (or via ``model_dump_json``) to detect change.
    """

    geometry: GeometryDiagnostics = Field(default_factory=GeometryDiagnostics)
    constructions: ConstructionDiagnostics = Field(default_factory=ConstructionDiagnostics)
    materials: MaterialDiagnostics = Field(default_factory=MaterialDiagnostics)
    schedules_and_loads: ScheduleLoadDiagnostics = Field(
        default_factory=ScheduleLoadDiagnostics
    )
    thermostats: ThermostatDiagnostics = Field(default_factory=ThermostatDiagnostics)
    sizing: SizingDiagnostics = Field(default_factory=SizingDiagnostics)
    issues: tuple[Issue, ...] = ()

    @property
    def has_errors(self) -> bool:
        """Check if any issue is an error."""
        return any(issue.severity == Severity.ERROR for issue in self.issues)

    @property
    def has_warnings(self) -> bool:
        """Check if any issue is a warning."""
        return any(issue.severity == Severity.WARNING for issue in self.issues)

    @property
    def has_blocking_references(self) -> bool:
        """Check for missing constructions or materials."""
        return bool(
            self.constructions.missing_constructions or self.materials.missing_materials
        )

    @property
    def has_schedule_or_load_findings(self) -> bool:
        """Check for missing schedules or inconsistent loads."""
        return bool(
            self.schedules_and_loads.missing_schedules
            or self.schedules_and_loads.inconsistent_loads
        )

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 clean, 1 errors, 2 warnings only."""
        if self.has_errors:
            return 1
        if self.has_warnings:
            return 2
        return 0

    def to_json(self) -> str:
        """Serialize with camelCase keys."""
        return self.model_dump_json(by_alias=True)


@dataclass
class DiagnosticsBuilder:
    """Accumulates findings in arrival order and builds Diagnostics."""

    geometry: GeometryDiagnostics = field(default_factory=GeometryDiagnostics)
    _lists: dict[FindingKind, list[str]] = field(default_factory=dict)
    _issues: list[Issue] = field(default_factory=list)
    _seen: set[tuple[FindingKind, str, str]] = field(default_factory=set)

    def add(self, finding: Finding) -> None:
        """Record a finding.

        A subject is listed once per kind, at its first occurrence. Every
        distinct path referencing it still gets its own issue; only an exact
        repeat of kind, subject and path is ignored.
        """
        if finding.kind != FindingKind.VALIDATOR_FAILURE:
            key = (finding.kind, finding.subject, finding.path)
            if key in self._seen:
                return
            self._seen.add(key)
            names = self._lists.setdefault(finding.kind, [])
            if finding.subject not in names:
                names.append(finding.subject)
        self._issues.append(
            Issue(
                severity=SEVERITY_BY_KIND[finding.kind],
                message=finding.message,
                category=CATEGORY_BY_KIND[finding.kind],
                path=finding.path,
            )
        )

    def extend(self, findings: list[Finding]) -> None:
        for finding in findings:
            self.add(finding)

    def _names(self, kind: FindingKind) -> tuple[str, ...]:
        return tuple(self._lists.get(kind, ()))

    def build(self) -> Diagnostics:
        """Freeze the accumulated findings into a Diagnostics model."""
        return Diagnostics(
            geometry=self.geometry,
            constructions=ConstructionDiagnostics(
                missing_constructions=self._names(FindingKind.MISSING_CONSTRUCTION)
            ),
            materials=MaterialDiagnostics(
                missing_materials=self._names(FindingKind.MISSING_MATERIAL)
            ),
            schedules_and_loads=ScheduleLoadDiagnostics(
                missing_schedules=self._names(FindingKind.MISSING_SCHEDULE),
                inconsistent_loads=self._names(FindingKind.INCONSISTENT_LOAD),
            ),
            thermostats=ThermostatDiagnostics(
                missing_setpoints=self._names(FindingKind.MISSING_SETPOINT),
                mismatched_setpoints=self._names(FindingKind.MISMATCHED_SETPOINT),
                incomplete_setpoints=self._names(FindingKind.INCOMPLETE_SETPOINT),
                unknown_zones=self._names(FindingKind.UNKNOWN_THERMOSTAT_ZONE),
            ),
            sizing=SizingDiagnostics(
                unknown_zones=self._names(FindingKind.UNKNOWN_SIZING_ZONE)
            ),
            issues=tuple(self._issues),
        )

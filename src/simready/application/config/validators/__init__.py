"""Validators subpackage - referential validators for configuration documents.

This package provides focused validator classes, one per reference domain:
- ConstructionReferenceValidator: Defaults naming undefined constructions
- MaterialReferenceValidator: Construction layers naming undefined materials
- ScheduleReferenceValidator: Schedule names referenced anywhere in the document
- LoadConsistencyValidator: Internal gain method, magnitude, and zone checks
- ThermostatValidator: Setpoint references, control types, and mapped zones
- SizingValidator: Zone sizing overrides for unknown zones

validate() runs them in that order, followed by any validators added to
the ValidatorRegistry. The DiagnosticsBuilder folds their findings into a
Diagnostics model.
"""

from .base import IntegrityError, IntegrityResult, IntegrityWarning
from .constructions import ConstructionReferenceValidator
from .context import ValidationContext
from .diagnostics import (
    ConstructionDiagnostics,
    Diagnostics,
    DiagnosticsBuilder,
    Finding,
    FindingKind,
    GeometryDiagnostics,
    GeometryTotals,
    Issue,
    MaterialDiagnostics,
    ScheduleLoadDiagnostics,
    Severity,
    SizingDiagnostics,
    ThermostatDiagnostics,
    ZoneSummary,
)
from .integrity import (
    check_construction_deletion,
    check_document_integrity,
    check_material_deletion,
)
from .loads import LoadConsistencyValidator
from .materials import MaterialReferenceValidator
from .registry import ValidatorRegistry, run_validator
from .schedules import ScheduleReferenceValidator
from .sizing import SizingValidator
from .thermostats import ThermostatValidator

__all__ = [
    # Integrity results
    "IntegrityError",
    "IntegrityWarning",
    "IntegrityResult",
    # Diagnostics
    "ConstructionDiagnostics",
    "Diagnostics",
    "DiagnosticsBuilder",
    "Finding",
    "FindingKind",
    "GeometryDiagnostics",
    "GeometryTotals",
    "Issue",
    "MaterialDiagnostics",
    "ScheduleLoadDiagnostics",
    "Severity",
    "SizingDiagnostics",
    "ThermostatDiagnostics",
    "ZoneSummary",
    # Registry
    "ValidatorRegistry",
    "run_validator",
    "ValidationContext",
    # Validators
    "ConstructionReferenceValidator",
    "MaterialReferenceValidator",
    "ScheduleReferenceValidator",
    "LoadConsistencyValidator",
    "ThermostatValidator",
    "SizingValidator",
    # Integrity
    "check_construction_deletion",
    "check_document_integrity",
    "check_material_deletion",
]

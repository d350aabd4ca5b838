"""Referential validation entry point.

``validate`` cross-checks a configuration document against itself and the
zone list reported by the geometry model, and returns a ``Diagnostics``
model. It is total: malformed input is coerced, never raised on. The
built-in validators run from a fixed tuple, so their findings depend only
on the arguments; validators added to the ValidatorRegistry run after them.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from simready.application.config.loader import coerce_document, coerce_zones
from simready.application.config.schemas import ConfigurationDocument, Zone
from simready.application.config.validators import (
    ConstructionReferenceValidator,
    Diagnostics,
    DiagnosticsBuilder,
    GeometryDiagnostics,
    GeometryTotals,
    LoadConsistencyValidator,
    MaterialReferenceValidator,
    ScheduleReferenceValidator,
    SizingValidator,
    ThermostatValidator,
    ValidationContext,
    ValidatorRegistry,
    ZoneSummary,
    check_construction_deletion,
    check_document_integrity,
    check_material_deletion,
    run_validator,
)

logger = logging.getLogger(__name__)

__all__ = [
    "BUILTIN_VALIDATORS",
    "validate",
    "summarize_geometry",
    "check_construction_deletion",
    "check_document_integrity",
    "check_material_deletion",
]


# Run order is the order findings appear in the diagnostics
BUILTIN_VALIDATORS = (
    ConstructionReferenceValidator(),
    MaterialReferenceValidator(),
    ScheduleReferenceValidator(),
    LoadConsistencyValidator(),
    ThermostatValidator(),
    SizingValidator(),
)
BUILTIN_VALIDATOR_NAMES = frozenset(validator.name for validator in BUILTIN_VALIDATORS)


def summarize_geometry(zones: Iterable[Zone]) -> GeometryDiagnostics:
    """Summarise the zone list for display."""
    summaries = tuple(
        ZoneSummary(
            name=zone.name,
            surface_count=zone.surface_count,
            window_count=zone.window_count,
        )
        for zone in zones
    )
    return GeometryDiagnostics(
        zones=summaries, totals=GeometryTotals(zones=len(summaries))
    )


def validate(
    document: ConfigurationDocument | dict[str, Any] | None,
    zones: Iterable[Zone | dict[str, Any] | str] | None = None,
) -> Diagnostics:
    """Cross-validate a configuration document against a zone list.

    Args:
        document: A ConfigurationDocument, its raw JSON mapping, or None
        zones: Zones from the geometry model, as models or raw mappings

    Returns:
        Diagnostics with de-duplicated finding lists and a flattened issues
        list ordered constructions, materials, schedules, loads, thermostats,
        sizing. Findings of validators added to the ValidatorRegistry come
        last; registry state never changes the built-in findings.

    Example:
        >>> diag = validate(
        ...     {"constructions": [{"name": "Wall1", "layers": ["Glass_Unknown"]}]},
        ...     [{"name": "Zone_1"}],
        ... )
        >>> diag.materials.missing_materials
        ('Glass_Unknown',)
    """
    doc = coerce_document(document)
    zone_list = coerce_zones(list(zones) if zones is not None else None)

    context = ValidationContext.build(doc, zone_list)
    builder = DiagnosticsBuilder(geometry=summarize_geometry(zone_list))
    for validator in BUILTIN_VALIDATORS:
        builder.extend(run_validator(validator, context))
    builder.extend(ValidatorRegistry.run_all(context, exclude=BUILTIN_VALIDATOR_NAMES))
    diagnostics = builder.build()

    logger.debug(
        f"Validated document against {len(zone_list)} zone(s): "
        f"{len(diagnostics.issues)} issue(s)"
    )
    return diagnostics

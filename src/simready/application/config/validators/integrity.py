"""Document integrity checks and deletion guards.

Names must be unique within each kind of entity. Schedule names are checked
per schedule kind only; the same name used by two different kinds is not
reported, since the engine's handling of that case is unspecified.

The deletion guards answer whether removing a named entity would leave a
dangling reference that blocks IDF generation. They never mutate the
document; the host decides whether to proceed.
"""

from __future__ import annotations

from typing import Iterable

from simready.application.config.schemas import ConfigurationDocument

from .base import IntegrityResult


def _check_unique(
    result: IntegrityResult, path: str, label: str, names: Iterable[str]
) -> None:
    """Add an error for each repeated name, pointing at the repeat."""
    seen: set[str] = set()
    for i, name in enumerate(names):
        if name in seen:
            result.add_error(
                path=f"{path}[{i}].name",
                message=f"Duplicate {label} name '{name}'",
                name=name,
            )
        seen.add(name)


def check_document_integrity(document: ConfigurationDocument) -> IntegrityResult:
    """Check a document for duplicate names within each kind.

    Args:
        document: The configuration document to check

    Returns:
        IntegrityResult with one error per duplicated entry
    """
    result = IntegrityResult()

    _check_unique(result, "materials", "material", (m.name for m in document.materials))
    _check_unique(
        result, "constructions", "construction", (c.name for c in document.constructions)
    )
    for kind, entries in document.schedules.by_kind():
        _check_unique(
            result,
            f"schedules.{kind.value}",
            f"{kind.value} schedule",
            (entry.name for entry in entries),
        )
    _check_unique(
        result,
        "thermostatSetpoints",
        "thermostat setpoint",
        (s.name for s in document.thermostat_setpoints),
    )
    for family, entries in document.internal_gains.by_family():
        _check_unique(
            result,
            f"internalGains.{family.value}",
            f"{family.value} load",
            (entry.name for entry in entries),
        )

    zone_names = [mapping.zone_name for mapping in document.thermostats]
    seen: set[str] = set()
    for i, zone_name in enumerate(zone_names):
        if zone_name in seen:
            result.add_warning(
                path=f"thermostats[{i}].zoneName",
                message=f"Zone '{zone_name}' has more than one thermostat mapping",
                suggestion="Only the first mapping is used; remove the others",
            )
        seen.add(zone_name)

    return result


def check_material_deletion(
    document: ConfigurationDocument, material_name: str
) -> IntegrityResult:
    """Check whether a material can be deleted without dangling layers.

    Args:
        document: The configuration document
        material_name: Name of the material the user wants to delete

    Returns:
        IntegrityResult with an error for each construction layer using it
    """
    result = IntegrityResult()
    for i, construction in enumerate(document.constructions):
        for j, layer in enumerate(construction.layers):
            if layer == material_name:
                result.add_error(
                    path=f"constructions[{i}].layers[{j}]",
                    message=(
                        f"Material '{material_name}' is used by construction "
                        f"'{construction.name}'"
                    ),
                    name=material_name,
                )
    return result


def check_construction_deletion(
    document: ConfigurationDocument, construction_name: str
) -> IntegrityResult:
    """Check whether a construction can be deleted.

    A construction selected as a default for any surface class cannot be
    removed until the default is changed.
    """
    result = IntegrityResult()
    for slot, name in document.defaults.references():
        if name == construction_name:
            result.add_error(
                path=f"defaults.{slot}",
                message=(
                    f"Construction '{construction_name}' is the default {slot}"
                ),
                name=construction_name,
            )
    if result.is_valid and construction_name not in {
        c.name for c in document.constructions
    }:
        result.add_warning(
            path="constructions",
            message=f"Construction '{construction_name}' does not exist",
        )
    return result

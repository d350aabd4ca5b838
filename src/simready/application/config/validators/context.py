"""Shared lookup tables for referential validators.

Building the name sets once per ``validate`` call keeps every validator a
simple membership test over the document.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from simready.application.config.schemas import (
    BUILTIN_MATERIAL_NAMES,
    ConfigurationDocument,
    ThermostatSetpoint,
    Zone,
)


@dataclass(frozen=True)
class ValidationContext:
    """A document and zone list plus the name tables derived from them.

    Attributes:
        document: The configuration document being validated
        zones: Zones reported by the geometry model, in their given order
        material_names: Builtin and user-defined material names
        construction_names: Names of defined constructions
        schedule_names: Names of every schedule, regardless of kind
        setpoints: Thermostat setpoints by name (first definition wins)
        zone_names: Names of all zones
    """

    document: ConfigurationDocument
    zones: tuple[Zone, ...] = ()
    material_names: frozenset[str] = field(default_factory=frozenset)
    construction_names: frozenset[str] = field(default_factory=frozenset)
    schedule_names: frozenset[str] = field(default_factory=frozenset)
    setpoints: dict[str, ThermostatSetpoint] = field(default_factory=dict)
    zone_names: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def build(
        cls, document: ConfigurationDocument, zones: list[Zone] | tuple[Zone, ...] = ()
    ) -> "ValidationContext":
        """Derive the lookup tables from a document and zone list."""
        setpoints: dict[str, ThermostatSetpoint] = {}
        for setpoint in document.thermostat_setpoints:
            setpoints.setdefault(setpoint.name, setpoint)

        return cls(
            document=document,
            zones=tuple(zones),
            material_names=frozenset(BUILTIN_MATERIAL_NAMES)
            | {material.name for material in document.materials},
            construction_names=frozenset(c.name for c in document.constructions),
            schedule_names=frozenset(document.schedules.all_names()),
            setpoints=setpoints,
            zone_names=frozenset(zone.name for zone in zones),
        )

    def has_schedule(self, name: str) -> bool:
        return name in self.schedule_names

    def has_zone(self, name: str) -> bool:
        return name in self.zone_names

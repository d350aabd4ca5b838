"""Unit tests for the individual referential validators.

Each validator is run directly against a ValidationContext, so these tests
check raw findings before de-duplication.
"""

from __future__ import annotations

from typing import Any

import pytest

from simready.application.config.schemas import ConfigurationDocument, Zone
from simready.application.config.validators import (
    ConstructionReferenceValidator,
    FindingKind,
    LoadConsistencyValidator,
    MaterialReferenceValidator,
    ScheduleReferenceValidator,
    SizingValidator,
    ThermostatValidator,
    ValidationContext,
)
from simready.contracts import Validator


def _context(data: dict[str, Any], zones: list[str] | None = None) -> ValidationContext:
    document = ConfigurationDocument.model_validate(data)
    return ValidationContext.build(document, [Zone(name=z) for z in zones or []])


class TestValidationContext:
    """Tests for the derived lookup tables."""

    def test_material_names_include_builtins(self) -> None:
        context = _context({"materials": [{"name": "Brick"}]})

        assert "Brick" in context.material_names
        assert "RM_Concrete_200mm" in context.material_names

    def test_first_setpoint_definition_wins(self) -> None:
        context = _context(
            {
                "thermostatSetpoints": [
                    {"name": "SP", "type": "SingleHeating", "heatingScheduleName": "H"},
                    {"name": "SP", "type": "DualSetpoint"},
                ]
            }
        )

        assert context.setpoints["SP"].type.value == "SingleHeating"

    def test_zone_lookup(self) -> None:
        context = _context({}, ["Zone_1"])

        assert context.has_zone("Zone_1")
        assert not context.has_zone("zone_1")


class TestValidatorProtocol:
    """Every built-in validator satisfies the Validator protocol."""

    @pytest.mark.parametrize(
        "validator, name",
        [
            (ConstructionReferenceValidator(), "constructions"),
            (MaterialReferenceValidator(), "materials"),
            (ScheduleReferenceValidator(), "schedules"),
            (LoadConsistencyValidator(), "loads"),
            (ThermostatValidator(), "thermostats"),
            (SizingValidator(), "sizing"),
        ],
    )
    def test_protocol_and_name(self, validator: Validator, name: str) -> None:
        assert isinstance(validator, Validator)
        assert validator.name == name

    @pytest.mark.parametrize(
        "validator",
        [
            ConstructionReferenceValidator(),
            MaterialReferenceValidator(),
            ScheduleReferenceValidator(),
            LoadConsistencyValidator(),
            ThermostatValidator(),
            SizingValidator(),
        ],
    )
    def test_empty_document_has_no_findings(self, validator: Validator) -> None:
        assert validator.validate(_context({}, ["Zone_1"])) == []


class TestMaterialReferenceValidator:
    def test_raw_findings_keep_repeats(self) -> None:
        """De-duplication happens in the builder, not the validator."""
        context = _context(
            {"constructions": [{"name": "A", "layers": ["X", "X"]}]}
        )

        findings = MaterialReferenceValidator().validate(context)

        assert [f.subject for f in findings] == ["X", "X"]
        assert [f.path for f in findings] == [
            "constructions[0].layers[0]",
            "constructions[0].layers[1]",
        ]

    def test_blank_layer_ignored(self) -> None:
        context = _context({"constructions": [{"name": "A", "layers": ["", "X"]}]})

        findings = MaterialReferenceValidator().validate(context)

        assert [f.subject for f in findings] == ["X"]


class TestScheduleReferenceValidator:
    def test_reference_walk_order(self) -> None:
        """Type limits, gains, setpoints, control types, then ideal loads."""
        context = _context(
            {
                "schedules": {"compact": [{"name": "C", "typeLimits": "TL"}]},
                "internalGains": {
                    "people": [
                        {
                            "name": "P",
                            "scheduleName": "Occ",
                            "activityScheduleName": "Act",
                        }
                    ]
                },
                "thermostatSetpoints": [
                    {"name": "SP", "type": "SingleCooling", "singleScheduleName": "Single"}
                ],
                "thermostats": [{"zoneName": "Zone_1", "controlTypeSchedule": "Ctrl"}],
                "idealLoads": {
                    "global": {"heatingAvailabilitySchedule": "GH"},
                    "perZone": {"Zone_1": {"availabilitySchedule": "ZA"}},
                },
            },
            ["Zone_1"],
        )

        findings = ScheduleReferenceValidator().validate(context)

        assert [f.subject for f in findings] == [
            "TL",
            "Occ",
            "Act",
            "Single",
            "Ctrl",
            "GH",
            "ZA",
        ]
        assert findings[-1].path == "idealLoads.perZone.Zone_1.availabilitySchedule"
        assert all(f.kind == FindingKind.MISSING_SCHEDULE for f in findings)

    def test_type_limits_entries_are_schedules(self) -> None:
        context = _context(
            {
                "schedules": {
                    "typeLimits": [{"name": "Fraction"}],
                    "constant": [{"name": "On", "typeLimits": "Fraction"}],
                }
            }
        )

        assert ScheduleReferenceValidator().validate(context) == []


class TestLoadConsistencyValidator:
    def test_people_area_per_person(self) -> None:
        context = _context(
            {
                "internalGains": {
                    "people": [
                        {
                            "name": "P",
                            "zoneName": "Zone_1",
                            "method": "Area/Person",
                            "areaPerPerson": 12,
                        }
                    ]
                }
            },
            ["Zone_1"],
        )

        assert LoadConsistencyValidator().validate(context) == []

    def test_equipment_family_path(self) -> None:
        context = _context(
            {"internalGains": {"gasEquipment": [{"name": "Stove", "method": "Level"}]}},
            ["Zone_1"],
        )

        findings = LoadConsistencyValidator().validate(context)

        assert len(findings) == 1
        assert findings[0].path == "internalGains.gasEquipment[0]"
        assert findings[0].subject == "Stove"


class TestThermostatValidator:
    def test_missing_setpoint(self) -> None:
        context = _context(
            {"thermostats": [{"zoneName": "GLOBAL", "dualSetpoint": "Ghost"}]}
        )

        findings = ThermostatValidator().validate(context)

        assert [(f.kind, f.subject) for f in findings] == [
            (FindingKind.MISSING_SETPOINT, "Ghost")
        ]
        assert findings[0].path == "thermostats[0].dualSetpoint"

    def test_mismatched_setpoint_type(self) -> None:
        context = _context(
            {
                "thermostatSetpoints": [
                    {"name": "Heat_Only", "type": "SingleHeating", "heatingScheduleName": "H"}
                ],
                "thermostats": [{"zoneName": "GLOBAL", "dualSetpoint": "Heat_Only"}],
            }
        )

        findings = ThermostatValidator().validate(context)

        assert [(f.kind, f.subject) for f in findings] == [
            (FindingKind.MISMATCHED_SETPOINT, "Heat_Only")
        ]
        assert "expects DualSetpoint" in findings[0].message

    def test_incomplete_setpoint(self) -> None:
        context = _context(
            {"thermostatSetpoints": [{"name": "Dual", "heatingScheduleName": "H"}]}
        )

        findings = ThermostatValidator().validate(context)

        assert [(f.kind, f.subject) for f in findings] == [
            (FindingKind.INCOMPLETE_SETPOINT, "Dual")
        ]
        assert findings[0].path == "thermostatSetpoints[0].coolingScheduleName"

    def test_unknown_zones_from_mappings_and_ideal_loads(self) -> None:
        context = _context(
            {
                "thermostats": [
                    {"zoneName": "GLOBAL"},
                    {"zoneName": "Zone_1"},
                    {"zoneName": "Attic"},
                ],
                "idealLoads": {"perZone": {"Basement": {}, "Zone_1": {}}},
            },
            ["Zone_1"],
        )

        findings = ThermostatValidator().validate(context)

        assert [(f.kind, f.subject) for f in findings] == [
            (FindingKind.UNKNOWN_THERMOSTAT_ZONE, "Attic"),
            (FindingKind.UNKNOWN_THERMOSTAT_ZONE, "Basement"),
        ]

    def test_zones_not_judged_without_geometry(self) -> None:
        context = _context({"thermostats": [{"zoneName": "Attic"}]}, [])

        assert ThermostatValidator().validate(context) == []


class TestSizingValidator:
    def test_unknown_sizing_zone(self) -> None:
        context = _context({"sizing": {"zones": {"Zone_1": {}, "Zone_9": {}}}}, ["Zone_1"])

        findings = SizingValidator().validate(context)

        assert [(f.kind, f.subject, f.path) for f in findings] == [
            (FindingKind.UNKNOWN_SIZING_ZONE, "Zone_9", "sizing.zones.Zone_9")
        ]

    def test_skipped_without_geometry(self) -> None:
        context = _context({"sizing": {"zones": {"Zone_9": {}}}}, [])

        assert SizingValidator().validate(context) == []


class TestConstructionReferenceValidator:
    def test_message_names_slot(self) -> None:
        context = _context({"defaults": {"floorConstruction": "Slab"}})

        findings = ConstructionReferenceValidator().validate(context)

        assert findings[0].subject == "Slab"
        assert "floorConstruction" in findings[0].message

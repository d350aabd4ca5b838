"""Unit tests for the configuration document schema."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from simready.application.config.schemas import (
    AirGapMaterial,
    ConfigurationDocument,
    Defaults,
    FileSchedule,
    GainFamily,
    IdealLoadsConfig,
    LightsGain,
    NoMassMaterial,
    OpaqueMaterial,
    PeopleGain,
    ThermostatSetpoint,
    ThermostatType,
    Zone,
    ZoneThermostatMapping,
    is_set,
)
from simready.application.config.schemas.weather_schema import CustomLocation


class TestIsSet:
    """Tests for the unset-reference convention."""

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_blank_is_unset(self, value: str | None) -> None:
        assert not is_set(value)

    def test_name_is_set(self) -> None:
        assert is_set("Wall1")


class TestMaterials:
    """Tests for the material union."""

    def test_missing_kind_defaults_to_opaque(self) -> None:
        doc = ConfigurationDocument.model_validate({"materials": [{"name": "Brick"}]})

        assert isinstance(doc.materials[0], OpaqueMaterial)

    def test_engine_object_name_selects_kind(self) -> None:
        doc = ConfigurationDocument.model_validate(
            {
                "materials": [
                    {"type": "Material:NoMass", "name": "R1", "thermalResistance": 1.0},
                    {"kind": "Material:AirGap", "name": "Gap", "thermalResistance": 0.18},
                ]
            }
        )

        assert isinstance(doc.materials[0], NoMassMaterial)
        assert isinstance(doc.materials[1], AirGapMaterial)

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ConfigurationDocument.model_validate(
                {"materials": [{"kind": "Plasma", "name": "X"}]}
            )

    def test_camel_case_properties(self) -> None:
        doc = ConfigurationDocument.model_validate(
            {"materials": [{"kind": "Opaque", "name": "Brick", "specificHeat": 790}]}
        )

        assert doc.materials[0].specific_heat == 790


class TestConstructionsAndDefaults:
    """Tests for constructions and default construction slots."""

    def test_construction_needs_a_layer(self) -> None:
        with pytest.raises(ValidationError):
            ConfigurationDocument.model_validate(
                {"constructions": [{"name": "Empty", "layers": []}]}
            )

    def test_defaults_references_skip_blank_slots(self) -> None:
        defaults = Defaults.model_validate(
            {"wallConstruction": "Wall", "roofConstruction": "", "windowConstruction": "Win"}
        )

        assert defaults.references() == [
            ("wallConstruction", "Wall"),
            ("windowConstruction", "Win"),
        ]


class TestSchedules:
    """Tests for schedule kinds."""

    def test_day_hourly_needs_24_values(self) -> None:
        with pytest.raises(ValidationError):
            ConfigurationDocument.model_validate(
                {"schedules": {"dayHourly": [{"name": "D", "values": [1.0] * 23}]}}
            )

    def test_file_schedule_defaults(self) -> None:
        schedule = FileSchedule(name="Measured", file_name="data.csv")

        assert schedule.column_number == 1
        assert schedule.rows_to_skip == 0
        assert schedule.hours_of_data == 8760
        assert schedule.minutes_per_item == 60

    def test_adjust_dst_alias(self) -> None:
        schedule = FileSchedule.model_validate({"name": "M", "adjustDST": "Yes"})

        assert schedule.adjust_dst == "Yes"

    def test_names_are_pooled_across_kinds(self) -> None:
        doc = ConfigurationDocument.model_validate(
            {
                "schedules": {
                    "compact": [{"name": "Occ", "lines": []}],
                    "constant": [{"name": "Occ", "value": 1}, {"name": "On", "value": 1}],
                }
            }
        )

        assert doc.schedules.sorted_names() == ["Occ", "On"]
        assert doc.schedules.count() == 3


class TestThermostats:
    """Tests for setpoints and zone mappings."""

    def test_dual_setpoint_requires_both_schedules(self) -> None:
        setpoint = ThermostatSetpoint(name="SP", heating_schedule_name="Heat")

        assert setpoint.missing_schedule_fields() == ["coolingScheduleName"]

    def test_constant_satisfies_dual_requirement(self) -> None:
        setpoint = ThermostatSetpoint(
            name="SP",
            heating_schedule_name="Heat",
            constant_cooling_setpoint=26.0,
        )

        assert setpoint.missing_schedule_fields() == []

    def test_single_heating_accepts_heating_schedule(self) -> None:
        setpoint = ThermostatSetpoint(
            name="SP",
            type=ThermostatType.SINGLE_HEATING,
            heating_schedule_name="Heat",
        )

        assert setpoint.missing_schedule_fields() == []

    def test_single_heat_cool_requires_single_schedule(self) -> None:
        setpoint = ThermostatSetpoint(
            name="SP",
            type=ThermostatType.SINGLE_HEATING_OR_COOLING,
            heating_schedule_name="Heat",
        )

        assert setpoint.missing_schedule_fields() == ["singleScheduleName"]

    def test_mapping_for_zone_falls_back_to_global(self) -> None:
        doc = ConfigurationDocument(
            thermostats=[
                ZoneThermostatMapping(zone_name="GLOBAL", dual_setpoint="Default"),
                ZoneThermostatMapping(zone_name="Zone_1", dual_setpoint="Office"),
            ]
        )

        assert doc.mapping_for_zone("Zone_1").dual_setpoint == "Office"
        assert doc.mapping_for_zone("Zone_9").dual_setpoint == "Default"

    def test_mapping_for_zone_without_global(self) -> None:
        assert ConfigurationDocument().mapping_for_zone("Zone_1") is None


class TestIdealLoads:
    """Tests for global and per-zone ideal loads settings."""

    def test_list_form_keyed_by_zone(self) -> None:
        config = IdealLoadsConfig.model_validate(
            {"perZone": [{"zoneName": "Zone_1", "heatingLimitType": "LimitCapacity"}]}
        )

        assert list(config.per_zone) == ["Zone_1"]

    def test_resolve_inherits_unset_fields(self) -> None:
        config = IdealLoadsConfig.model_validate(
            {
                "global": {
                    "availabilitySchedule": "Always_On",
                    "maxHeatingSupplyAirTemperature": 50,
                },
                "perZone": {
                    "Zone_1": {"maxHeatingSupplyAirTemperature": 45, "availabilitySchedule": ""}
                },
            }
        )

        settings = config.resolve("Zone_1")

        assert settings.max_heating_supply_air_temperature == 45
        assert settings.availability_schedule == "Always_On"

    def test_autosize_normalized(self) -> None:
        config = IdealLoadsConfig.model_validate(
            {"global": {"maxCoolingAirFlowRate": "AUTOSIZE"}}
        )

        assert config.global_settings.max_cooling_air_flow_rate == "Autosize"

    def test_has_any(self) -> None:
        assert not IdealLoadsConfig().has_any
        assert IdealLoadsConfig.model_validate({"global": {}}).has_any


class TestInternalGains:
    """Tests for gain methods and magnitudes."""

    def test_people_default_method(self) -> None:
        gain = PeopleGain(name="P", number_people=4)

        assert gain.effective_method == "People"
        assert gain.magnitude() == 4

    def test_lights_level_falls_back_to_design_level(self) -> None:
        gain = LightsGain(name="L", method="Level", design_level=400)

        assert gain.magnitude() == 400

    def test_non_finite_magnitude_is_unusable(self) -> None:
        gain = LightsGain(name="L", watts_per_area=float("nan"))

        assert gain.magnitude() is None

    def test_unknown_method(self) -> None:
        gain = LightsGain(name="L", method="Lumens", watts_per_area=10)

        assert gain.magnitude_fields() is None

    def test_entries_in_family_order(self) -> None:
        doc = ConfigurationDocument.model_validate(
            {
                "internalGains": {
                    "otherEquipment": [{"name": "O"}],
                    "people": [{"name": "P1"}, {"name": "P2"}],
                }
            }
        )

        entries = [(family, i, e.name) for family, i, e in doc.internal_gains.entries()]

        assert entries == [
            (GainFamily.PEOPLE, 0, "P1"),
            (GainFamily.PEOPLE, 1, "P2"),
            (GainFamily.OTHER_EQUIPMENT, 0, "O"),
        ]


class TestWeather:
    """Tests for weather file resolution and custom locations."""

    def test_epw_path_prefers_weather_section(self) -> None:
        doc = ConfigurationDocument.model_validate(
            {"weather": {"epwPath": "a.epw"}, "weatherFilePath": "b.epw"}
        )

        assert doc.epw_path == "a.epw"

    def test_legacy_weather_file_path(self) -> None:
        doc = ConfigurationDocument.model_validate(
            {"weather": {"epwPath": ""}, "weatherFilePath": "b.epw"}
        )

        assert doc.epw_path == "b.epw"

    def test_no_weather_file(self) -> None:
        assert ConfigurationDocument().epw_path is None

    def test_custom_location_ranges(self) -> None:
        valid = CustomLocation(
            name="Site", latitude=51.5, longitude=-0.1, time_zone=0, elevation=20
        )

        assert valid.is_valid()
        assert not valid.model_copy(update={"latitude": 91}).is_valid()
        assert not valid.model_copy(update={"time_zone": 15}).is_valid()
        assert not valid.model_copy(update={"elevation": float("inf")}).is_valid()
        assert not valid.model_copy(update={"name": ""}).is_valid()


class TestRootDocument:
    """Tests for the root document model."""

    def test_empty_document(self) -> None:
        doc = ConfigurationDocument.model_validate({})

        assert doc.schema_version == "1.0"
        assert doc.constructions == []

    def test_unknown_keys_ignored(self) -> None:
        doc = ConfigurationDocument.model_validate({"uiState": {"tab": 2}})

        assert not hasattr(doc, "ui_state")

    def test_newer_minor_version_accepted(self) -> None:
        assert ConfigurationDocument(schema_version="1.3").schema_version == "1.3"

    def test_unsupported_major_version_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Unsupported schema version"):
            ConfigurationDocument(schema_version="2.0")

    def test_zone_accepts_nested_totals(self) -> None:
        zone = Zone.model_validate(
            {"name": "Z", "surfaces": {"total": 6}, "windows": {"total": 2}}
        )

        assert (zone.surface_count, zone.window_count) == (6, 2)

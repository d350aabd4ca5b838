"""Thermostat and ideal loads schemas.

Thermostat setpoint objects name the schedules that drive them. Zones are
mapped to setpoint objects by ``ZoneThermostatMapping`` entries, with an
optional ``GLOBAL`` entry used for zones that have no mapping of their own.
Ideal loads settings follow the same pattern: a global block and per-zone
overrides that inherit any field they leave unset.
"""

from typing import Any

from pydantic import Field, field_validator, model_validator

from simready.application.config.schemas.base import (
    GLOBAL_ZONE,
    DocumentModel,
    LimitType,
    ThermostatType,
    is_set,
)

AUTOSIZE = "Autosize"


def _drop_blank_values(data: Any) -> Any:
    """Remove empty-string values, which the host writes for "(inherit)"."""
    if not isinstance(data, dict):
        return data
    return {
        key: value
        for key, value in data.items()
        if not (isinstance(value, str) and not value.strip())
    }


class ThermostatSetpoint(DocumentModel):
    """Named thermostat setpoint object.

    Which schedule fields are required depends on ``type``. A missing
    required schedule makes the setpoint unusable but is reported by
    validation, not rejected here.
    """

    name: str = Field(..., min_length=1)
    type: ThermostatType = ThermostatType.DUAL_SETPOINT
    heating_schedule_name: str | None = None
    cooling_schedule_name: str | None = None
    single_schedule_name: str | None = None
    constant_heating_setpoint: float | None = None
    constant_cooling_setpoint: float | None = None

    def schedule_references(self) -> list[tuple[str, str]]:
        """Return (field alias, schedule name) pairs that are set."""
        fields = (
            ("heatingScheduleName", self.heating_schedule_name),
            ("coolingScheduleName", self.cooling_schedule_name),
            ("singleScheduleName", self.single_schedule_name),
        )
        return [(alias, name) for alias, name in fields if is_set(name)]

    def missing_schedule_fields(self) -> list[str]:
        """Return the aliases of required-but-missing fields for this type.

        A constant setpoint satisfies the heating or cooling requirement.
        """
        has_heating = is_set(self.heating_schedule_name) or (
            self.constant_heating_setpoint is not None
        )
        has_cooling = is_set(self.cooling_schedule_name) or (
            self.constant_cooling_setpoint is not None
        )
        has_single = is_set(self.single_schedule_name)

        missing: list[str] = []
        if self.type == ThermostatType.DUAL_SETPOINT:
            if not has_heating:
                missing.append("heatingScheduleName")
            if not has_cooling:
                missing.append("coolingScheduleName")
        elif self.type == ThermostatType.SINGLE_HEATING:
            if not (has_single or has_heating):
                missing.append("singleScheduleName")
        elif self.type == ThermostatType.SINGLE_COOLING:
            if not (has_single or has_cooling):
                missing.append("singleScheduleName")
        elif not has_single:
            missing.append("singleScheduleName")
        return missing


class ZoneThermostatMapping(DocumentModel):
    """Assignment of setpoint objects to one zone (or the GLOBAL fallback)."""

    zone_name: str = Field(..., min_length=1)
    control_type_schedule: str | None = None
    single_heating_setpoint: str | None = None
    single_cooling_setpoint: str | None = None
    single_heat_cool_setpoint: str | None = None
    dual_setpoint: str | None = None

    @property
    def is_global(self) -> bool:
        """Check if this is the GLOBAL fallback mapping."""
        return self.zone_name == GLOBAL_ZONE

    def setpoint_references(self) -> list[tuple[str, str, ThermostatType]]:
        """Return (field alias, setpoint name, expected type) for set slots."""
        slots = (
            ("singleHeatingSetpoint", self.single_heating_setpoint, ThermostatType.SINGLE_HEATING),
            ("singleCoolingSetpoint", self.single_cooling_setpoint, ThermostatType.SINGLE_COOLING),
            (
                "singleHeatCoolSetpoint",
                self.single_heat_cool_setpoint,
                ThermostatType.SINGLE_HEATING_OR_COOLING,
            ),
            ("dualSetpoint", self.dual_setpoint, ThermostatType.DUAL_SETPOINT),
        )
        return [(alias, name, kind) for alias, name, kind in slots if is_set(name)]


class IdealLoadsSettings(DocumentModel):
    """Ideal loads air system settings.

    Every field is optional: unset fields in a per-zone block inherit the
    global block, and unset global fields use engine defaults.
    """

    availability_schedule: str | None = None
    heating_availability_schedule: str | None = None
    cooling_availability_schedule: str | None = None

    max_heating_supply_air_temperature: float | None = None
    max_heating_supply_air_humidity_ratio: float | None = Field(default=None, ge=0)
    heating_limit_type: LimitType | None = None
    max_heating_air_flow_rate: float | str | None = None
    max_sensible_heating_capacity: float | str | None = None

    min_cooling_supply_air_temperature: float | None = None
    min_cooling_supply_air_humidity_ratio: float | None = Field(default=None, ge=0)
    cooling_limit_type: LimitType | None = None
    max_cooling_air_flow_rate: float | str | None = None
    max_total_cooling_capacity: float | str | None = None

    dehumidification_control_type: str | None = None
    cooling_sensible_heat_ratio: float | None = Field(default=None, ge=0, le=1)
    humidification_control_type: str | None = None

    outdoor_air_method: str | None = None
    outdoor_air_flow_rate_per_person: float | None = Field(default=None, ge=0)
    outdoor_air_flow_rate_per_zone_floor_area: float | None = Field(default=None, ge=0)
    outdoor_air_flow_rate_per_zone: float | None = Field(default=None, ge=0)
    demand_controlled_ventilation_type: str | None = None
    outdoor_air_economizer_type: str | None = None
    heat_recovery_type: str | None = None
    sensible_heat_recovery_effectiveness: float | None = Field(default=None, ge=0, le=1)
    latent_heat_recovery_effectiveness: float | None = Field(default=None, ge=0, le=1)

    @model_validator(mode="before")
    @classmethod
    def blank_is_inherit(cls, data: Any) -> Any:
        """Treat empty-string fields as unset."""
        return _drop_blank_values(data)

    @field_validator(
        "max_heating_air_flow_rate",
        "max_sensible_heating_capacity",
        "max_cooling_air_flow_rate",
        "max_total_cooling_capacity",
    )
    @classmethod
    def validate_autosize(cls, v: float | str | None) -> float | str | None:
        """Capacity and flow fields are either a number or 'Autosize'."""
        if isinstance(v, str):
            if v.strip().lower() != AUTOSIZE.lower():
                raise ValueError(f"expected a number or '{AUTOSIZE}', got {v!r}")
            return AUTOSIZE
        return v

    def schedule_references(self) -> list[tuple[str, str]]:
        """Return (field alias, schedule name) pairs that are set."""
        fields = (
            ("availabilitySchedule", self.availability_schedule),
            ("heatingAvailabilitySchedule", self.heating_availability_schedule),
            ("coolingAvailabilitySchedule", self.cooling_availability_schedule),
        )
        return [(alias, name) for alias, name in fields if is_set(name)]


class IdealLoadsConfig(DocumentModel):
    """Global ideal loads settings with per-zone overrides."""

    global_settings: IdealLoadsSettings | None = Field(default=None, alias="global")
    per_zone: dict[str, IdealLoadsSettings] = Field(default_factory=dict)

    @field_validator("per_zone", mode="before")
    @classmethod
    def accept_list_form(cls, v: Any) -> Any:
        """Accept the ``[{zoneName, ...}]`` list form and key it by zone."""
        if v is None:
            return {}
        if isinstance(v, list):
            keyed: dict[str, Any] = {}
            for entry in v:
                if not isinstance(entry, dict):
                    raise ValueError("per-zone ideal loads entries must be objects")
                zone_name = entry.get("zoneName", entry.get("zone_name"))
                if not is_set(zone_name):
                    raise ValueError("per-zone ideal loads entry is missing zoneName")
                rest = {
                    key: value
                    for key, value in entry.items()
                    if key not in ("zoneName", "zone_name")
                }
                keyed[zone_name] = rest
            return keyed
        return v

    @property
    def has_any(self) -> bool:
        """Check if a global block or at least one per-zone block exists."""
        return self.global_settings is not None or bool(self.per_zone)

    def resolve(self, zone_name: str) -> IdealLoadsSettings:
        """Return the effective settings for a zone.

        Per-zone fields override global fields one by one; fields the zone
        leaves unset inherit the global value.
        """
        merged: dict[str, Any] = {}
        if self.global_settings is not None:
            merged.update(self.global_settings.model_dump(exclude_none=True))
        override = self.per_zone.get(zone_name)
        if override is not None:
            merged.update(override.model_dump(exclude_none=True))
        return IdealLoadsSettings.model_validate(merged)

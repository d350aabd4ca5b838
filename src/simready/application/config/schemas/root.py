"""Root configuration document schema.

This module contains the ConfigurationDocument model, the aggregate of every
user-editable simulation input section.
"""

from typing import Any

from pydantic import Field, field_validator

from simready.application.config.schemas.base import (
    GLOBAL_ZONE,
    SUPPORTED_VERSIONS,
    DocumentModel,
    is_set,
)
from simready.application.config.schemas.loads_schema import InternalGains
from simready.application.config.schemas.materials_schema import (
    Construction,
    Defaults,
    Material,
    normalize_material_entry,
)
from simready.application.config.schemas.schedule_schema import Schedules
from simready.application.config.schemas.sizing_schema import SizingConfig
from simready.application.config.schemas.thermostat_schema import (
    IdealLoadsConfig,
    ThermostatSetpoint,
    ZoneThermostatMapping,
)
from simready.application.config.schemas.weather_schema import WeatherConfig


class ConfigurationDocument(DocumentModel):
    """Root model for a building simulation configuration document.

    Every section is optional; an empty document is valid and simply yields
    warnings from the readiness checklist.

    Attributes:
        schema_version: Version string in format "major.minor"
        materials: User-defined materials (tagged by kind)
        constructions: Layered constructions referencing materials by name
        defaults: Default constructions per surface class
        schedules: Schedule definitions grouped by kind
        thermostat_setpoints: Named thermostat setpoint objects
        thermostats: Zone to setpoint mappings, including a GLOBAL fallback
        ideal_loads: Ideal loads global settings and per-zone overrides
        sizing: Zone, system, and plant sizing configuration
        internal_gains: People, lights, and equipment gains per zone
        weather: Weather file and location settings
        weather_file_path: Legacy weather file location
        shading: Shading configuration, carried through uninspected

    Example:
        >>> doc = ConfigurationDocument.model_validate({
        ...     "constructions": [{"name": "Wall1", "layers": ["RM_Concrete_200mm"]}],
        ...     "defaults": {"wallConstruction": "Wall1"},
        ... })
    """

    schema_version: str = Field(default="1.0", pattern=r"^\d+\.\d+$")
    materials: list[Material] = Field(default_factory=list)
    constructions: list[Construction] = Field(default_factory=list)
    defaults: Defaults = Field(default_factory=Defaults)
    schedules: Schedules = Field(default_factory=Schedules)
    thermostat_setpoints: list[ThermostatSetpoint] = Field(default_factory=list)
    thermostats: list[ZoneThermostatMapping] = Field(default_factory=list)
    ideal_loads: IdealLoadsConfig = Field(default_factory=IdealLoadsConfig)
    sizing: SizingConfig = Field(default_factory=SizingConfig)
    internal_gains: InternalGains = Field(default_factory=InternalGains)
    weather: WeatherConfig = Field(default_factory=WeatherConfig)
    weather_file_path: str | None = None
    shading: dict[str, Any] = Field(default_factory=dict)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minors of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )

    @field_validator("materials", mode="before")
    @classmethod
    def normalize_material_kinds(cls, v: Any) -> Any:
        """Default missing kinds and translate engine object names."""
        if isinstance(v, list):
            return [normalize_material_entry(entry) for entry in v]
        return v

    @property
    def epw_path(self) -> str | None:
        """The configured weather file, preferring ``weather.epwPath``."""
        if is_set(self.weather.epw_path):
            return self.weather.epw_path
        if is_set(self.weather_file_path):
            return self.weather_file_path
        return None

    def mapping_for_zone(self, zone_name: str) -> ZoneThermostatMapping | None:
        """Return the zone's thermostat mapping, falling back to GLOBAL."""
        fallback = None
        for mapping in self.thermostats:
            if mapping.zone_name == zone_name:
                return mapping
            if mapping.zone_name == GLOBAL_ZONE and fallback is None:
                fallback = mapping
        return fallback

"""Configuration document schemas package.

This package organizes the pydantic models for the configuration document
into focused modules:

- base: Enums, shared constants, and the camelCase DocumentModel base
- materials_schema: Materials (tagged by kind), constructions, defaults
- schedule_schema: The six schedule kinds
- thermostat_schema: Setpoints, zone mappings, ideal loads
- loads_schema: Internal gain families
- sizing_schema: Zone, system, and plant sizing
- weather_schema: Weather file and custom location
- geometry_schema: Zone summaries supplied by the geometry model
- root: ConfigurationDocument
"""

from simready.application.config.schemas.base import (
    BUILTIN_MATERIAL_NAMES,
    GLOBAL_ZONE,
    SUPPORTED_VERSIONS,
    DocumentModel,
    GainFamily,
    LimitType,
    LocationSource,
    LoopType,
    MaterialKind,
    ScheduleKind,
    ThermostatType,
    is_set,
)
from simready.application.config.schemas.geometry_schema import Zone
from simready.application.config.schemas.loads_schema import (
    EquipmentGain,
    InternalGainEntry,
    InternalGains,
    LightsGain,
    PeopleGain,
)
from simready.application.config.schemas.materials_schema import (
    AirGapMaterial,
    Construction,
    Defaults,
    GasMaterial,
    GlazingMaterial,
    Material,
    NoMassMaterial,
    OpaqueMaterial,
    SimpleGlazingMaterial,
)
from simready.application.config.schemas.root import ConfigurationDocument
from simready.application.config.schemas.schedule_schema import (
    CompactSchedule,
    ConstantSchedule,
    DayHourlySchedule,
    FileSchedule,
    FileShadingSchedule,
    Schedules,
    ScheduleTypeLimits,
)
from simready.application.config.schemas.sizing_schema import (
    PlantSizingEntry,
    SizingConfig,
    SizingParameters,
    SystemSizingEntry,
    ZoneSizingOverride,
)
from simready.application.config.schemas.thermostat_schema import (
    IdealLoadsConfig,
    IdealLoadsSettings,
    ThermostatSetpoint,
    ZoneThermostatMapping,
)
from simready.application.config.schemas.weather_schema import (
    CustomLocation,
    WeatherConfig,
)

__all__ = [
    # Base
    "BUILTIN_MATERIAL_NAMES",
    "GLOBAL_ZONE",
    "SUPPORTED_VERSIONS",
    "DocumentModel",
    "GainFamily",
    "LimitType",
    "LocationSource",
    "LoopType",
    "MaterialKind",
    "ScheduleKind",
    "ThermostatType",
    "is_set",
    # Geometry
    "Zone",
    # Loads
    "EquipmentGain",
    "InternalGainEntry",
    "InternalGains",
    "LightsGain",
    "PeopleGain",
    # Materials
    "AirGapMaterial",
    "Construction",
    "Defaults",
    "GasMaterial",
    "GlazingMaterial",
    "Material",
    "NoMassMaterial",
    "OpaqueMaterial",
    "SimpleGlazingMaterial",
    # Root
    "ConfigurationDocument",
    # Schedules
    "CompactSchedule",
    "ConstantSchedule",
    "DayHourlySchedule",
    "FileSchedule",
    "FileShadingSchedule",
    "Schedules",
    "ScheduleTypeLimits",
    # Sizing
    "PlantSizingEntry",
    "SizingConfig",
    "SizingParameters",
    "SystemSizingEntry",
    "ZoneSizingOverride",
    # Thermostats
    "IdealLoadsConfig",
    "IdealLoadsSettings",
    "ThermostatSetpoint",
    "ZoneThermostatMapping",
    # Weather
    "CustomLocation",
    "WeatherConfig",
]

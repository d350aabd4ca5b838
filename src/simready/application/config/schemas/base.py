"""Base enums and shared models for configuration document schemas.

This module contains the enums and the common model base used across all
schema modules. It serves as the foundation for the schema hierarchy.

All document models serialize with camelCase keys (the format persisted by
the host application) while exposing snake_case attributes in Python.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


# Supported schema versions for configuration documents
# Version 1.0: Materials, constructions, schedules, thermostats, ideal loads,
#              sizing, internal gains, weather
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class DocumentModel(BaseModel):
    """Base model for every configuration document entity.

    Accepts both camelCase keys and snake_case field names on input and
    ignores unknown keys, since the host may persist UI-only state next to
    the simulation inputs.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class MaterialKind(str, Enum):
    """Material kind discriminator.

    Each kind has a closed set of physical property fields:
    - OPAQUE: Regular layered material with mass
    - NO_MASS: Resistance-only material
    - AIR_GAP: Air gap described by thermal resistance
    - GLAZING: Window glass pane
    - GAS: Window gas fill layer
    - SIMPLE_GLAZING: Whole-window U-factor/SHGC description
    """

    OPAQUE = "Opaque"
    NO_MASS = "NoMass"
    AIR_GAP = "AirGap"
    GLAZING = "Glazing"
    GAS = "Gas"
    SIMPLE_GLAZING = "SimpleGlazing"


class ScheduleKind(str, Enum):
    """The six independently keyed schedule kinds."""

    TYPE_LIMITS = "typeLimits"
    DAY_HOURLY = "dayHourly"
    COMPACT = "compact"
    CONSTANT = "constant"
    FILE = "file"
    FILE_SHADING = "fileShading"


class ThermostatType(str, Enum):
    """Thermostat setpoint control type."""

    SINGLE_HEATING = "SingleHeating"
    SINGLE_COOLING = "SingleCooling"
    SINGLE_HEATING_OR_COOLING = "SingleHeatingOrCooling"
    DUAL_SETPOINT = "DualSetpoint"


class GainFamily(str, Enum):
    """Internal gain families, valued by their document section key."""

    PEOPLE = "people"
    LIGHTS = "lights"
    ELECTRIC_EQUIPMENT = "electricEquipment"
    GAS_EQUIPMENT = "gasEquipment"
    HOT_WATER_EQUIPMENT = "hotWaterEquipment"
    STEAM_EQUIPMENT = "steamEquipment"
    OTHER_EQUIPMENT = "otherEquipment"


class LocationSource(str, Enum):
    """Where the simulation site location comes from."""

    FROM_EPW = "FromEPW"
    CUSTOM = "Custom"


class LimitType(str, Enum):
    """Ideal loads capacity limit type."""

    NO_LIMIT = "NoLimit"
    LIMIT_FLOW_RATE = "LimitFlowRate"
    LIMIT_CAPACITY = "LimitCapacity"
    LIMIT_FLOW_RATE_AND_CAPACITY = "LimitFlowRateAndCapacity"


class LoopType(str, Enum):
    """Plant loop type for plant sizing."""

    HEATING = "Heating"
    COOLING = "Cooling"
    CONDENSER = "Condenser"
    STEAM = "Steam"


# Pseudo-zone name used by thermostat mappings as a fallback for all zones
GLOBAL_ZONE = "GLOBAL"

# Reference materials that are always available to constructions
BUILTIN_MATERIAL_NAMES: tuple[str, ...] = (
    "RM_Concrete_200mm",
    "RM_Insulation_100mm",
    "RM_Gypsum_13mm",
    "RM_Screed_50mm",
    "RM_Glass_Double_Clear",
)


def is_set(reference: str | None) -> bool:
    """Return True if a name reference is set.

    The host stores "(none)" selections as empty strings, so both None and
    blank strings count as unset.
    """
    return reference is not None and reference.strip() != ""

"""HVAC sizing schemas.

Zones, air loops, and plant loops that have no entry here are sized with
engine-side defaults.
"""

from pydantic import Field

from simready.application.config.schemas.base import DocumentModel, LoopType


class SizingParameters(DocumentModel):
    """Global sizing factors."""

    heating_sizing_factor: float | None = Field(default=None, gt=0)
    cooling_sizing_factor: float | None = Field(default=None, gt=0)
    timesteps_in_averaging_window: int | None = Field(default=None, ge=1)


class ZoneSizingOverride(DocumentModel):
    """Per-zone design sizing overrides."""

    zone_heating_sizing_factor: float | None = Field(default=None, gt=0)
    zone_cooling_sizing_factor: float | None = Field(default=None, gt=0)
    zone_cooling_design_supply_air_temperature: float | None = None
    zone_heating_design_supply_air_temperature: float | None = None
    zone_cooling_design_supply_air_humidity_ratio: float | None = Field(default=None, ge=0)
    zone_heating_design_supply_air_humidity_ratio: float | None = Field(default=None, ge=0)
    cooling_design_air_flow_method: str | None = None
    heating_design_air_flow_method: str | None = None
    zone_load_sizing_method: str | None = None


class SystemSizingEntry(DocumentModel):
    """Air loop sizing entry."""

    air_loop_name: str = Field(..., min_length=1)
    type_of_load_to_size_on: str = "Sensible"
    design_outdoor_air_flow_rate: float | str | None = None
    central_cooling_design_supply_air_temperature: float | None = None
    central_heating_design_supply_air_temperature: float | None = None
    type_of_zone_sum_to_use: str | None = None
    all_outdoor_air_in_cooling: bool | None = None
    all_outdoor_air_in_heating: bool | None = None


class PlantSizingEntry(DocumentModel):
    """Plant loop sizing entry."""

    plant_loop_name: str = Field(..., min_length=1)
    loop_type: LoopType = LoopType.HEATING
    design_loop_exit_temperature: float | None = None
    loop_design_temperature_difference: float | None = Field(default=None, gt=0)
    sizing_option: str | None = None


class SizingConfig(DocumentModel):
    """Zone, system, and plant sizing configuration."""

    parameters: SizingParameters | None = None
    zones: dict[str, ZoneSizingOverride] = Field(default_factory=dict)
    systems: list[SystemSizingEntry] = Field(default_factory=list)
    plants: list[PlantSizingEntry] = Field(default_factory=list)

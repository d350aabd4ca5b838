"""Internal gain (zone load) schemas.

Each gain entry belongs to a zone, is modulated by a schedule, and sizes its
load with a ``method`` that selects which magnitude field applies. The method
and its magnitude are kept loosely typed here: an entry whose magnitude is
missing for its method is a validation finding, not a schema error.
"""

import math
from typing import ClassVar, Iterator

from pydantic import Field

from simready.application.config.schemas.base import DocumentModel, GainFamily, is_set

# Magnitude attribute(s) consulted for each sizing method, per family.
# When several attributes are listed the first usable one wins.
PEOPLE_METHOD_FIELDS: dict[str, tuple[str, ...]] = {
    "People": ("number_people",),
    "People/Area": ("people_per_area",),
    "Area/Person": ("area_per_person",),
}

LIGHTS_METHOD_FIELDS: dict[str, tuple[str, ...]] = {
    "Watts/Area": ("watts_per_area",),
    "Watts/Person": ("watts_per_person",),
    "Level": ("lighting_level", "design_level"),
}

EQUIPMENT_METHOD_FIELDS: dict[str, tuple[str, ...]] = {
    "Watts/Area": ("watts_per_area",),
    "Watts/Person": ("watts_per_person",),
    "Level": ("design_level",),
}


class InternalGainEntry(DocumentModel):
    """Fields shared by every internal gain family."""

    method_fields: ClassVar[dict[str, tuple[str, ...]]] = EQUIPMENT_METHOD_FIELDS
    default_method: ClassVar[str] = "Watts/Area"

    name: str = Field(..., min_length=1)
    zone_name: str | None = None
    schedule_name: str | None = None
    method: str | None = None

    @property
    def effective_method(self) -> str:
        """The declared method, or the family default when unset."""
        return self.method if is_set(self.method) else self.default_method

    def magnitude_fields(self) -> tuple[str, ...] | None:
        """Attribute names that size this entry, or None for an unknown method."""
        return self.method_fields.get(self.effective_method)

    def magnitude(self) -> float | None:
        """Return the finite, non-negative magnitude for the effective method."""
        fields = self.magnitude_fields()
        if fields is None:
            return None
        for attr in fields:
            value = getattr(self, attr, None)
            if value is not None and math.isfinite(value) and value >= 0:
                return value
        return None

    def schedule_references(self) -> list[tuple[str, str]]:
        """Return (field alias, schedule name) pairs that are set."""
        if is_set(self.schedule_name):
            return [("scheduleName", self.schedule_name)]
        return []


class PeopleGain(InternalGainEntry):
    """Occupancy gain."""

    method_fields: ClassVar[dict[str, tuple[str, ...]]] = PEOPLE_METHOD_FIELDS
    default_method: ClassVar[str] = "People"

    number_people: float | None = None
    people_per_area: float | None = None
    area_per_person: float | None = None
    fraction_radiant: float | None = Field(default=None, ge=0, le=1)
    sensible_heat_fraction: float | str | None = None
    activity_schedule_name: str | None = None

    def schedule_references(self) -> list[tuple[str, str]]:
        """Occupancy also references the activity (metabolic rate) schedule."""
        refs = super().schedule_references()
        if is_set(self.activity_schedule_name):
            refs.append(("activityScheduleName", self.activity_schedule_name))
        return refs


class LightsGain(InternalGainEntry):
    """Lighting gain."""

    method_fields: ClassVar[dict[str, tuple[str, ...]]] = LIGHTS_METHOD_FIELDS

    watts_per_area: float | None = None
    watts_per_person: float | None = None
    lighting_level: float | None = None
    design_level: float | None = None
    return_air_fraction: float | None = Field(default=None, ge=0, le=1)
    fraction_radiant: float | None = Field(default=None, ge=0, le=1)
    fraction_visible: float | None = Field(default=None, ge=0, le=1)


class EquipmentGain(InternalGainEntry):
    """Electric, gas, hot water, steam, or other equipment gain."""

    watts_per_area: float | None = None
    watts_per_person: float | None = None
    design_level: float | None = None
    fraction_latent: float | None = Field(default=None, ge=0, le=1)
    fraction_radiant: float | None = Field(default=None, ge=0, le=1)
    fraction_lost: float | None = Field(default=None, ge=0, le=1)


class InternalGains(DocumentModel):
    """All internal gain entries of a document, grouped by family."""

    people: list[PeopleGain] = Field(default_factory=list)
    lights: list[LightsGain] = Field(default_factory=list)
    electric_equipment: list[EquipmentGain] = Field(default_factory=list)
    gas_equipment: list[EquipmentGain] = Field(default_factory=list)
    hot_water_equipment: list[EquipmentGain] = Field(default_factory=list)
    steam_equipment: list[EquipmentGain] = Field(default_factory=list)
    other_equipment: list[EquipmentGain] = Field(default_factory=list)

    def by_family(self) -> Iterator[tuple[GainFamily, list[InternalGainEntry]]]:
        """Yield each family with its entries, in a fixed order."""
        yield GainFamily.PEOPLE, self.people
        yield GainFamily.LIGHTS, self.lights
        yield GainFamily.ELECTRIC_EQUIPMENT, self.electric_equipment
        yield GainFamily.GAS_EQUIPMENT, self.gas_equipment
        yield GainFamily.HOT_WATER_EQUIPMENT, self.hot_water_equipment
        yield GainFamily.STEAM_EQUIPMENT, self.steam_equipment
        yield GainFamily.OTHER_EQUIPMENT, self.other_equipment

    def entries(self) -> Iterator[tuple[GainFamily, int, InternalGainEntry]]:
        """Yield (family, index, entry) for every entry in document order."""
        for family, items in self.by_family():
            for index, entry in enumerate(items):
                yield family, index, entry

    def count(self) -> int:
        """Total number of internal gain entries across all families."""
        return sum(len(items) for _, items in self.by_family())

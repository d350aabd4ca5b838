"""Material, construction, and default construction schemas.

Materials are a discriminated union on ``kind``. Each kind carries only the
physical properties that the simulation engine accepts for it, so a typo in
a property name is dropped rather than silently mixed across kinds.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import Field

from simready.application.config.schemas.base import (
    DocumentModel,
    MaterialKind,
    is_set,
)

# Engine object names accepted as aliases for the material kind
MATERIAL_KIND_ALIASES: dict[str, MaterialKind] = {
    "Material": MaterialKind.OPAQUE,
    "Material:NoMass": MaterialKind.NO_MASS,
    "Material:AirGap": MaterialKind.AIR_GAP,
    "WindowMaterial:Glazing": MaterialKind.GLAZING,
    "WindowMaterial:Gas": MaterialKind.GAS,
    "WindowMaterial:SimpleGlazingSystem": MaterialKind.SIMPLE_GLAZING,
}


class OpaqueMaterial(DocumentModel):
    """Regular opaque material layer with thermal mass."""

    kind: Literal["Opaque"] = "Opaque"
    name: str = Field(..., min_length=1)
    roughness: str | None = None
    thickness: float | None = Field(default=None, gt=0)
    conductivity: float | None = Field(default=None, gt=0)
    density: float | None = Field(default=None, gt=0)
    specific_heat: float | None = Field(default=None, gt=0)
    thermal_absorptance: float | None = Field(default=None, ge=0, le=1)
    solar_absorptance: float | None = Field(default=None, ge=0, le=1)
    visible_absorptance: float | None = Field(default=None, ge=0, le=1)


class NoMassMaterial(DocumentModel):
    """Resistance-only material layer."""

    kind: Literal["NoMass"] = "NoMass"
    name: str = Field(..., min_length=1)
    roughness: str | None = None
    thermal_resistance: float | None = Field(default=None, gt=0)
    thermal_absorptance: float | None = Field(default=None, ge=0, le=1)
    solar_absorptance: float | None = Field(default=None, ge=0, le=1)
    visible_absorptance: float | None = Field(default=None, ge=0, le=1)


class AirGapMaterial(DocumentModel):
    """Air gap layer."""

    kind: Literal["AirGap"] = "AirGap"
    name: str = Field(..., min_length=1)
    thermal_resistance: float | None = Field(default=None, gt=0)


class GlazingMaterial(DocumentModel):
    """Single glass pane described by spectral-average optical data."""

    kind: Literal["Glazing"] = "Glazing"
    name: str = Field(..., min_length=1)
    optical_data_type: str | None = None
    thickness: float | None = Field(default=None, gt=0)
    solar_transmittance: float | None = Field(default=None, ge=0, le=1)
    front_solar_reflectance: float | None = Field(default=None, ge=0, le=1)
    back_solar_reflectance: float | None = Field(default=None, ge=0, le=1)
    visible_transmittance: float | None = Field(default=None, ge=0, le=1)
    front_visible_reflectance: float | None = Field(default=None, ge=0, le=1)
    back_visible_reflectance: float | None = Field(default=None, ge=0, le=1)
    infrared_transmittance: float | None = Field(default=None, ge=0, le=1)
    front_emissivity: float | None = Field(default=None, ge=0, le=1)
    back_emissivity: float | None = Field(default=None, ge=0, le=1)
    conductivity: float | None = Field(default=None, gt=0)
    dirt_correction_factor: float | None = Field(default=None, gt=0, le=1)


class GasMaterial(DocumentModel):
    """Gas fill between glazing panes."""

    kind: Literal["Gas"] = "Gas"
    name: str = Field(..., min_length=1)
    gas_type: str | None = None
    thickness: float | None = Field(default=None, gt=0)


class SimpleGlazingMaterial(DocumentModel):
    """Whole-window system described by U-factor and SHGC."""

    kind: Literal["SimpleGlazing"] = "SimpleGlazing"
    name: str = Field(..., min_length=1)
    u_factor: float | None = Field(default=None, gt=0)
    solar_heat_gain_coeff: float | None = Field(default=None, ge=0, le=1)
    visible_transmittance: float | None = Field(default=None, ge=0, le=1)


Material = Annotated[
    Union[
        OpaqueMaterial,
        NoMassMaterial,
        AirGapMaterial,
        GlazingMaterial,
        GasMaterial,
        SimpleGlazingMaterial,
    ],
    Field(discriminator="kind"),
]


def normalize_material_entry(entry: Any) -> Any:
    """Fill in or translate the ``kind`` tag of a raw material entry.

    Entries without a kind are treated as opaque materials. Entries that use
    the engine object name (``"Material:NoMass"``) or the legacy ``type`` key
    are translated to the matching kind. Non-mapping input is returned
    unchanged so that pydantic reports it.
    """
    if not isinstance(entry, dict):
        return entry
    data = dict(entry)
    raw_kind = data.get("kind") or data.pop("type", None)
    if raw_kind is None:
        data["kind"] = MaterialKind.OPAQUE.value
    elif raw_kind in MATERIAL_KIND_ALIASES:
        data["kind"] = MATERIAL_KIND_ALIASES[raw_kind].value
    else:
        data["kind"] = raw_kind
    return data


class Construction(DocumentModel):
    """Ordered stack of material layers, outside to inside.

    Layer names may transiently dangle while the document is being edited;
    that is reported by validation rather than rejected here.
    """

    name: str = Field(..., min_length=1)
    layers: list[str] = Field(..., min_length=1)


class Defaults(DocumentModel):
    """Default constructions applied to surfaces without an explicit one."""

    wall_construction: str | None = None
    roof_construction: str | None = None
    floor_construction: str | None = None
    window_construction: str | None = None

    def references(self) -> list[tuple[str, str]]:
        """Return the set (slot alias, construction name) pairs in fixed order."""
        slots = (
            ("wallConstruction", self.wall_construction),
            ("roofConstruction", self.roof_construction),
            ("floorConstruction", self.floor_construction),
            ("windowConstruction", self.window_construction),
        )
        return [(slot, name) for slot, name in slots if is_set(name)]

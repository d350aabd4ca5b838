"""Zone schema.

Zones are owned by the host geometry model. The validation core only reads
them to check zone references and to summarise geometry.
"""

from typing import Any

from pydantic import Field, model_validator

from simready.application.config.schemas.base import DocumentModel


def flatten_zone_totals(data: dict[str, Any]) -> dict[str, Any]:
    """Copy a raw zone, lifting ``surfaces.total``/``windows.total`` to counts.

    ``{"surfaces": {"total": n}, "windows": {"total": n}}`` is the shape the
    geometry model reports for each zone. Flat counts win when both are given.
    """
    data = dict(data)
    for nested, flat in (("surfaces", "surfaceCount"), ("windows", "windowCount")):
        block = data.pop(nested, None)
        if isinstance(block, dict) and flat not in data:
            data[flat] = block.get("total", 0)
    return data


class Zone(DocumentModel):
    """Read-only summary of one thermal zone."""

    name: str = Field(..., min_length=1)
    floor_area: float | None = Field(default=None, ge=0)
    surface_count: int = Field(default=0, ge=0)
    window_count: int = Field(default=0, ge=0)

    @model_validator(mode="before")
    @classmethod
    def accept_nested_totals(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        return flatten_zone_totals(data)

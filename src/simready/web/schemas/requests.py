"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import Field

from simready.application.schedules import CompactRow
from simready.web.schemas.common import ApiModel


class DiagnosticsRequest(ApiModel):
    """Request for validating a configuration document against zones."""

    document: dict[str, Any] | None = Field(
        default=None, description="Configuration document JSON"
    )
    zones: list[dict[str, Any] | str] = Field(
        default_factory=list, description="Zones from the geometry model"
    )
    strict: bool = Field(
        default=False,
        description="Reject schema errors instead of skipping bad entries",
    )


class CapabilitiesSchema(ApiModel):
    """Runtime capabilities reported by the caller."""

    can_execute: bool = Field(..., description="Whether the engine can be launched")


class ReadinessRequest(DiagnosticsRequest):
    """Request for the readiness checklist.

    When ``capabilities`` is omitted the server's own environment is detected.
    """

    capabilities: CapabilitiesSchema | None = Field(
        default=None, description="Caller runtime capabilities"
    )


class CompactParseRequest(ApiModel):
    """Request for parsing compact schedule lines.

    Either ``lines`` or ``text`` may be given; ``lines`` wins when both are.
    """

    lines: list[Any] | None = Field(default=None, description="Raw directive lines")
    text: str | None = Field(default=None, description="Directive text, one per line")


class CompactSerializeRequest(ApiModel):
    """Request for serializing compact schedule rows."""

    rows: list[CompactRow] = Field(..., description="Structured compact rows")

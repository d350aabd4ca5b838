"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from simready.application.readiness import ReadinessStep, StepStatus
from simready.application.schedules import CompactRow
from simready.web.schemas.common import ApiModel


class ReadinessResponse(ApiModel):
    """Readiness checklist with an aggregated view."""

    steps: list[ReadinessStep] = Field(..., description="The seven steps, in order")
    blocking_steps: list[str] = Field(
        default_factory=list, description="Ids of steps in error state"
    )
    summary: StepStatus = Field(..., description="Most severe step status")


class CompactParseResponse(ApiModel):
    """Parsed compact schedule rows."""

    rows: list[CompactRow]


class CompactSerializeResponse(ApiModel):
    """Serialized compact schedule lines."""

    lines: list[str]


class ErrorResponseSchema(BaseModel):
    """Error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error category")
    details: Any = Field(default=None, description="Additional error details")

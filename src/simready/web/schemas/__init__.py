"""Pydantic schemas for the REST API."""

from simready.web.schemas.common import ApiModel
from simready.web.schemas.requests import (
    CapabilitiesSchema,
    CompactParseRequest,
    CompactSerializeRequest,
    DiagnosticsRequest,
    ReadinessRequest,
)
from simready.web.schemas.responses import (
    CompactParseResponse,
    CompactSerializeResponse,
    ErrorResponseSchema,
    ReadinessResponse,
)

__all__ = [
    # Common
    "ApiModel",
    # Requests
    "CapabilitiesSchema",
    "CompactParseRequest",
    "CompactSerializeRequest",
    "DiagnosticsRequest",
    "ReadinessRequest",
    # Responses
    "CompactParseResponse",
    "CompactSerializeResponse",
    "ErrorResponseSchema",
    "ReadinessResponse",
]

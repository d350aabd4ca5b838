"""Compact schedule endpoints."""

from fastapi import APIRouter

from simready.application.schedules import (
    parse_compact,
    parse_compact_text,
    serialize_compact,
)
from simready.web.schemas.requests import CompactParseRequest, CompactSerializeRequest
from simready.web.schemas.responses import CompactParseResponse, CompactSerializeResponse

router = APIRouter(prefix="/schedules/compact", tags=["schedules"])


@router.post("/parse", response_model=CompactParseResponse)
async def parse_compact_schedule(request: CompactParseRequest) -> CompactParseResponse:
    """Parse compact directive lines into structured rows."""
    if request.lines is not None:
        rows = parse_compact(request.lines)
    else:
        rows = parse_compact_text(request.text)
    return CompactParseResponse(rows=rows)


@router.post("/serialize", response_model=CompactSerializeResponse)
async def serialize_compact_schedule(
    request: CompactSerializeRequest,
) -> CompactSerializeResponse:
    """Serialize structured rows back to compact directive lines."""
    return CompactSerializeResponse(lines=serialize_compact(request.rows))

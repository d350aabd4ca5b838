"""Referential validation endpoints."""

from fastapi import APIRouter

from simready.application.config import Diagnostics, load_document_from_dict, validate
from simready.web.schemas.requests import DiagnosticsRequest

router = APIRouter(prefix="/diagnostics", tags=["diagnostics"])


@router.post("", response_model=Diagnostics)
async def create_diagnostics(request: DiagnosticsRequest) -> Diagnostics:
    """Validate a configuration document against a zone list.

    Malformed entries are skipped unless ``strict`` is set, in which case
    schema errors are returned as 422 with one detail per error.
    """
    document = request.document
    if request.strict:
        document = load_document_from_dict(document or {})
    return validate(document, request.zones)

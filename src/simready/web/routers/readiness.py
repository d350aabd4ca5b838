"""Simulation readiness endpoints."""

from fastapi import APIRouter

from simready.application.config import coerce_document, load_document_from_dict, validate
from simready.application.readiness import evaluate_report
from simready.contracts.host import RuntimeCapabilities
from simready.web.dependencies import CapabilitiesProviderDep
from simready.web.schemas.requests import ReadinessRequest
from simready.web.schemas.responses import ReadinessResponse

router = APIRouter(prefix="/readiness", tags=["readiness"])


@router.post("", response_model=ReadinessResponse)
async def create_readiness(
    request: ReadinessRequest,
    provider: CapabilitiesProviderDep,
) -> ReadinessResponse:
    """Evaluate the seven-step readiness checklist for a document."""
    if request.strict:
        document = load_document_from_dict(request.document or {})
    else:
        document = coerce_document(request.document)

    if request.capabilities is not None:
        capabilities = RuntimeCapabilities(can_execute=request.capabilities.can_execute)
    else:
        capabilities = provider.get_runtime_capabilities()

    diagnostics = validate(document, request.zones)
    report = evaluate_report(diagnostics, document, capabilities, request.zones)

    return ReadinessResponse(
        steps=list(report.steps),
        blocking_steps=[step.id.value for step in report.blocking_steps()],
        summary=report.summary(),
    )

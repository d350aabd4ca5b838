"""API routers for the REST API."""

from simready.web.routers.compact import router as compact_router
from simready.web.routers.diagnostics import router as diagnostics_router
from simready.web.routers.readiness import router as readiness_router

__all__ = [
    "compact_router",
    "diagnostics_router",
    "readiness_router",
]

"""FastAPI REST API for simulation input validation.

This module exposes referential diagnostics, the readiness checklist, and
the compact schedule codec over HTTP.

Usage:
    uvicorn simready.web:app --reload
"""

from simready.web.app import app, create_app

__all__ = ["app", "create_app"]

"""Error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from simready.application.config import ConfigError


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details,
            },
        )

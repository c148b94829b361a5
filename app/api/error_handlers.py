"""
Application-wide exception handlers.

Requests that FastAPI rejects before reaching a route (e.g. a body that is
not valid JSON) are answered in the same normalized shape as handler errors.
"""
# Standard library imports
import logging

# External package imports
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

# Local application imports
from ..core.errors import classify_exception, normalize_error

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register the normalizing exception handlers on the application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        normalized = normalize_error(classify_exception(exc))
        logger.debug(f"Request rejected: {normalized.message}")
        return JSONResponse(status_code=normalized.status, content={"message": normalized.message})

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled exception", exc_info=exc)
        normalized = normalize_error(classify_exception(exc))
        return JSONResponse(status_code=normalized.status, content={"message": normalized.message})

"""Exception handlers for the FastAPI application.

Engine errors are mapped to HTTP responses with a consistent body:

    {
        "detail": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE"
    }
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from tabsense_ml.errors import ErrorCode, TabsenseMLError

logger = logging.getLogger(__name__)

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    ErrorCode.MODEL_LOAD_FAILED: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorCode.RUN_CANCELLED: status.HTTP_409_CONFLICT,
    ErrorCode.CLASSIFICATION_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _create_error_response(status_code: int, message: str, code: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": message, "code": code},
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register engine exception handlers on the application."""

    @app.exception_handler(TabsenseMLError)
    async def engine_exception_handler(
        request: Request,
        exc: TabsenseMLError,
    ) -> JSONResponse:
        status_code = ERROR_CODE_TO_STATUS.get(
            exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR
        )
        logger.warning(
            "Engine error on %s %s: %s (code=%s, details=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
            exc.details,
        )
        return _create_error_response(status_code, exc.message, exc.code.value)

"""
Exception handlers that give every error response the same shape:

    {"error": "<message>"}

Client errors (malformed JSON, over-length chirps, wrong method) map to 4xx,
persistence failures to 500 with a generic message.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from chirpy_app.exceptions import ChirpyError
from chirpy_app.schemas.error import ErrorResponse

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
        headers=headers,
    )


async def chirpy_error_handler(request: Request, exc: ChirpyError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return error_response(exc.status_code, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Body could not be parsed or did not match the schema."""
    if any(err.get("type") == "json_invalid" for err in exc.errors()):
        return error_response(status.HTTP_400_BAD_REQUEST, "Invalid JSON")
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request body")


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ChirpyError, chirpy_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)

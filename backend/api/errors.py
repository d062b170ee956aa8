"""
Exception handlers.

Maps module exceptions to HTTP responses. Handlers are checked in order,
so more specific classes come first.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from modules.auth.exceptions import InvalidCredentialsError
from shared.exceptions import (
    AuthenticationError,
    ConflictError,
    ExternalServiceError,
    GrandLineError,
    NotFoundError,
    ValidationError,
)

from .models.errors import ErrorResponse, ValidationErrorResponse

logger = logging.getLogger(__name__)

STATUS_CODES: list[tuple[type[GrandLineError], int]] = [
    (InvalidCredentialsError, status.HTTP_400_BAD_REQUEST),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ExternalServiceError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def status_for(exc: GrandLineError) -> int:
    for exc_type, code in STATUS_CODES:
        if isinstance(exc, exc_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def handle_app_error(request: Request, exc: GrandLineError) -> JSONResponse:
    code = status_for(exc)
    if code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.code}")
    # Details may name the user or the upstream service; keep them server-side
    body = ErrorResponse(error=exc.code, message=exc.message)
    return JSONResponse(status_code=code, content=body.model_dump())


def _field_names(errors: list[dict]) -> list[str]:
    names = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        name = ".".join(loc) or "body"
        if name not in names:
            names.append(name)
    return names


async def handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = jsonable_encoder(exc.errors())
    body = ValidationErrorResponse(
        message=f"Missing or invalid fields: {', '.join(_field_names(errors))}",
        detail=errors,
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(GrandLineError, handle_app_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)

"""Error translation and exception handlers.

Routes translate domain errors into ``HTTPException``; the handlers here
render every error response as ``{"error": message}``.
"""

import logfire
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from quill.domain.error import (
    DomainError,
    InvalidCredentialsError,
    NotAuthorizedError,
    NotFoundError,
    SlugExhaustedError,
    UnauthenticatedError,
    ValidationError,
)

AUTHENTICATE_MESSAGE = "Please authenticate"


def to_http_exception(error: DomainError) -> HTTPException:
    """Map a domain error to the matching HTTP error."""
    if isinstance(error, ValidationError):
        return HTTPException(status.HTTP_400_BAD_REQUEST, detail=str(error))
    if isinstance(error, InvalidCredentialsError):
        return HTTPException(status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    if isinstance(error, UnauthenticatedError):
        return HTTPException(
            status.HTTP_401_UNAUTHORIZED,
            detail=AUTHENTICATE_MESSAGE,
            headers={"WWW-Authenticate": "Bearer"},
        )
    if isinstance(error, NotAuthorizedError):
        return HTTPException(
            status.HTTP_403_FORBIDDEN, detail=f"Not authorized to {error.action}"
        )
    if isinstance(error, NotFoundError):
        return HTTPException(
            status.HTTP_404_NOT_FOUND, detail=f"{error.resource} not found"
        )
    if isinstance(error, SlugExhaustedError):
        return HTTPException(status.HTTP_409_CONFLICT, detail=str(error))
    return HTTPException(status.HTTP_400_BAD_REQUEST, detail=str(error))


def _validation_message(error: RequestValidationError) -> str:
    messages = []
    for detail in error.errors():
        # Drop the "body"/"query"/"path" prefix
        location = ".".join(str(part) for part in detail["loc"][1:])
        messages.append(f"{location}: {detail['msg']}" if location else detail["msg"])
    return "; ".join(messages) or "Invalid request"


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    detail = exc.detail
    if exc.status_code == status.HTTP_404_NOT_FOUND and detail == "Not Found":
        detail = "Route not found"
    return JSONResponse(
        {"error": detail},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    message = _validation_message(exc)
    logfire.info("Request validation failed", path=request.url.path, error=message)
    return JSONResponse({"error": message}, status_code=status.HTTP_400_BAD_REQUEST)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logfire.error(
        "Unhandled error",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
        _exc_info=exc,
    )
    return JSONResponse(
        {"error": "Something went wrong!"},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the JSON error handlers on an app."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

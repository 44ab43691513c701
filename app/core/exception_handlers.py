import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.errors import ValidationFailure
from app.schemas.response import ErrorDetail, ErrorResponse

log = logging.getLogger("uvicorn")


def _error(status_code: int, code: str, message, headers=None, **extra) -> JSONResponse:
    """Builds the error envelope. Unset optional keys are left out of the body."""
    body = ErrorResponse(error=ErrorDetail(code=code, message=message, **extra))
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body, exclude_none=True),
        headers=headers,
    )


# ----------- Exception Handlers (called by FastAPI) -----------

def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """401 from the session guard, 404 from the routers, and any other HTTPException."""
    return _error(exc.status_code, "http_error", exc.detail, headers=getattr(exc, "headers", None))


def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies and query params are reported as 400, not FastAPI's 422."""
    return _error(400, "validation_error", "Invalid input data", details=jsonable_encoder(exc.errors()))


def domain_validation_handler(request: Request, exc: ValidationFailure):
    log.info("Rejected %s %s: %s", request.method, request.url.path, exc.message)
    return _error(400, "validation_error", exc.message, field=exc.field)


def generic_exception_handler(request: Request, exc: Exception):
    log.error("Unhandled exception on path: %s", request.url.path, exc_info=exc)
    return _error(500, "server_error", "Internal Server Error")


def setup_exception_handlers(app: FastAPI):
    """Registers all custom exception handlers with the FastAPI application."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ValidationFailure, domain_validation_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
    return app

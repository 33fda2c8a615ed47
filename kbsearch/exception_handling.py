# kbsearch/exception_handling.py
from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .errors import InvalidArgument, ProcessingError
from .logging_setup import get_logger
from .middleware import REQUEST_ID_HEADER
from .schema import ErrorResponse

# Keep a separate logger namespace for exceptions
logger = get_logger("kb_search.exceptions")

SEARCH_ERROR_MESSAGE = "Error in getting articles"
UNEXPECTED_ERROR_MESSAGE = "Unexpected error occurred"
INTERNAL_ERROR_MESSAGE = "INTERNAL_SERVER_ERROR"


def _error(status_code: int, message: str, detail) -> JSONResponse:
    body = ErrorResponse(message=message, detail=detail)
    return JSONResponse(body.model_dump(), status_code=status_code)


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg', '')}")
    return "; ".join(parts)


async def invalid_argument_handler(request: Request, exc: InvalidArgument):
    logger.exception(
        "INVALID_ARGUMENT",
        extra={"handled": True, "path": str(request.url.path), "status_code": 400},
    )
    return _error(400, SEARCH_ERROR_MESSAGE, str(exc))


async def processing_error_handler(request: Request, exc: ProcessingError):
    logger.exception(
        "PROCESSING_ERROR",
        extra={"handled": True, "path": str(request.url.path), "status_code": 500},
    )
    return _error(500, SEARCH_ERROR_MESSAGE, str(exc))


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(
        "REQUEST_VALIDATION_FAILED",
        extra={"handled": True, "path": str(request.url.path), "status_code": 400},
    )
    return _error(400, UNEXPECTED_ERROR_MESSAGE, _format_validation_errors(exc))


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    logger.warning(
        "HTTP_EXCEPTION",
        extra={"handled": True, "path": str(request.url.path), "status_code": exc.status_code},
    )
    return _error(exc.status_code, "HTTP error", exc.detail)


async def runtime_error_handler(request: Request, exc: RuntimeError):
    logger.exception(
        "RUNTIME_ERROR",
        extra={"handled": False, "path": str(request.url.path), "status_code": 500},
    )
    return _error(500, INTERNAL_ERROR_MESSAGE, str(exc))


async def unhandled_exception_handler(request: Request, exc: Exception):
    # Uncategorized failures are reported as a bad request
    logger.exception(
        "UNHANDLED_EXCEPTION",
        extra={"handled": False, "path": str(request.url.path), "status_code": 400},
    )
    response = _error(400, UNEXPECTED_ERROR_MESSAGE, str(exc))
    req_id = getattr(request.state, "request_id", None)
    if req_id:
        response.headers[REQUEST_ID_HEADER] = req_id
    return response


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers in one place.
    Starlette picks the most specific class in the exception's MRO, so
    ProcessingError wins over RuntimeError and InvalidArgument over Exception.
    """
    app.add_exception_handler(InvalidArgument, invalid_argument_handler)
    app.add_exception_handler(ProcessingError, processing_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RuntimeError, runtime_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

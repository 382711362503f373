import logging
from typing import Any, Sequence
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "An internal server error occurred."

def describe_validation_error(errors: Sequence[dict[str, Any]]) -> str:
    """Turn pydantic/FastAPI validation errors into one client-facing message."""
    if not errors:
        return "Invalid request"
    err = errors[0]
    loc = tuple(err.get("loc") or ())
    kind = err.get("type")
    if loc[:1] == ("path",):
        return "Invalid record ID"
    if kind == "json_invalid":
        return "Invalid JSON body"
    if kind == "missing" and loc == ("body",):
        return "Request body is required"
    field_loc = loc[1:] if loc[:1] in (("body",), ("query",)) else loc
    field = field_loc[-1] if field_loc else None
    if kind == "missing" and field:
        return f"Missing required field: {field}"
    ctx_error = (err.get("ctx") or {}).get("error")
    if ctx_error is not None:
        return str(ctx_error)
    if field:
        return f"Invalid value for {field}: {err.get('msg')}"
    return err.get("msg") or "Invalid request"

def error_response(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)

def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")
        return error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        message = describe_validation_error(exc.errors())
        logger.warning(f"{request.method} {request.url.path} -> 400: {message}")
        return error_response(400, message)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.critical(f"Unhandled exception for request {request.method} {request.url.path}", exc_info=True)
        return error_response(500, INTERNAL_ERROR)

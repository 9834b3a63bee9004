# app/errors.py
"""
Domain errors and the single place that turns them into HTTP responses.

Every error response has the shape {"error": <kind>, "message": <text>}.
Handlers never catch these; they propagate to the handlers registered here.
"""
import logging
from typing import Any, Dict, List, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Missing required product fields"
MALFORMED_JSON_MESSAGE = "Malformed JSON body"

# error types pydantic reports when a field is absent, null or empty
_PRESENCE_ERROR_TYPES = {"missing", "string_too_short"}


class ProductAPIError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def kind(self) -> str:
        return type(self).__name__


class ValidationError(ProductAPIError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ProductAPIError):
    status_code = status.HTTP_404_NOT_FOUND


# ---------------------------
# Helpers
# ---------------------------
def _error_response(status_code: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error, "message": message})


def _is_presence_error(err: Dict[str, Any]) -> bool:
    if err.get("type") in _PRESENCE_ERROR_TYPES:
        return True
    # a body-level error (no field in loc) means the body itself is absent
    if len(err.get("loc", ())) < 2:
        return True
    return err.get("input", "") is None


def validation_message(errors: Sequence[Dict[str, Any]]) -> str:
    """Summarise pydantic errors as a single client-facing message."""
    if any(e.get("type") == "json_invalid" for e in errors):
        return MALFORMED_JSON_MESSAGE
    if all(_is_presence_error(e) for e in errors):
        return MISSING_FIELDS_MESSAGE
    fields: List[str] = []
    for e in errors:
        # ("body", "price", "float") -> "price"; union members add the trailing part
        loc = [str(part) for part in e.get("loc", ()) if part != "body"]
        name = loc[0] if loc else "body"
        if name not in fields:
            fields.append(name)
    return "Invalid product fields: " + ", ".join(fields)


_HTTP_ERROR_KINDS = {
    status.HTTP_404_NOT_FOUND: "NotFoundError",
    status.HTTP_405_METHOD_NOT_ALLOWED: "MethodNotAllowedError",
}


# ---------------------------
# Registration
# ---------------------------
def register_error_handlers(app: FastAPI) -> None:
    """Install the error-to-response mapping on ``app``."""

    @app.exception_handler(ProductAPIError)
    async def handle_product_error(request: Request, exc: ProductAPIError) -> JSONResponse:
        logger.warning("%s on %s %s: %s", exc.kind, request.method, request.url.path, exc.message)
        return _error_response(exc.status_code, exc.kind, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
        err = ValidationError(validation_message(exc.errors()))
        logger.warning("ValidationError on %s %s: %s", request.method, request.url.path, exc.errors())
        return _error_response(err.status_code, err.kind, err.message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        kind = _HTTP_ERROR_KINDS.get(exc.status_code, "HTTPError")
        logger.warning("%s on %s %s", kind, request.method, request.url.path)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": kind, "message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "InternalServerError",
            "An unexpected error occurred",
        )

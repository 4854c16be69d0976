"""
Exception handlers registered on the application.

FastAPI answers an unreadable request body (malformed JSON, a JSON
array instead of an object, no body at all) with a 422 and its own
error shape.  The handlers below turn those into the same
``400 {"errors": [...]}`` response that field validation produces, so
clients only have to understand one shape for a bad payload.

Other framework errors (unknown route, method not allowed) keep their
status but are reported as ``{"error": "<detail>"}``.
"""

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

BODY_REQUIRED = "A non-empty request body is required."
BODY_NOT_JSON = "The request body is not valid JSON."
BODY_NOT_OBJECT = "The request body must be a JSON object."


def body_was_sent(request: Request) -> bool:
    """Tell an absent body apart from a literal JSON ``null``.

    FastAPI reports both as a missing body, so look at the framing
    headers instead.
    """
    if "chunked" in request.headers.get("transfer-encoding", "").lower():
        return True
    try:
        return int(request.headers.get("content-length", "0")) > 0
    except ValueError:
        return False


def _describe(error: Dict[str, Any], body_sent: bool) -> str:
    loc = tuple(error.get("loc", ()))
    kind = error.get("type", "")
    if kind == "json_invalid":
        return BODY_NOT_JSON
    if loc == ("body",):
        if kind == "missing":
            return BODY_NOT_OBJECT if body_sent else BODY_REQUIRED
        if kind in {"dict_type", "model_attributes_type"}:
            return BODY_NOT_OBJECT
    field = ".".join(str(part) for part in loc[1:]) if loc[:1] == ("body",) else ".".join(str(part) for part in loc)
    message = error.get("msg", "Invalid value.")
    return f"{field}: {message}" if field else message


def request_errors(exc: RequestValidationError, body_sent: bool = False) -> List[str]:
    """Flatten a ``RequestValidationError`` into human readable messages."""
    return [_describe(error, body_sent) for error in exc.errors()]


def _bad_request(request: Request, errors: List[str]) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, "; ".join(errors))
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": errors})


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _bad_request(request, request_errors(exc, body_was_sent(request)))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # FastAPI raises a plain 400 HTTPException when the body cannot be
    # decoded at all (e.g. bytes that are not UTF-8).
    if exc.status_code == status.HTTP_400_BAD_REQUEST:
        return _bad_request(request, [BODY_NOT_JSON])
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
